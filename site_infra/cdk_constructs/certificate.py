"""ACM certificate with DNS validation."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct


class DnsValidatedCertificate(Construct):
  """ACM certificate for a domain and its first-level wildcard.

  Validation records are written into the hosted zone by ACM itself, so no
  email approval is needed.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone: route53.IHostedZone,
  ) -> None:
    super().__init__(scope, id)

    self.certificate = acm.Certificate(
      self,
      "Certificate",
      domain_name=domain_name,
      certificate_name=domain_name,
      subject_alternative_names=[f"*.{domain_name}"],
      validation=acm.CertificateValidation.from_dns(hosted_zone),
    )
