"""CDK stack for everything owned by the domain: hosted zone records and certificate."""

from collections.abc import Sequence
from typing import Any

import aws_cdk as cdk
from aws_cdk import aws_route53 as route53
from constructs import Construct

from site_infra.cdk_constructs import DnsRecords, DnsValidatedCertificate
from site_infra.config import CERTIFICATE_REGION
from site_infra.dns_records import DnsRecord


class DomainStack(cdk.Stack):
  """Hosted zone lookup, configured DNS records and the site certificate.

  The hosted zone was created when the domain was registered and is only
  looked up here, never managed. Must be deployed in us-east-1 because
  CloudFront only accepts certificates from that region.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    dns_records: Sequence[DnsRecord] = (),
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, cross_region_references=True, **kwargs)

    if self.region != CERTIFICATE_REGION:
      raise ValueError(f"DomainStack must be deployed in {CERTIFICATE_REGION}")

    self.domain_name = domain_name

    self.hosted_zone = route53.HostedZone.from_lookup(
      self,
      "HostedZone",
      domain_name=domain_name,
    )

    # Records from the configuration file (mail, verification, ...)
    self.dns = DnsRecords(
      self,
      "Dns",
      hosted_zone=self.hosted_zone,
      domain_name=domain_name,
    )
    self.dns.create_configured_records(dns_records)

    # Hooked up to the CloudFront distribution in the WebsiteStack
    self.site_certificate = DnsValidatedCertificate(
      self,
      "SiteCertificate",
      domain_name=domain_name,
      hosted_zone=self.hosted_zone,
    )
    self.certificate = self.site_certificate.certificate

    cdk.CfnOutput(
      self,
      "HostedZoneId",
      value=self.hosted_zone.hosted_zone_id,
      description="Route 53 hosted zone ID",
    )
    cdk.CfnOutput(
      self,
      "CertificateArn",
      value=self.certificate.certificate_arn,
      description="ACM certificate ARN",
    )
