"""Route 53 DNS constructs."""

from collections.abc import Sequence

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct

from site_infra.dns_records import DnsRecord


class DnsRecords(Construct):
  """DNS records in an existing hosted zone."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    hosted_zone: route53.IHostedZone,
    domain_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.hosted_zone = hosted_zone
    self.domain_name = domain_name

  def create_configured_records(self, records: Sequence[DnsRecord]) -> None:
    """Create one record set per declaration from the configuration file."""
    for index, record in enumerate(records):
      route53.RecordSet(
        self,
        f"Record{index}",
        zone=self.hosted_zone,
        record_type=record.record_type,
        record_name=record.record_name_for(self.domain_name),
        target=route53.RecordTarget.from_values(*record.values),
      )

  def create_cloudfront_records(
    self,
    distribution: cloudfront.IDistribution,
    include_www: bool = True,
  ) -> None:
    """Create apex (and www) A records aliasing the CloudFront distribution."""
    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    # Apex domain A record
    route53.ARecord(
      self,
      "ApexRecord",
      zone=self.hosted_zone,
      target=target,
    )

    if include_www:
      route53.ARecord(
        self,
        "WWWRecord",
        zone=self.hosted_zone,
        record_name="www",
        target=target,
      )
