"""Main composite construct for the website infrastructure."""

from aws_cdk import Annotations, CfnOutput
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct

from site_infra.config import ConfigError, SiteConfig

from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .site_deployment import SiteDeployment
from .storage import StorageBucket


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates:
  - Private S3 bucket for static content
  - CloudFront distribution with origin access control
  - Deployment of the local website directory, with cache invalidation
  - (Composed mode) custom domains, certificate and apex/www alias records

  Standalone mode (no hosted zone and no certificate) serves the site from
  the distribution's cloudfront.net domain.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    hosted_zone: route53.IHostedZone | None = None,
    certificate: acm.ICertificate | None = None,
  ) -> None:
    super().__init__(scope, id)

    if (hosted_zone is None) != (certificate is None):
      raise ValueError(
        "hosted_zone and certificate must be given together, or both omitted for standalone mode"
      )
    self._check_website_dir(site_config)

    self.standalone = hosted_zone is None
    self.domain_name = None if hosted_zone is None else hosted_zone.zone_name

    if self.standalone:
      Annotations.of(self).add_info(
        "Standalone mode: no custom domain, certificate or DNS alias records"
      )

    # Storage
    self.bucket = StorageBucket(
      self,
      "Storage",
      removal_policy=site_config.removal_policy,
    )

    # CloudFront Distribution
    self.distribution = CloudFrontDistribution(
      self,
      "CloudFront",
      bucket=self.bucket.bucket,
      certificate=certificate,
      domain_name=self.domain_name,
      include_www=site_config.include_www,
      comment=site_config.comment,
      index_document=site_config.index_document,
      error_document=site_config.error_document,
      price_class=site_config.price_class,
    )

    # DNS Records pointing to CloudFront
    self.dns: DnsRecords | None = None
    if hosted_zone is not None and self.domain_name is not None:
      self.dns = DnsRecords(
        self,
        "Dns",
        hosted_zone=hosted_zone,
        domain_name=self.domain_name,
      )
      self.dns.create_cloudfront_records(
        distribution=self.distribution.distribution,
        include_www=site_config.include_www,
      )

    # Static content upload
    self.deployment = SiteDeployment(
      self,
      "Content",
      source_dir=site_config.website_dir,
      bucket=self.bucket.bucket,
      distribution=self.distribution.distribution,
    )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "SiteUrl",
      value=f"https://{self.domain_name or self.distribution.distribution.distribution_domain_name}",
      description="Website URL",
    )

  @staticmethod
  def _check_website_dir(site_config: SiteConfig) -> None:
    website_dir = site_config.website_dir
    if not website_dir.is_dir():
      raise ConfigError(f"Website directory not found: {website_dir}")
    for document in (site_config.index_document, site_config.error_document):
      if not (website_dir / document).is_file():
        raise ConfigError(f"Website directory {website_dir} is missing {document}")
