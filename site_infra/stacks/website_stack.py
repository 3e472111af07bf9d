"""CDK stack for the static website."""

from typing import Any

import aws_cdk as cdk
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct

from site_infra.cdk_constructs import StaticSiteConstruct
from site_infra.config import SiteConfig


class WebsiteStack(cdk.Stack):
  """Stack for the website bucket, distribution and content.

  Pass the hosted zone and certificate from a DomainStack for the composed
  setup, or neither for a standalone site on the cloudfront.net domain.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    hosted_zone: route53.IHostedZone | None = None,
    certificate: acm.ICertificate | None = None,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, cross_region_references=True, **kwargs)

    self.site = StaticSiteConstruct(
      self,
      "Site",
      site_config=site_config,
      hosted_zone=hosted_zone,
      certificate=certificate,
    )
