"""Upload of the local website directory to the content bucket."""

from pathlib import Path

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class SiteDeployment(Construct):
  """Deploys a directory to the bucket and invalidates the whole CDN cache.

  The invalidation runs after each upload, so a deploy is visible at the
  edge immediately instead of after the cached copies expire.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    source_dir: Path,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "DeployWebsite",
      sources=[s3_deploy.Source.asset(str(source_dir))],
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=["/*"],
    )
