"""Private S3 bucket holding the website content."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class StorageBucket(Construct):
  """S3 bucket with all public access blocked.

  Content is only readable through CloudFront origin access control.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      enforce_ssl=True,
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )
