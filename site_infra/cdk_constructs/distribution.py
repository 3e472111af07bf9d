"""CloudFront distribution for static website."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct


class CloudFrontDistribution(Construct):
  """CloudFront distribution with a private S3 origin behind origin access control.

  Custom domains are only attached when both a domain name and a certificate
  are given; otherwise the distribution is served from its cloudfront.net name.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate | None = None,
    domain_name: str | None = None,
    include_www: bool = True,
    comment: str | None = None,
    index_document: str = "index.html",
    error_document: str = "error.html",
    price_class: cloudfront.PriceClass = cloudfront.PriceClass.PRICE_CLASS_100,
  ) -> None:
    super().__init__(scope, id)

    domain_names: list[str] | None = None
    if domain_name and certificate:
      domain_names = [domain_name]
      if include_www:
        domain_names.append(f"www.{domain_name}")
    else:
      certificate = None

    # 403 is what S3 returns for missing keys when listing is not allowed
    error_responses = [
      cloudfront.ErrorResponse(
        http_status=status,
        response_http_status=404,
        response_page_path=f"/{error_document}",
      )
      for status in (404, 403)
    ]

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_origin_access_control(bucket),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD,
      ),
      domain_names=domain_names,
      certificate=certificate,
      price_class=price_class,
      comment=comment,
      default_root_object=index_document,
      error_responses=error_responses,
    )
