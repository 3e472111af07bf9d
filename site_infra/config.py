"""Configuration loader for the static website stacks."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import boto3
import yaml
from aws_cdk import RemovalPolicy
from aws_cdk import aws_cloudfront as cloudfront
from botocore.exceptions import BotoCoreError, ClientError
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

# CloudFront only accepts ACM certificates issued in us-east-1
CERTIFICATE_REGION = "us-east-1"

PRICE_CLASSES = {
  "100": cloudfront.PriceClass.PRICE_CLASS_100,
  "200": cloudfront.PriceClass.PRICE_CLASS_200,
  "all": cloudfront.PriceClass.PRICE_CLASS_ALL,
}

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


class ConfigError(ValueError):
  """Raised when required configuration is missing or invalid."""


@dataclass
class SiteConfig:
  """Settings for the website and its DNS records."""

  website_dir: Path = field(default_factory=lambda: PROJECT_ROOT / "website")
  dns_records_path: Path = field(
    default_factory=lambda: PROJECT_ROOT / "configuration" / "dns-records.json"
  )
  comment: str = "Personal website"
  index_document: str = "index.html"
  error_document: str = "error.html"
  price_class: cloudfront.PriceClass = cloudfront.PriceClass.PRICE_CLASS_100
  removal_policy: RemovalPolicy = RemovalPolicy.DESTROY
  include_www: bool = True
  create_dns_records: bool = True
  website_region: str | None = None
  owner: str | None = None
  project: str = "static-website"

  @classmethod
  def from_yaml(cls, path: Path | str = "site.yaml") -> "SiteConfig":
    """Load site settings from a YAML file.

    Relative paths in the file are resolved against the file's directory.
    """
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
      raise ConfigError(f"Config file {path} must contain a mapping at the top level")

    base_dir = path.parent
    config = cls()

    if "website_dir" in data:
      config.website_dir = base_dir / data["website_dir"]
    if "dns_records" in data:
      config.dns_records_path = base_dir / data["dns_records"]

    price_class_str = str(data.get("price_class", "100")).lower()
    if price_class_str not in PRICE_CLASSES:
      raise ConfigError(
        f"Unknown price_class {price_class_str!r}, expected one of {sorted(PRICE_CLASSES)}"
      )
    config.price_class = PRICE_CLASSES[price_class_str]

    removal_policy_str = str(data.get("removal_policy", "destroy")).lower()
    if removal_policy_str not in REMOVAL_POLICIES:
      raise ConfigError(
        f"Unknown removal_policy {removal_policy_str!r}, "
        f"expected one of {sorted(REMOVAL_POLICIES)}"
      )
    config.removal_policy = REMOVAL_POLICIES[removal_policy_str]

    config.comment = data.get("comment", config.comment)
    config.index_document = data.get("index_document", config.index_document)
    config.error_document = data.get("error_document", config.error_document)
    config.include_www = data.get("include_www", config.include_www)
    config.create_dns_records = data.get("create_dns_records", config.create_dns_records)
    config.website_region = data.get("website_region", config.website_region)
    config.owner = data.get("owner", config.owner)
    config.project = data.get("project", config.project)

    return config


def load_domain_name(env_file: Path | str | None = None) -> str:
  """Return DOMAIN_NAME from the environment, reading .env first.

  Variables already set in the environment win over the .env file.
  """
  load_dotenv(dotenv_path=env_file or PROJECT_ROOT / ".env", override=False)

  domain_name = os.environ.get("DOMAIN_NAME", "").strip()
  if not domain_name:
    raise ConfigError("DOMAIN_NAME environment variable is required")
  return domain_name


def resolve_account() -> str | None:
  """Get the AWS account ID from the CDK environment or current credentials."""
  account = os.environ.get("CDK_DEFAULT_ACCOUNT")
  if account:
    return account

  try:
    sts = boto3.client("sts")
    return str(sts.get_caller_identity()["Account"])
  except (BotoCoreError, ClientError):
    # No credentials available; stacks stay account-agnostic
    return None
