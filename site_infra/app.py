#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure.

Composed mode (default) deploys a DomainStack in us-east-1 and a
WebsiteStack that uses its hosted zone and certificate. Pass
`-c standalone=true` to deploy only the WebsiteStack without a custom domain.
"""

import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk

from site_infra.config import (
  CERTIFICATE_REGION,
  ConfigError,
  SiteConfig,
  load_domain_name,
  resolve_account,
)
from site_infra.dns_records import DnsRecordError, load_dns_records
from site_infra.stacks.domain_stack import DomainStack
from site_infra.stacks.website_stack import WebsiteStack


def website_region(site_config: SiteConfig) -> str:
  """Region for the WebsiteStack; cross-region references need a concrete one."""
  return (
    site_config.website_region
    or os.environ.get("CDK_DEFAULT_REGION")
    or CERTIFICATE_REGION
  )


def tag_stack(stack: cdk.Stack, site_config: SiteConfig, domain_name: str | None) -> None:
  cdk.Tags.of(stack).add("Project", site_config.project)
  if domain_name:
    cdk.Tags.of(stack).add("Domain", domain_name)
  if site_config.owner:
    cdk.Tags.of(stack).add("Owner", site_config.owner)


def build_composed(
  app: cdk.App,
  domain_name: str,
  site_config: SiteConfig,
  account: str | None = None,
) -> tuple[DomainStack, WebsiteStack]:
  """Create the DomainStack and a WebsiteStack that depends on it."""
  dns_records = (
    load_dns_records(site_config.dns_records_path) if site_config.create_dns_records else []
  )

  domain_stack = DomainStack(
    app,
    "DomainStack",
    domain_name=domain_name,
    dns_records=dns_records,
    env=cdk.Environment(account=account, region=CERTIFICATE_REGION),
    description=f"Hosted zone records and certificate for {domain_name}",
  )

  website_stack = WebsiteStack(
    app,
    "WebsiteStack",
    site_config=site_config,
    hosted_zone=domain_stack.hosted_zone,
    certificate=domain_stack.certificate,
    env=cdk.Environment(account=account, region=website_region(site_config)),
    description=f"Static website for {domain_name}",
  )
  website_stack.add_dependency(domain_stack)

  tag_stack(domain_stack, site_config, domain_name)
  tag_stack(website_stack, site_config, domain_name)
  return domain_stack, website_stack


def build_standalone(
  app: cdk.App,
  site_config: SiteConfig,
  account: str | None = None,
) -> WebsiteStack:
  """Create a WebsiteStack with no hosted zone or certificate."""
  website_stack = WebsiteStack(
    app,
    "WebsiteStack",
    site_config=site_config,
    env=cdk.Environment(account=account, region=website_region(site_config)),
    description="Static website (standalone, no custom domain)",
  )
  tag_stack(website_stack, site_config, None)
  return website_stack


def is_standalone(app: cdk.App) -> bool:
  value = app.node.try_get_context("standalone")
  if isinstance(value, str):
    return value.strip().lower() in ("1", "true", "yes")
  return bool(value)


def load_site_config(app: cdk.App) -> SiteConfig:
  """Load the config named by the `config` context, else site.yaml if present."""
  config_context = app.node.try_get_context("config")
  if config_context is None:
    default_path = Path("site.yaml")
    return SiteConfig.from_yaml(default_path) if default_path.exists() else SiteConfig()

  config_path = Path(config_context)
  if not config_path.is_file():
    raise ConfigError(f"Config file not found: {config_path}")
  return SiteConfig.from_yaml(config_path)


def main(app: cdk.App | None = None) -> None:
  """Create CDK app with the stacks for the configured mode."""
  if app is None:
    app = cdk.App()

  try:
    site_config = load_site_config(app)

    if is_standalone(app):
      build_standalone(app, site_config, account=resolve_account())
    else:
      domain_name = load_domain_name()
      build_composed(app, domain_name, site_config, account=resolve_account())
  except (ConfigError, DnsRecordError) as e:
    print(f"ERROR: {e}", file=sys.stderr)
    sys.exit(1)

  app.synth()


if __name__ == "__main__":
  main()
