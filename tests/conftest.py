"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import pytest

from site_infra.config import SiteConfig


@pytest.fixture
def website_dir(tmp_path: Path) -> Path:
  """Create a minimal website directory."""
  site = tmp_path / "website"
  site.mkdir()
  (site / "index.html").write_text("<h1>index</h1>")
  (site / "error.html").write_text("<h1>error</h1>")
  return site


@pytest.fixture
def site_config(website_dir: Path) -> SiteConfig:
  """Site settings pointing at the temporary website directory."""
  return SiteConfig(website_dir=website_dir)
