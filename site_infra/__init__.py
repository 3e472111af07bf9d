"""AWS CDK infrastructure for a static website."""
