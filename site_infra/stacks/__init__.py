"""CDK stacks for static website infrastructure."""

from .domain_stack import DomainStack
from .website_stack import WebsiteStack

__all__ = ["DomainStack", "WebsiteStack"]
