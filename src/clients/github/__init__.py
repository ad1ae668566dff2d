"""GitHub adapters implementing the collector capabilities."""

from .client import GitHubClient
from .combined import CombinedCapabilities

__all__ = ["GitHubClient", "CombinedCapabilities"]
