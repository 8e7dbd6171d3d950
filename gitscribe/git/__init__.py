"""Git helpers for collecting context and applying generated artifacts."""

from .context import GitContextCollector
from .publisher import Publisher

__all__ = ["GitContextCollector", "Publisher"]
