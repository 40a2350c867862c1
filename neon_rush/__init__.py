"""Package initializer for the Neon Rush lane runner."""

from __future__ import annotations

from .config import settings as settings  # Re-export for compatibility.

__all__ = ["settings"]
