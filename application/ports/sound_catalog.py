"""
Sound Catalog Interface (Port).

The catalog is a static lookup; implementations must be safe for concurrent
read-only use.
"""
from typing import List, Protocol

from domain.models import SoundOption


class SoundCatalog(Protocol):
    """Lookup of selectable sound cues."""

    def options(self) -> List[SoundOption]:
        """All selectable sounds in display order."""
        ...

    def is_valid_key(self, key: str) -> bool:
        """True for a known key. The empty key is always valid."""
        ...

    def url_by_key(self, key: str) -> str:
        """Playable URL for a key, or "" for empty/unknown keys."""
        ...
