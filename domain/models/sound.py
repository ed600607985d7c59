"""Sound option value object."""

from typing import Optional

from domain.models.base import CamelModel


class SoundOption(CamelModel):
    """A selectable sound cue with its static asset path."""

    key: str
    label: str
    file: str
    lead_seconds: Optional[int] = None

    model_config = {"frozen": True}
