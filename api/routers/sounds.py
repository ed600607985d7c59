"""
Sounds router.

Lists the built-in sound cues that steps, subsets and exercises may reference.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_sound_catalog
from application.ports import SoundCatalog
from domain.models import SoundOption

router = APIRouter(
    tags=["Sounds"],
)


@router.get("/sounds", response_model=List[SoundOption], response_model_exclude_none=True)
def list_sounds(sound_catalog: SoundCatalog = Depends(get_sound_catalog)):
    """Get all selectable sound options."""
    return sound_catalog.options()
