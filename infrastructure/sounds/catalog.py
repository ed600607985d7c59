"""
Built-in sound catalog.

A fixed table of sound cues shipped with the client. Each entry maps a key to
a static asset path; the configured base URL is prefixed when resolving.
"""
from typing import Dict, List

from domain.models import SoundOption, normalize_token

BUILTIN_OPTIONS: List[SoundOption] = [
    SoundOption(key="beep", label="Beep", file="/sounds/beep.wav"),
    SoundOption(key="chime", label="Chime", file="/sounds/chime.wav"),
    SoundOption(key="click", label="Click", file="/sounds/click.wav"),
    SoundOption(key="soft1", label="Soft 1", file="/sounds/soft1.wav"),
    SoundOption(key="soft2", label="Soft 2", file="/sounds/soft2.wav"),
    SoundOption(key="soft3", label="Soft 3", file="/sounds/soft3.wav"),
    SoundOption(key="soft4", label="Soft 4", file="/sounds/soft4.wav"),
    SoundOption(key="countdown", label="Countdown", file="/sounds/countdown.wav"),
    SoundOption(key="race", label="Race Start", file="/sounds/race.wav"),
    SoundOption(
        key="count321",
        label="Count 3-2-1",
        file="/sounds/count321.wav",
        lead_seconds=3,
    ),
]


class BuiltinSoundCatalog:
    """
    Read-only implementation of SoundCatalog over BUILTIN_OPTIONS.

    Safe for concurrent use; the lookup table is built once and never mutated.
    """

    def __init__(self, base_url: str = ""):
        """
        Args:
            base_url: Prefix for asset paths, e.g. "https://cdn.example.com"
        """
        self._base_url = (base_url or "").rstrip("/")
        self._by_key: Dict[str, SoundOption] = {opt.key: opt for opt in BUILTIN_OPTIONS}

    def options(self) -> List[SoundOption]:
        return list(BUILTIN_OPTIONS)

    def is_valid_key(self, key: str) -> bool:
        token = normalize_token(key)
        return not token or token in self._by_key

    def url_by_key(self, key: str) -> str:
        option = self._by_key.get(normalize_token(key))
        if option is None:
            return ""
        return self._base_url + option.file
