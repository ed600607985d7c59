"""Static sound catalog adapters."""

from infrastructure.sounds.catalog import BUILTIN_OPTIONS, BuiltinSoundCatalog

__all__ = ["BUILTIN_OPTIONS", "BuiltinSoundCatalog"]
