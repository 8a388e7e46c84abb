"""Registry for engine-wide services."""

from __future__ import annotations

from typing import Optional

from rhaster.sound import SoundSystem


class ServiceLocator:
    """Holds the sound system the engine uses."""

    def __init__(self) -> None:
        self._sound_system: Optional[SoundSystem] = None

    def register_sound_system(self, sound_system: SoundSystem) -> SoundSystem:
        """Install ``sound_system``, replacing any earlier one, and return it."""
        self._sound_system = sound_system
        return sound_system

    def sound_system(self) -> SoundSystem:
        """Return the registered sound system.

        Raises LookupError if none has been registered.
        """
        if self._sound_system is None:
            raise LookupError("sound system not registered")
        return self._sound_system

    def is_sound_system_registered(self) -> bool:
        return self._sound_system is not None


SERVICE_LOCATOR = ServiceLocator()