"""Audio resources and the interface every sound system implements."""

from __future__ import annotations

import abc
import enum
import os
from typing import Any, Optional, Union

from rhaster.hashing import NULL_UID, UID

PathLike = Union[str, "os.PathLike[str]"]


class SoundType(enum.Enum):
    """Whether a sound is a short effect or a streamed music track."""

    SOUND_EFFECT = 0
    SOUND_TRACK = 1


class Audio:
    """A loaded sound, identified by its sound UID and grouped by a tag UID."""

    __slots__ = ("_sound_type", "_sound_id", "_tag_id")

    def __init__(
        self,
        sound_type: SoundType,
        sound_id: UID = NULL_UID,
        tag_id: UID = NULL_UID,
    ) -> None:
        if not isinstance(sound_type, SoundType):
            raise TypeError(f"sound_type must be a SoundType, not {type(sound_type).__name__}")
        self._sound_type = sound_type
        self._sound_id = sound_id
        self._tag_id = tag_id

    @property
    def sound_type(self) -> SoundType:
        return self._sound_type

    @property
    def sound_id(self) -> UID:
        return self._sound_id

    @property
    def tag_id(self) -> UID:
        return self._tag_id

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._sound_type.name}, "
            f"sound_id={self._sound_id!r}, tag_id={self._tag_id!r})"
        )


class SoundSystem(abc.ABC):
    """Loads audio and controls its playback."""

    @abc.abstractmethod
    def service_type(self) -> Any:
        """Return the kind of service backing this system."""

    @abc.abstractmethod
    def load_sound(self, path: PathLike, sound_type: SoundType, tag_id: UID) -> Audio:
        """Load (or reuse) the sound at ``path`` under the given tag."""

    @abc.abstractmethod
    def play(self, audio: Audio, volume: float, loops: int) -> int:
        """Start playback; return the channel used, or -1."""

    @abc.abstractmethod
    def stop(self, audio: Audio) -> bool:
        """Stop playback; return True on success."""

    @abc.abstractmethod
    def stop_all(self) -> None:
        """Stop every playback."""

    @abc.abstractmethod
    def pause(self, audio: Audio) -> bool:
        """Pause playback; return True on success."""

    @abc.abstractmethod
    def resume(self, audio: Audio) -> bool:
        """Resume playback; return True on success."""

    @abc.abstractmethod
    def is_playing(self, audio: Audio) -> bool:
        """Return whether the sound is playing."""

    @abc.abstractmethod
    def is_paused(self, audio: Audio) -> bool:
        """Return whether the sound is paused."""

    @abc.abstractmethod
    def current_track(self) -> Optional[Audio]:
        """Return the music track being played, if any."""

    @abc.abstractmethod
    def set_master_volume(self, volume: float) -> None:
        """Set the overall volume."""

    @abc.abstractmethod
    def master_volume(self) -> float:
        """Return the overall volume."""

    @abc.abstractmethod
    def set_volume_by_tag(self, tag_id: UID, volume: float) -> None:
        """Set the volume of every sound carrying ``tag_id``."""

    @abc.abstractmethod
    def volume_by_tag(self, tag_id: UID) -> float:
        """Return the volume of sounds carrying ``tag_id``."""