"""A sound system decorator that logs every request it forwards."""

from __future__ import annotations

import os
import sys
from typing import Any, Optional, TextIO

from rhaster.hashing import UID
from rhaster.sound import Audio, SoundSystem, SoundType

LOGGER_SIG = "[SoundSystemLogger] :> "


def sound_info(audio: Audio) -> str:
    """Describe a sound by its tag and sound UIDs."""
    return f"[TAG: {audio.tag_id.uid}, UID: {audio.sound_id.uid}]"


def _quoted(path: Any) -> str:
    text = os.fspath(path)
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _number(value: float) -> str:
    return f"{value:g}"


class SoundSystemLogger(SoundSystem):
    """Wraps a sound system, writing a line for each request to a log stream.

    Failed stop, pause and resume requests are written to the error stream.
    """

    def __init__(
        self,
        sound_system: SoundSystem,
        log_stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
    ) -> None:
        self._sound_system = sound_system
        self._log_stream = log_stream
        self._error_stream = error_stream

    def _log(self, message: str) -> None:
        stream = self._log_stream if self._log_stream is not None else sys.stdout
        stream.write(f"{LOGGER_SIG}{message}\n")

    def _error(self, message: str) -> None:
        stream = self._error_stream if self._error_stream is not None else sys.stderr
        stream.write(f"{LOGGER_SIG}{message}\n")

    def _report(self, success: bool, done: str, failed: str, audio: Audio) -> bool:
        detail = f"{audio.sound_type.name}: {sound_info(audio)}"
        if success:
            self._log(f"{done} {detail}")
        else:
            self._error(f"{failed} {detail}")
        return success

    def service_type(self) -> Any:
        return self._sound_system.service_type()

    def load_sound(self, path, sound_type: SoundType, tag_id: UID) -> Audio:
        self._log(f"Loading {sound_type.name} from {_quoted(path)}")
        sound = self._sound_system.load_sound(path, sound_type, tag_id)
        self._log(f"Assigned {sound_info(sound)}")
        return sound

    def play(self, audio: Audio, volume: float, loops: int) -> int:
        self._log(f"Requested to playback of {audio.sound_type.name}: {sound_info(audio)}")
        return self._sound_system.play(audio, volume, loops)

    def stop(self, audio: Audio) -> bool:
        success = bool(self._sound_system.stop(audio))
        return self._report(
            success, "Stopped to playback of", "Playback stop requested failed", audio
        )

    def stop_all(self) -> None:
        self._log("Stopped all playbacks")
        self._sound_system.stop_all()

    def pause(self, audio: Audio) -> bool:
        success = bool(self._sound_system.pause(audio))
        return self._report(
            success, "Paused playback of", "Playback pause requested failed", audio
        )

    def resume(self, audio: Audio) -> bool:
        success = bool(self._sound_system.resume(audio))
        return self._report(
            success, "Resumed playback of", "Playback resume requested failed", audio
        )

    def is_playing(self, audio: Audio) -> bool:
        return self._sound_system.is_playing(audio)

    def is_paused(self, audio: Audio) -> bool:
        return self._sound_system.is_paused(audio)

    def current_track(self) -> Optional[Audio]:
        return self._sound_system.current_track()

    def set_master_volume(self, volume: float) -> None:
        self._sound_system.set_master_volume(volume)
        self._log(f"Set master volume to {_number(self._sound_system.master_volume())}")

    def master_volume(self) -> float:
        return self._sound_system.master_volume()

    def set_volume_by_tag(self, tag_id: UID, volume: float) -> None:
        self._sound_system.set_volume_by_tag(tag_id, volume)
        current = self._sound_system.volume_by_tag(tag_id)
        self._log(f"Set volume for tag {tag_id.uid} to {_number(current)}")

    def volume_by_tag(self, tag_id: UID) -> float:
        return self._sound_system.volume_by_tag(tag_id)