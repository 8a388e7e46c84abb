"""A sound system decorator that performs playback requests on a worker thread."""

from __future__ import annotations

import enum
import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, Optional

from rhaster.hashing import UID
from rhaster.sound import Audio, SoundSystem, SoundType


class PlaybackMode(enum.Enum):
    PLAY = enum.auto()
    STOP = enum.auto()
    PAUSE = enum.auto()
    RESUME = enum.auto()


@dataclass(frozen=True)
class _PlaybackRequest:
    mode: PlaybackMode
    audio: Audio
    volume: float = 1.0
    loops: int = 0


class ParallelSoundSystem(SoundSystem):
    """Queues play, stop, pause and resume requests for a background thread.

    Queued requests return at once: ``play`` gives -1 and the others False.
    Every other call goes straight to the wrapped system. Requests still
    queued when the system is closed are dropped.
    """

    def __init__(self, sound_system: SoundSystem) -> None:
        self._impl = sound_system
        self._queue: deque[_PlaybackRequest] = deque()
        self._cond = threading.Condition()
        self._running = True
        self._worker = threading.Thread(
            target=self._work, name="parallel-sound", daemon=True
        )
        self._worker.start()

    def close(self) -> None:
        """Stop the worker thread and wait for it to finish."""
        with self._cond:
            self._running = False
            self._cond.notify_all()
        if self._worker.is_alive() and self._worker is not threading.current_thread():
            self._worker.join()

    def __enter__(self) -> "ParallelSoundSystem":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _work(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._queue or not self._running)
                if not self._running:
                    return
                request = self._queue.popleft()
            self._dispatch(request)

    def _dispatch(self, request: _PlaybackRequest) -> None:
        if request.mode is PlaybackMode.PLAY:
            self._impl.play(request.audio, request.volume, request.loops)
        elif request.mode is PlaybackMode.STOP:
            self._impl.stop(request.audio)
        elif request.mode is PlaybackMode.PAUSE:
            self._impl.pause(request.audio)
        elif request.mode is PlaybackMode.RESUME:
            self._impl.resume(request.audio)

    def _enqueue(self, request: _PlaybackRequest) -> None:
        with self._cond:
            if not self._running:
                raise RuntimeError("sound system is closed")
            self._queue.append(request)
            self._cond.notify_all()

    def service_type(self) -> Any:
        return self._impl.service_type()

    def load_sound(self, path, sound_type: SoundType, tag_id: UID) -> Audio:
        return self._impl.load_sound(path, sound_type, tag_id)

    def play(self, audio: Audio, volume: float, loops: int) -> int:
        self._enqueue(_PlaybackRequest(PlaybackMode.PLAY, audio, volume, loops))
        return -1

    def stop(self, audio: Audio) -> bool:
        self._enqueue(_PlaybackRequest(PlaybackMode.STOP, audio))
        return False

    def stop_all(self) -> None:
        self._impl.stop_all()

    def pause(self, audio: Audio) -> bool:
        self._enqueue(_PlaybackRequest(PlaybackMode.PAUSE, audio))
        return False

    def resume(self, audio: Audio) -> bool:
        self._enqueue(_PlaybackRequest(PlaybackMode.RESUME, audio))
        return False

    def is_playing(self, audio: Audio) -> bool:
        return self._impl.is_playing(audio)

    def is_paused(self, audio: Audio) -> bool:
        return self._impl.is_paused(audio)

    def current_track(self) -> Optional[Audio]:
        return self._impl.current_track()

    def set_master_volume(self, volume: float) -> None:
        self._impl.set_master_volume(volume)

    def master_volume(self) -> float:
        return self._impl.master_volume()

    def set_volume_by_tag(self, tag_id: UID, volume: float) -> None:
        self._impl.set_volume_by_tag(tag_id, volume)

    def volume_by_tag(self, tag_id: UID) -> float:
        return self._impl.volume_by_tag(tag_id)