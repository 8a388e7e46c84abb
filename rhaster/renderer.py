"""Z-ordered texture render queue drawn through a pluggable backend."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional, Protocol, Union

from rhaster.binding import Vec2

Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Rect:
    """An integer rectangle; negative sizes mark a flipped source."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


class Flip(enum.Flag):
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


def create_rect(values: Union[Vec2, Iterable[float]]) -> Rect:
    """Build a rectangle from a position (x, y) or from (x, y, w, h).

    Components are truncated toward zero.
    """
    if isinstance(values, Vec2):
        values = (values.x, values.y)
    parts = tuple(values)
    if len(parts) == 2:
        return Rect(int(parts[0]), int(parts[1]))
    if len(parts) == 4:
        return Rect(*(int(part) for part in parts))
    raise ValueError(f"a rectangle needs 2 or 4 values, got {len(parts)}")


def resolve_flip(src: Rect) -> tuple[Flip, Rect]:
    """Turn negative source sizes into flip flags and a positive rectangle."""
    flip = Flip.NONE
    width, height = src.w, src.h
    if width < 0:
        flip |= Flip.HORIZONTAL
        width = -width
    if height < 0:
        flip |= Flip.VERTICAL
        height = -height
    return flip, replace(src, w=width, h=height)


@dataclass(frozen=True)
class RenderRequest:
    texture: Any
    dst: Rect
    src: Rect = Rect()
    ex: bool = False
    z_index: int = 0


class RenderBackend(Protocol):
    def texture_size(self, texture: Any) -> tuple[int, int]: ...

    def clear(self, color: Color) -> None: ...

    def copy(self, texture: Any, src: Optional[Rect], dst: Rect) -> None: ...

    def copy_ex(self, texture: Any, src: Rect, dst: Rect, flip: Flip) -> None: ...

    def present(self) -> None: ...


def _check_color(color: Iterable[int]) -> Color:
    parts = tuple(color)
    if len(parts) != 4 or not all(isinstance(c, int) and 0 <= c <= 255 for c in parts):
        raise ValueError(f"color must be four integers in 0..255, got {parts!r}")
    return parts  # type: ignore[return-value]


class Renderer:
    """Queues texture draws and flushes them, lowest z-index first.

    Requests with equal z-index are drawn in the order they were queued.
    Scenes submit their draws before ``render`` is called.
    """

    def __init__(self, backend: RenderBackend) -> None:
        self._backend = backend
        self._clear_color: Color = (0, 0, 0, 0)
        self._z_index = 0
        self._queue: list[RenderRequest] = []

    def set_z_index(self, z_index: int) -> None:
        """Set the z-index given to requests queued from now on."""
        self._z_index = z_index

    def _queue_request(self, request: RenderRequest) -> None:
        self._queue.append(request)

    def render_texture(self, texture: Any, position) -> None:
        """Draw a whole texture at its own size at ``position``."""
        width, height = self._backend.texture_size(texture)
        dst = replace(create_rect(position), w=width, h=height)
        self._queue_request(RenderRequest(texture, dst, z_index=self._z_index))

    def render_texture_rect(self, texture: Any, dst_rect) -> None:
        """Draw a whole texture stretched into ``dst_rect``."""
        self._queue_request(RenderRequest(texture, create_rect(dst_rect), z_index=self._z_index))

    def render_partial_texture(self, texture: Any, position, src_rect) -> None:
        """Draw the ``src_rect`` part of a texture at ``position``, unscaled."""
        src = create_rect(src_rect)
        dst = replace(create_rect(position), w=src.w, h=src.h)
        self._queue_request(RenderRequest(texture, dst, src, True, self._z_index))

    def render_partial_texture_rect(self, texture: Any, dst_rect, src_rect) -> None:
        """Draw the ``src_rect`` part of a texture into ``dst_rect``."""
        request = RenderRequest(
            texture, create_rect(dst_rect), create_rect(src_rect), True, self._z_index
        )
        self._queue_request(request)

    def pending_requests(self) -> tuple[RenderRequest, ...]:
        """Return the queued requests in drawing order."""
        return tuple(sorted(self._queue, key=lambda request: request.z_index))

    def render(self) -> None:
        """Clear to the background colour, draw the queue, empty it and present."""
        self._backend.clear(self._clear_color)
        for request in self.pending_requests():
            if request.ex:
                flip, src = resolve_flip(request.src)
                self._backend.copy_ex(request.texture, src, request.dst, flip)
            else:
                self._backend.copy(request.texture, None, request.dst)
        self._queue.clear()
        self._backend.present()

    @property
    def background_color(self) -> Color:
        return self._clear_color

    @background_color.setter
    def background_color(self, color: Iterable[int]) -> None:
        self._clear_color = _check_color(color)