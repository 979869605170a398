"""A single on-screen window with loop, key and close hooks."""

from __future__ import annotations

from collections.abc import Callable

import pygame

from .image import Image

LoopHook = Callable[[], object]
KeyHook = Callable[[int], object]
CloseHook = Callable[[], object]

# Key symbols reported for the special keys; printable keys keep their code.
_KEYSYMS = {
    pygame.K_ESCAPE: 0xFF1B,
    pygame.K_LEFT: 0xFF51,
    pygame.K_UP: 0xFF52,
    pygame.K_RIGHT: 0xFF53,
    pygame.K_DOWN: 0xFF54,
}


def _to_rgbx(data: bytes) -> bytearray:
    """Reorder B, G, R, X pixel bytes into R, G, B, X."""
    out = bytearray(data)
    out[0::4] = data[2::4]
    out[2::4] = data[0::4]
    return out


class Window:
    """A fixed-size window that shows images and dispatches input events.

    ``run`` processes events until ``stop`` is called or the window is closed.
    A stop request stays in effect for later calls to ``run``.
    """

    def __init__(self, width: int, height: int, title: str) -> None:
        pygame.display.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.width = width
        self.height = height
        self.title = title
        self._loop_hook: LoopHook | None = None
        self._key_hook: KeyHook | None = None
        self._close_hook: CloseHook | None = None
        self._open = True
        self._stopped = False

    @property
    def size(self) -> tuple[int, int]:
        """The window's (width, height)."""
        return self.width, self.height

    @property
    def is_open(self) -> bool:
        """True until ``close`` is called."""
        return self._open

    def on_loop(self, callback: LoopHook | None) -> None:
        """Call ``callback`` once per loop pass, after pending events."""
        self._loop_hook = callback

    def on_key(self, callback: KeyHook | None) -> None:
        """Call ``callback(keysym)`` for every key press."""
        self._key_hook = callback

    def on_close(self, callback: CloseHook | None) -> None:
        """Call ``callback()`` when the user asks to close the window."""
        self._close_hook = callback

    def show(self, image: Image) -> None:
        """Copy ``image`` to the top-left corner of the window."""
        if not self._open:
            raise RuntimeError("the window is closed")
        pixels = _to_rgbx(image.to_bytes())
        picture = pygame.image.frombuffer(
            bytes(pixels), (image.width, image.height), "RGBX")
        self.surface.blit(picture, (0, 0))
        pygame.display.flip()

    @staticmethod
    def _keysym(key: int) -> int:
        return _KEYSYMS.get(key, key)

    def _dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            if self._close_hook is not None:
                self._close_hook()
        elif event.type == pygame.KEYDOWN:
            if self._key_hook is not None:
                self._key_hook(self._keysym(event.key))

    def run(self) -> None:
        """Process events and loop hooks until stopped or closed."""
        while self._open and not self._stopped:
            if self._loop_hook is not None:
                events = pygame.event.get()
            else:
                events = [pygame.event.wait()]
            for event in events:
                if self._stopped or not self._open:
                    break
                self._dispatch(event)
            if self._loop_hook is not None and self._open:
                self._loop_hook()

    def stop(self) -> None:
        """Make ``run`` return after the current pass."""
        self._stopped = True

    def close(self) -> None:
        """Destroy the window; further calls do nothing."""
        if self._open:
            self._open = False
            pygame.display.quit()