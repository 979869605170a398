import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from cubraycaster.image import Image  # noqa: E402
from cubraycaster.player import Key  # noqa: E402
from cubraycaster.window import Window  # noqa: E402


@pytest.fixture
def window():
    win = Window(300, 300, "win1")
    yield win
    win.close()


def _marked_image(color):
    image = Image(4, 4)
    image.put_pixel(2, 3, color)
    return image


def test_window_has_requested_size_and_title(window):
    assert window.size == (300, 300)
    assert window.surface.get_size() == (300, 300)
    assert pygame.display.get_caption()[0] == "win1"


def test_show_copies_pixels(window):
    image = Image(10, 10)
    image.put_pixel(1, 2, 0x112233)
    window.show(image)
    assert tuple(window.surface.get_at((1, 2)))[:3] == (0x11, 0x22, 0x33)
    assert tuple(window.surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_loop_hook_runs_until_stopped(window):
    calls = []
    image = _marked_image(0x445566)

    def hook():
        calls.append(1)
        if len(calls) == 3:
            window.show(image)
            window.stop()

    window.on_loop(hook)
    window.run()
    assert len(calls) == 3
    assert tuple(window.surface.get_at((2, 3)))[:3] == (0x44, 0x55, 0x66)


def test_key_presses_are_translated(window):
    keys = []
    window.on_key(keys.append)
    window.on_loop(window.stop)
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    window.run()
    assert keys == [Key.LEFT, Key.W, Key.ESCAPE]


def test_close_request_calls_hook(window):
    closed = []
    image = _marked_image(0x778899)

    def on_close():
        closed.append(True)
        window.show(image)
        window.stop()

    window.on_close(on_close)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    window.run()
    assert closed == [True]
    assert tuple(window.surface.get_at((2, 3)))[:3] == (0x77, 0x88, 0x99)


def test_recreating_window_after_close():
    first = Window(300, 300, "win1")
    first.close()
    assert first.is_open is False
    second = Window(200, 150, "new win")
    try:
        assert second.size == (200, 150)
        assert second.surface.get_size() == (200, 150)
    finally:
        second.close()


def test_run_after_close_returns_without_hooks():
    win = Window(50, 50, "closed")
    calls = []
    win.on_loop(lambda: calls.append(1))
    win.close()
    win.run()
    assert calls == []


def test_show_on_closed_window_raises():
    win = Window(20, 20, "closed")
    win.close()
    with pytest.raises(RuntimeError):
        win.show(Image(2, 2))