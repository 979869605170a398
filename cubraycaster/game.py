"""The game: scene state, frame rendering, key handling and the command."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .config import TEXTURE_KEYS, ConfigError, SceneConfig, has_cub_extension, load_scene
from .image import Image, rgb_to_int
from .player import Player
from .raycast import HEIGHT, WIDTH, Renderer
from .xpm import XpmError, load_xpm

TITLE = "Cobe3D"


class Game:
    """A running scene: the player, wall textures and the frame buffer."""

    def __init__(self, scene: SceneConfig) -> None:
        if scene.floor is None or scene.ceiling is None:
            raise ConfigError("floor and ceiling colours are required")
        if not scene.grid:
            raise ConfigError("Map Not found")
        self.scene = scene
        self.grid = list(scene.grid)
        self.width = max(len(line) for line in self.grid)
        self.height = len(self.grid)
        self.player = Player.from_grid(self.grid)
        self.ceiling = rgb_to_int(*scene.ceiling)
        self.floor = rgb_to_int(*scene.floor)
        self.textures = self._load_textures(scene)
        self.image = Image(WIDTH, HEIGHT)
        self.renderer = Renderer(self.grid, self.textures, WIDTH, HEIGHT)

    @staticmethod
    def _load_textures(scene: SceneConfig) -> dict[str, Image]:
        textures: dict[str, Image] = {}
        for key in TEXTURE_KEYS:
            path = scene.textures.get(key)
            if path is None:
                raise ConfigError(f"'{key}' Texture not loading")
            try:
                textures[key] = load_xpm(path)
            except XpmError as exc:
                raise ConfigError(f"'{key}' Texture not loading") from exc
        return textures

    def frame(self) -> Image:
        """Paint ceiling, floor and walls for the current view and return it."""
        self.image.fill_halves(self.ceiling, self.floor)
        self.renderer.render(self.image, self.player)
        return self.image

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return True if the game should end."""
        return self.player.handle_key(key, self.grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the ``.cub`` file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error\n Too few arguments")
        return 1
    path = args[0]
    if not has_cub_extension(path):
        print("Error\nFile is not .cub")
        return 1
    try:
        game = Game(load_scene(path))
    except ConfigError as exc:
        print(f"Error\n{exc}")
        return 1

    from .window import Window

    window = Window(WIDTH, HEIGHT, TITLE)

    def on_key(key: int) -> None:
        if game.handle_key(key):
            window.stop()

    window.on_loop(lambda: window.show(game.frame()))
    window.on_key(on_key)
    window.on_close(window.stop)
    try:
        window.run()
    finally:
        window.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())