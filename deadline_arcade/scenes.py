"""Switch between full-window scene images with a fade from black."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

TITLE = "Image Window Switcher"
WIDTH = 800
HEIGHT = 600
SCENE_FILES = tuple(f"scene{n}.png" for n in range(1, 6))
MAX_HOTKEY = 5
FADE_STEP = 15
FADE_DELAY_MS = 15
FRAME_DELAY_MS = 16


def fade_alphas() -> list[int]:
    """Opacity of the black overlay for each frame of a fade-in."""
    return list(range(255, -1, -FADE_STEP))


@dataclass
class SceneSwitcher:
    """Tracks which of ``count`` scenes is shown."""

    count: int
    current: int = 0

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("at least one scene is needed")
        if not 0 <= self.current < self.count:
            raise ValueError(f"no scene {self.current}")

    def select(self, number: int) -> bool:
        """Show scene ``number`` (1-based hotkey); True if the scene changed."""
        if not 1 <= number <= MAX_HOTKEY or number > self.count:
            return False
        target = number - 1
        if target == self.current:
            return False
        self.current = target
        return True


_HOTKEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
}


def _fade_in(screen: pygame.Surface, image: pygame.Surface) -> None:
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    for alpha in fade_alphas():
        screen.fill((0, 0, 0))
        screen.blit(image, (0, 0))
        overlay.fill((0, 0, 0, alpha))
        screen.blit(overlay, (0, 0))
        pygame.display.flip()
        pygame.time.delay(FADE_DELAY_MS)


def main(argv: list[str] | None = None) -> int:
    """Open the scene window; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="scene-switcher", description=TITLE)
    parser.add_argument("--assets", type=Path, default=Path("."),
                        help="directory holding scene1.png to scene5.png")
    args = parser.parse_args(argv)

    paths = [args.assets / name for name in SCENE_FILES]
    for path in paths:
        if not path.is_file():
            print(f"error: failed to load image {path}", file=sys.stderr)
            return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        scenes = [
            pygame.transform.scale(pygame.image.load(str(p)).convert(), (WIDTH, HEIGHT))
            for p in paths
        ]
        switcher = SceneSwitcher(len(scenes))

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in _HOTKEYS:
                    if switcher.select(_HOTKEYS[event.key]):
                        _fade_in(screen, scenes[switcher.current])
            screen.fill((0, 0, 0))
            screen.blit(scenes[switcher.current], (0, 0))
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
    except pygame.error as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())