"""Window, input and drawing for the Circuit Maze game."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from deadline_arcade.circuit import (
    COLS,
    ROWS,
    TILE_SIZE,
    CircuitMaze,
    Tile,
    glow_level,
)

TITLE = "Circuit Maze Game"
FONT_FILE = "arial.ttf"
BACKGROUND_FILE = "background.png"
LABEL_SIZE = 20
TIMER_SIZE = 20
RESULT_SIZE = 24
GRID_WIDTH = COLS * TILE_SIZE
GRID_HEIGHT = ROWS * TILE_SIZE
WINDOW_SIZE = (GRID_WIDTH, GRID_HEIGHT + 50)

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
YELLOW: Color = (255, 255, 0)
CYAN: Color = (0, 255, 255)
CORRECT_FILL = (0, 255, 0, 100)
WRONG_FILL = (255, 0, 0, 100)


@dataclass(frozen=True)
class Settings:
    """How the game is started."""

    assets: Path = Path(".")
    glow: bool = True

    def asset(self, name: str) -> Path:
        return self.assets / name

    def missing_assets(self) -> list[Path]:
        names = (FONT_FILE, BACKGROUND_FILE)
        return [self.asset(n) for n in names if not self.asset(n).is_file()]


def parse_args(argv: list[str] | None = None) -> Settings:
    """Read command-line options into game settings."""
    parser = argparse.ArgumentParser(prog="circuit-maze", description=TITLE)
    parser.add_argument("--assets", type=Path, default=Path("."),
                        help="directory holding the font and background")
    parser.add_argument("--no-glow", dest="glow", action="store_false",
                        help="draw without the pulsing glow")
    args = parser.parse_args(argv)
    return Settings(assets=args.assets, glow=args.glow)


def _tile_rect(row: int, col: int) -> pygame.Rect:
    return pygame.Rect(col * TILE_SIZE, row * TILE_SIZE, TILE_SIZE - 2, TILE_SIZE - 2)


def _fill_color(tile: Tile) -> tuple[int, int, int, int] | None:
    if tile.wrong:
        return WRONG_FILL
    if tile.visited:
        return CORRECT_FILL
    return None


def _draw(screen, fonts, maze: CircuitMaze, background, settings: Settings,
          elapsed: float, mouse: tuple[int, int]) -> None:
    label_font, timer_font, result_font = fonts
    glow = glow_level(elapsed)
    screen.fill(BLACK)

    if settings.glow:
        tinted = background.copy()
        tinted.fill((glow, glow, glow), special_flags=pygame.BLEND_RGB_MULT)
        screen.blit(tinted, (0, 0))
    else:
        screen.blit(background, (0, 0))

    for row in range(ROWS):
        for col in range(COLS):
            tile = maze.tile_at(row, col)
            rect = _tile_rect(row, col)
            fill = _fill_color(tile)
            if fill is not None:
                overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
                overlay.fill(fill)
                screen.blit(overlay, rect.topleft)
            if rect.collidepoint(mouse):
                pygame.draw.rect(screen, CYAN, rect, 3)
            else:
                pygame.draw.rect(screen, WHITE, rect, 1)
            if tile.label:
                color = (glow, glow, 255) if settings.glow and tile.is_component else WHITE
                text = label_font.render(tile.label, True, color)
                screen.blit(text, (col * TILE_SIZE + 10, row * TILE_SIZE + 35))

    timer = timer_font.render(f"Time Left: {maze.time_left(elapsed)}", True, YELLOW)
    screen.blit(timer, (10, GRID_HEIGHT + 10))
    if maze.finished and maze.result:
        screen.blit(result_font.render(maze.result, True, WHITE), (200, GRID_HEIGHT + 10))
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open the maze window; returns the process exit status."""
    settings = parse_args(argv)
    missing = settings.missing_assets()
    if missing:
        print(f"error: missing asset: {missing[0]}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        font_path = str(settings.asset(FONT_FILE))
        fonts = (
            pygame.font.Font(font_path, LABEL_SIZE),
            pygame.font.Font(font_path, TIMER_SIZE),
            pygame.font.Font(font_path, RESULT_SIZE),
        )
        background = pygame.transform.scale(
            pygame.image.load(str(settings.asset(BACKGROUND_FILE))).convert(),
            (GRID_WIDTH, GRID_HEIGHT),
        )

        maze = CircuitMaze()
        clock = pygame.time.Clock()
        start = pygame.time.get_ticks()
        running = True
        while running:
            elapsed = (pygame.time.get_ticks() - start) / 1000.0
            maze.update(elapsed)
            mouse = pygame.mouse.get_pos()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    maze.click(*event.pos)
            _draw(screen, fonts, maze, background, settings, elapsed, mouse)
            clock.tick(60)
    except pygame.error as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())