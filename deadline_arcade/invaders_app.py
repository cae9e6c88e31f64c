"""Window, input and drawing for the Deadline Invaders shooter."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from deadline_arcade.invaders import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TUTORIAL_WIN_SCORE,
    WIN_SCORE,
    InvadersGame,
    generate_encrypted_code,
    glow_intensity,
)
from deadline_arcade.textinput import DEFAULT_NAME, NameEntry

TITLE = "Deadline Invaders"
FONT_FILE = "arial.ttf"
BACKGROUND_FILE = "space_background.png"
ENEMY_FILE = "ship2.png"
PLAYER_FILE = "ship1.png"
FONT_SIZE = 24
FRAME_DELAY_MS = 16
END_SCREEN_MS = 5000

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
GREEN: Color = (0, 255, 0)
RED: Color = (255, 0, 0)
BLACK: Color = (0, 0, 0)
YELLOW: Color = (255, 255, 0)


@dataclass(frozen=True)
class ScreenLine:
    """One line of text with its colour and top-left position."""

    text: str
    color: Color
    pos: tuple[int, int]


@dataclass(frozen=True)
class Settings:
    """How a game session is started."""

    assets: Path = Path(".")
    win_score: int = WIN_SCORE
    seed: int | None = None

    def asset(self, name: str) -> Path:
        return self.assets / name

    def missing_assets(self) -> list[Path]:
        """Asset files that are needed but not present."""
        names = (FONT_FILE, BACKGROUND_FILE, ENEMY_FILE, PLAYER_FILE)
        return [self.asset(name) for name in names if not self.asset(name).is_file()]


def parse_args(argv: list[str] | None = None) -> Settings:
    """Read command-line options into game settings."""
    parser = argparse.ArgumentParser(prog="deadline-invaders", description=TITLE)
    parser.add_argument("--assets", type=Path, default=Path("."),
                        help="directory holding the font and images")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--tutorial", action="store_true",
                      help=f"win at {TUTORIAL_WIN_SCORE} points")
    mode.add_argument("--win-score", type=int, default=None,
                      help=f"points needed to win (default {WIN_SCORE})")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for enemy placement and the prize code")
    args = parser.parse_args(argv)

    if args.win_score is not None and args.win_score <= 0:
        parser.error("--win-score must be positive")
    if args.tutorial:
        win_score = TUTORIAL_WIN_SCORE
    elif args.win_score is not None:
        win_score = args.win_score
    else:
        win_score = WIN_SCORE
    return Settings(assets=args.assets, win_score=win_score, seed=args.seed)


def end_screen_lines(
    name: str, score: int, won: bool, rng: random.Random | None = None
) -> list[ScreenLine]:
    """The text shown once the game is over."""
    lines = [
        ScreenLine("Game Over!", WHITE, (320, 180)),
        ScreenLine("Player: " + name, WHITE, (300, 230)),
        ScreenLine(f"Score: {score}", WHITE, (300, 270)),
    ]
    if won:
        lines.append(ScreenLine(generate_encrypted_code(rng), GREEN, (220, 310)))
    else:
        lines.append(ScreenLine("Try Again!", RED, (300, 310)))
    return lines


def _draw_text(screen: pygame.Surface, font: pygame.font.Font,
               text: str, color: Color, pos: tuple[int, int]) -> None:
    if text:
        screen.blit(font.render(text, True, color), pos)


def _enter_name(screen: pygame.Surface, font: pygame.font.Font) -> str:
    entry = NameEntry()
    pygame.key.start_text_input()
    try:
        while not entry.done:
            screen.fill(BLACK)
            _draw_text(screen, font, "Enter Your Name:", WHITE, (250, 200))
            _draw_text(screen, font, entry.display, WHITE, (250, 250))
            pygame.display.flip()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return DEFAULT_NAME
                if event.type == pygame.TEXTINPUT:
                    entry.type(event.text)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_BACKSPACE:
                        entry.backspace()
                    elif event.key == pygame.K_RETURN:
                        entry.submit()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.key.stop_text_input()
    return entry.text


def _load_image(path: Path) -> pygame.Surface:
    return pygame.image.load(str(path)).convert_alpha()


def _draw_frame(screen, font, game: InvadersGame, background, player_img, enemy_img) -> None:
    screen.fill(BLACK)
    screen.blit(pygame.transform.scale(background, (SCREEN_WIDTH, SCREEN_HEIGHT)), (0, 0))
    player = game.player
    screen.blit(pygame.transform.scale(player_img, (player.w, player.h)), (player.x, player.y))

    glow = glow_intensity(pygame.time.get_ticks())
    glow_color = (glow, glow, glow)
    for enemy in game.enemies:
        r = enemy.rect
        screen.blit(pygame.transform.scale(enemy_img, (r.w, r.h)), (r.x, r.y))
        _draw_text(screen, font, enemy.label, glow_color, (r.x + 5, r.y + 10))

    for bullet in game.bullets:
        r = bullet.rect
        pygame.draw.rect(screen, YELLOW, pygame.Rect(r.x, r.y, r.w, r.h))

    _draw_text(screen, font, f"Score: {game.score}", WHITE, (10, 10))
    pygame.display.flip()


def _show_end_screen(screen, font, name: str, game: InvadersGame, rng: random.Random) -> None:
    screen.fill(BLACK)
    for line in end_screen_lines(name, game.score, game.has_won(), rng):
        _draw_text(screen, font, line.text, line.color, line.pos)
    pygame.display.flip()
    pygame.time.delay(END_SCREEN_MS)


def run(settings: Settings) -> InvadersGame:
    """Play one game in a window and return its final state."""
    missing = settings.missing_assets()
    if missing:
        raise FileNotFoundError(f"missing asset: {missing[0]}")

    rng = random.Random(settings.seed)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(str(settings.asset(FONT_FILE)), FONT_SIZE)

        player_name = _enter_name(screen, font)

        background = _load_image(settings.asset(BACKGROUND_FILE))
        enemy_img = _load_image(settings.asset(ENEMY_FILE))
        player_img = _load_image(settings.asset(PLAYER_FILE))

        game = InvadersGame(win_score=settings.win_score, rng=rng,
                            last_spawn=pygame.time.get_ticks())
        quit_requested = False
        while not quit_requested:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    game.fire()

            keys = pygame.key.get_pressed()
            game.move(bool(keys[pygame.K_LEFT]), bool(keys[pygame.K_RIGHT]))
            game.step(pygame.time.get_ticks())
            if game.is_over():
                quit_requested = True

            _draw_frame(screen, font, game, background, player_img, enemy_img)
            pygame.time.delay(FRAME_DELAY_MS)

        _show_end_screen(screen, font, player_name, game, rng)
        return game
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the shooter; returns the process exit status."""
    settings = parse_args(argv)
    try:
        run(settings)
    except (FileNotFoundError, pygame.error) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())