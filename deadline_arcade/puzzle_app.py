"""Window, input and drawing for the Deadline Decoder riddle game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

import pygame

from deadline_arcade.puzzle import PuzzleSession
from deadline_arcade.textinput import NameEntry

TITLE = "Deadline Decoder"
WIN_TITLE = "Decryptor Unlocked"
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
WIN_SIZE = (800, 600)
FONT_FILE = "impact.ttf"
BACKGROUND_FILE = "puzzleimage.png"
DECRYPTOR_FILE = "decryptorimage.png"
FONT_SIZE = 24
WRAP_LENGTH = 800

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def centered_x(width: int, screen_width: int) -> int:
    """Left edge that centres ``width`` pixels, halved towards zero."""
    diff = screen_width - width
    return diff // 2 if diff >= 0 else -((-diff) // 2)


def _wrap_lines(text: str, measure: Callable[[str], int], width: int) -> list[str]:
    """Split text at newlines, then wrap each paragraph at word boundaries."""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        line = ""
        for word in paragraph.split(" "):
            candidate = word if not line else f"{line} {word}"
            if line and measure(candidate) > width:
                lines.append(line)
                line = word
            else:
                line = candidate
        lines.append(line)
    return lines


def _render(font: pygame.font.Font, text: str, color) -> pygame.Surface | None:
    if not text:
        return None
    lines = _wrap_lines(text, lambda s: font.size(s)[0], WRAP_LENGTH)
    rendered = [font.render(line, True, color) if line else None for line in lines]
    width = max((s.get_width() for s in rendered if s is not None), default=1)
    step = font.get_linesize()
    surface = pygame.Surface((width, step * len(lines)), pygame.SRCALPHA)
    for row, line_surface in enumerate(rendered):
        if line_surface is not None:
            surface.blit(line_surface, (0, row * step))
    return surface


def _blit_centered(screen, font, text: str, y: int) -> None:
    surface = _render(font, text, WHITE)
    if surface is not None:
        screen.blit(surface, (centered_x(surface.get_width(), SCREEN_WIDTH), y))


def _load_optional(path: Path, size: tuple[int, int]) -> pygame.Surface | None:
    if not path.is_file():
        print(f"Failed to load image: {path}", file=sys.stderr)
        return None
    return pygame.transform.scale(pygame.image.load(str(path)).convert(), size)


def _enter_name(screen, font) -> str | None:
    entry = NameEntry()
    clock = pygame.time.Clock()
    pygame.key.start_text_input()
    try:
        while not entry.done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
                if event.type == pygame.TEXTINPUT:
                    entry.type(event.text)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_BACKSPACE:
                        entry.backspace()
                    elif event.key == pygame.K_RETURN:
                        entry.submit()
            screen.fill(BLACK)
            _blit_centered(screen, font, "Enter your name to begin:", 250)
            _blit_centered(screen, font, entry.text, 320)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.key.stop_text_input()
    return entry.text


def _handle_key(session: PuzzleSession, key: int, now: int) -> bool:
    """Apply one key press; False means the game is over."""
    if session.active:
        if key == pygame.K_BACKSPACE:
            session.backspace()
        elif key == pygame.K_RETURN:
            session.submit()
        else:
            # The key code's low byte is taken as the typed character.
            session.type_char(chr(key & 0xFF))
    if (session.solved or session.failed) and key == pygame.K_SPACE:
        session.advance(now)
        if session.finished:
            return False
    return True


def _play(screen, font, background, name: str) -> None:
    session = PuzzleSession()
    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            if event.type == pygame.MOUSEBUTTONDOWN:
                session.click(*event.pos, pygame.time.get_ticks())
            if event.type == pygame.KEYDOWN:
                if not _handle_key(session, event.key, pygame.time.get_ticks()):
                    running = False

        now = pygame.time.get_ticks()
        session.update(now)

        screen.fill(BLACK)
        if background is not None:
            screen.blit(background, (0, 0))
        y = SCREEN_HEIGHT - 100 if not session.started else 100
        _blit_centered(screen, font, session.status_text(now), y)

        welcome = _render(font, f"Welcome, {name}!", WHITE)
        if welcome is not None:
            screen.blit(welcome, (SCREEN_WIDTH - welcome.get_width() - 20, 20))
        pygame.display.flip()
        clock.tick(60)


def _show_decryptor(assets: Path) -> None:
    screen = pygame.display.set_mode(WIN_SIZE)
    pygame.display.set_caption(WIN_TITLE)
    image = _load_optional(assets / DECRYPTOR_FILE, WIN_SIZE)
    clock = pygame.time.Clock()
    showing = True
    while showing:
        for event in pygame.event.get():
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                showing = False
        screen.fill(BLACK)
        if image is not None:
            screen.blit(image, (0, 0))
        pygame.display.flip()
        clock.tick(60)


def main(argv: list[str] | None = None) -> int:
    """Ask for a name, run the riddles, then reveal the decryptor."""
    parser = argparse.ArgumentParser(prog="deadline-decoder", description=TITLE)
    parser.add_argument("--assets", type=Path, default=Path("."),
                        help="directory holding the font and images")
    args = parser.parse_args(argv)

    font_path = args.assets / FONT_FILE
    if not font_path.is_file():
        print(f"error: failed to load font: {font_path}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(str(font_path), FONT_SIZE)
        background = _load_optional(args.assets / BACKGROUND_FILE,
                                    (SCREEN_WIDTH, SCREEN_HEIGHT))
        name = _enter_name(screen, font)
        if name is None:
            return 0
        _play(screen, font, background, name)
        _show_decryptor(args.assets)
    except pygame.error as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())