"""Main menu of Escape Room Conquest, with name entry and a score table."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from deadline_arcade.highscores import (
    format_score_lines,
    load_scores,
    sorted_scores,
    update_score,
)
from deadline_arcade.invaders import Rect
from deadline_arcade.textinput import NameEntry

TITLE = "Escape Room Conquest"
WINDOW_WIDTH = 768
WINDOW_HEIGHT = 1152
SCORE_WINDOW_SIZE = (400, 400)
FONT_FILE = "menusection/creepster.ttf"
BACKGROUND_FILE = "menusection/menu_background.png"
SCORES_FILE = "highscores.txt"
FONT_SIZE = 36
TITLE_FONT_SIZE = 64
NEW_GAME_POINTS = 10

BUTTON_X = 270
BUTTON_LABELS = ("New Game", "Resume Game", "Help", "Map", "Highest Score", "Exit")
BUTTON_TOPS = (300, 370, 440, 510, 580, 650)

Color = tuple[int, int, int]

YELLOW: Color = (255, 255, 0)
WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
NAME_BACKGROUND: Color = (20, 20, 20)
SCORE_BACKGROUND: Color = (30, 30, 30)


def point_in_rect(x: int, y: int, rect: Rect) -> bool:
    """True when the point lies inside the rectangle or on its edge."""
    return rect.x <= x <= rect.x + rect.w and rect.y <= y <= rect.y + rect.h


@dataclass
class MenuButton:
    """A text button; its size follows the rendered label."""

    rect: Rect
    label: str
    color: Color = YELLOW
    hovered: bool = False
    clicked: bool = False

    def contains(self, x: int, y: int) -> bool:
        return point_in_rect(x, y, self.rect)


def default_buttons() -> list[MenuButton]:
    """The six menu entries, top to bottom."""
    return [
        MenuButton(Rect(BUTTON_X, top, 0, 0), label)
        for label, top in zip(BUTTON_LABELS, BUTTON_TOPS)
    ]


def button_color(button: MenuButton) -> Color:
    """Black once clicked, white while hovered, otherwise its own colour."""
    if button.clicked:
        return BLACK
    if button.hovered:
        return WHITE
    return button.color


@dataclass
class _Options:
    assets: Path = Path(".")
    scores: Path = Path(SCORES_FILE)
    extra: list[str] = field(default_factory=list)


def _parse_args(argv: list[str] | None) -> _Options:
    parser = argparse.ArgumentParser(prog="escape-room-menu", description=TITLE)
    parser.add_argument("--assets", type=Path, default=Path("."),
                        help="directory holding the menusection folder")
    parser.add_argument("--scores", type=Path, default=Path(SCORES_FILE),
                        help="score table file")
    args = parser.parse_args(argv)
    return _Options(assets=args.assets, scores=args.scores)


def _draw_text(screen: pygame.Surface, font: pygame.font.Font, text: str,
               color: Color, pos: tuple[int, int]) -> tuple[int, int]:
    if not text:
        return (0, 0)
    surface = font.render(text, True, color)
    screen.blit(surface, pos)
    return surface.get_size()


def _enter_name(font: pygame.font.Font) -> str:
    entry = NameEntry()
    clock = pygame.time.Clock()
    pygame.key.start_text_input()
    try:
        while not entry.done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return ""
                if event.type == pygame.TEXTINPUT:
                    entry.type(event.text)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_BACKSPACE:
                        entry.backspace()
                    elif event.key == pygame.K_RETURN:
                        entry.submit()

            screen = pygame.display.get_surface()
            screen.fill(NAME_BACKGROUND)
            _draw_text(screen, font, "Enter your name:", WHITE, (100, 200))
            _draw_text(screen, font, entry.text, WHITE, (100, 300))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.key.stop_text_input()
    return entry.text


def _show_high_scores(font: pygame.font.Font, scores_path: Path) -> None:
    lines = format_score_lines(sorted_scores(load_scores(scores_path)))
    screen = pygame.display.set_mode(SCORE_WINDOW_SIZE)
    pygame.display.set_caption("High Scores")
    clock = pygame.time.Clock()
    try:
        open_ = True
        while open_:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    open_ = False
            screen.fill(SCORE_BACKGROUND)
            for row, line in enumerate(lines):
                _draw_text(screen, font, line, WHITE, (50, 50 + 50 * row))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)


def _activate(index: int, font: pygame.font.Font, scores_path: Path) -> bool:
    """Run a button's action; False means the menu should close."""
    label = BUTTON_LABELS[index]
    if label == "New Game":
        name = _enter_name(font)
        if name:
            update_score(scores_path, name, NEW_GAME_POINTS)
    elif label == "Highest Score":
        _show_high_scores(font, scores_path)
    elif label == "Exit":
        return False
    else:
        print(label)
    return True


def _draw_menu(font, title_font, background, buttons: list[MenuButton]) -> None:
    screen = pygame.display.get_surface()
    screen.fill(BLACK)
    if background is not None:
        screen.blit(pygame.transform.scale(background, screen.get_size()), (0, 0))

    title = title_font.render(TITLE, True, WHITE)
    screen.blit(title, ((WINDOW_WIDTH - title.get_width()) // 2, 100))

    for button in buttons:
        w, h = _draw_text(screen, font, button.label, button_color(button),
                          (button.rect.x, button.rect.y))
        button.rect.w, button.rect.h = w, h
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open the menu window; returns the process exit status."""
    options = _parse_args(argv)
    font_path = options.assets / FONT_FILE
    if not font_path.is_file():
        print(f"error: missing font: {font_path}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        background_path = options.assets / BACKGROUND_FILE
        background = (
            pygame.image.load(str(background_path)).convert()
            if background_path.is_file() else None
        )
        font = pygame.font.Font(str(font_path), FONT_SIZE)
        title_font = pygame.font.Font(str(font_path), TITLE_FONT_SIZE)
        buttons = default_buttons()
        clock = pygame.time.Clock()

        running = True
        while running:
            mouse_x, mouse_y = pygame.mouse.get_pos()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    for index, button in enumerate(buttons):
                        if not button.contains(mouse_x, mouse_y):
                            continue
                        for other in buttons:
                            other.clicked = False
                        button.clicked = True
                        if not _activate(index, font, options.scores):
                            running = False

            for button in buttons:
                button.hovered = button.contains(mouse_x, mouse_y)

            _draw_menu(font, title_font, background, buttons)
            clock.tick(60)
    except pygame.error as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())