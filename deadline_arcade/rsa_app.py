"""Window for the RSA decryptor: name entry, then the decryption form."""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path

import pygame

from deadline_arcade.invaders import Rect
from deadline_arcade.rsa import DECRYPT_BUTTON, FIELD_RECTS, DecryptorForm, Focus
from deadline_arcade.textinput import NameEntry

WIDTH = 900
HEIGHT = 600
FONT_FILE = "DejaVuSans.ttf"
BACKGROUND_FILE = "background.png"
NAME_FONT_SIZE = 28
FORM_FONT_SIZE = 24
ANIMATION_STEP = 0.05
HORIZONTAL_PADDING = 14
VERTICAL_PADDING = 8

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
NAME_BACKGROUND: Color = (20, 20, 40)
FORM_BACKGROUND: Color = (30, 30, 30)
FIELD_OUTLINE: Color = (180, 180, 180)
GREEN: Color = (50, 200, 50)
BUTTON_TEXT: Color = (30, 30, 30)
ERROR_COLOR: Color = (255, 60, 60)
SUCCESS_COLOR: Color = (50, 255, 100)
WELCOME_COLOR: Color = (255, 255, 100)


def background_offset(animation_time: float) -> int:
    """Vertical bob of the background, in whole pixels towards zero."""
    return int(math.sin(animation_time) * 5.0)


def _draw_text(screen: pygame.Surface, font: pygame.font.Font, text: str,
               color: Color, pos: tuple[int, int]) -> None:
    if text:
        screen.blit(font.render(text, True, color), pos)


def _as_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.x, rect.y, rect.w, rect.h)


def _enter_name(screen: pygame.Surface, font: pygame.font.Font) -> str | None:
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
            screen.fill(NAME_BACKGROUND)
            _draw_text(screen, font, "Enter your name:", WHITE, (320, 200))
            _draw_text(screen, font, entry.text, WHITE, (320, 260))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.key.stop_text_input()
    return entry.text


def _draw_form(screen, font, form: DecryptorForm, background, offset: int, name: str) -> None:
    screen.fill(FORM_BACKGROUND)
    if background is not None:
        screen.blit(background, (0, offset))

    _draw_text(screen, font, "Enter n:", WHITE, (50, 40))
    _draw_text(screen, font, "Enter e:", WHITE, (50, 100))
    _draw_text(screen, font, "Encrypted Text:", WHITE, (50, 160))
    _draw_text(screen, font, "Result:", WHITE, (50, 320))

    for rect in FIELD_RECTS.values():
        pygame.draw.rect(screen, FIELD_OUTLINE, _as_pygame(rect), 1)
    pygame.draw.rect(screen, GREEN, _as_pygame(form.focused_rect), 1)

    for focus in Focus:
        rect = FIELD_RECTS[focus]
        _draw_text(screen, font, form.inputs[focus], WHITE,
                   (rect.x + HORIZONTAL_PADDING, rect.y + VERTICAL_PADDING))

    pygame.draw.rect(screen, GREEN, _as_pygame(DECRYPT_BUTTON))
    _draw_text(screen, font, "Decrypt", BUTTON_TEXT,
               (DECRYPT_BUTTON.x + 20, DECRYPT_BUTTON.y + 7))

    result_color = ERROR_COLOR if form.result_is_error() else SUCCESS_COLOR
    _draw_text(screen, font, form.result, result_color, (50, 360))
    _draw_text(screen, font, f"Welcome, {name}!", WELCOME_COLOR, (600, 10))
    pygame.display.flip()


def _run_decryptor(screen: pygame.Surface, assets: Path, name: str) -> None:
    pygame.display.set_caption("RSA GUI Decryptor")
    font = pygame.font.Font(str(assets / FONT_FILE), FORM_FONT_SIZE)
    background_path = assets / BACKGROUND_FILE
    background = (
        pygame.transform.scale(pygame.image.load(str(background_path)).convert(), (WIDTH, HEIGHT))
        if background_path.is_file() else None
    )

    form = DecryptorForm()
    animation_time = 0.0
    clock = pygame.time.Clock()
    pygame.key.start_text_input()
    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    form.click(*event.pos)
                elif event.type == pygame.TEXTINPUT:
                    form.type(event.text)
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
                    form.backspace()

            animation_time += ANIMATION_STEP
            _draw_form(screen, font, form, background,
                       background_offset(animation_time), name)
            clock.tick(60)
    finally:
        pygame.key.stop_text_input()


def main(argv: list[str] | None = None) -> int:
    """Ask for the player's name, then open the decryptor."""
    parser = argparse.ArgumentParser(prog="rsa-decryptor", description="RSA GUI Decryptor")
    parser.add_argument("--assets", type=Path, default=Path("."),
                        help="directory holding the font and background")
    args = parser.parse_args(argv)

    font_path = args.assets / FONT_FILE
    if not font_path.is_file():
        print(f"error: missing font: {font_path}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Enter Player Name")
        name = _enter_name(screen, pygame.font.Font(str(font_path), NAME_FONT_SIZE))
        if name is None:
            return 0
        _run_decryptor(screen, args.assets, name)
    except pygame.error as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())