"""Game state and rules for the Deadline Invaders shooter."""

from __future__ import annotations

import math
import random
import string
from dataclasses import dataclass, field

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WIN_SCORE = 200
TUTORIAL_WIN_SCORE = 100

PLAYER_SPEED = 7
BULLET_SPEED = -10
BULLET_WIDTH = 10
BULLET_HEIGHT = 20
ENEMY_WIDTH = 60
ENEMY_HEIGHT = 40
SPAWN_INTERVAL_MS = 1000
POINTS_PER_HIT = 10
LABELS = ("PROJECT", "QUIZ", "LAB", "EXAM")
CODE_PREFIX = "Encrypted code: "
CODE_LENGTH = 16


@dataclass
class Rect:
    """An axis-aligned rectangle in screen pixels."""

    x: int
    y: int
    w: int
    h: int

    @property
    def empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles share at least one pixel."""
        if self.empty or other.empty:
            return False
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.y < other.y + other.h
            and other.y < self.y + self.h
        )


@dataclass
class Bullet:
    rect: Rect
    speed: int = BULLET_SPEED


@dataclass
class Enemy:
    rect: Rect
    label: str = ""
    speed: int = 1


def rects_collide(a: Rect, b: Rect) -> bool:
    """True when rectangles ``a`` and ``b`` intersect."""
    return a.intersects(b)


def generate_encrypted_code(rng: random.Random | None = None) -> str:
    """A prize line of sixteen random capital letters."""
    rng = rng or random.Random()
    letters = "".join(rng.choice(string.ascii_uppercase) for _ in range(CODE_LENGTH))
    return CODE_PREFIX + letters


def glow_intensity(ticks: float) -> int:
    """Pulsing grey level for enemy labels at the given millisecond tick."""
    return int(128 + 127 * math.sin(ticks / 300.0))


def _start_player() -> Rect:
    return Rect(SCREEN_WIDTH // 2 - 25, SCREEN_HEIGHT - 60, 50, 40)


@dataclass
class InvadersGame:
    """The playfield: player ship, bullets, enemies and score."""

    win_score: int = WIN_SCORE
    rng: random.Random = field(default_factory=random.Random)
    last_spawn: int = 0
    player: Rect = field(default_factory=_start_player)
    bullets: list[Bullet] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    score: int = 0
    escaped: bool = False

    def fire(self) -> Bullet:
        """Launch a bullet from the top centre of the player ship."""
        bullet = Bullet(
            Rect(
                self.player.x + self.player.w // 2 - BULLET_WIDTH // 2,
                self.player.y,
                BULLET_WIDTH,
                BULLET_HEIGHT,
            )
        )
        self.bullets.append(bullet)
        return bullet

    def move(self, left: bool, right: bool) -> None:
        """Slide the ship according to the held arrow keys."""
        if left and self.player.x > 0:
            self.player.x -= PLAYER_SPEED
        if right and self.player.x < SCREEN_WIDTH - self.player.w:
            self.player.x += PLAYER_SPEED

    def spawn_enemy(self) -> Enemy:
        """Add an enemy at a random column along the top edge."""
        x = self.rng.randrange(SCREEN_WIDTH - ENEMY_WIDTH)
        label = LABELS[self.rng.randrange(len(LABELS))]
        speed = 2 + self.rng.randrange(3)
        enemy = Enemy(Rect(x, 0, ENEMY_WIDTH, ENEMY_HEIGHT), label, speed)
        self.enemies.append(enemy)
        return enemy

    def step(self, now: int) -> None:
        """Advance one frame; ``now`` is the current tick in milliseconds."""
        for bullet in self.bullets:
            bullet.rect.y += bullet.speed
        self.bullets = [b for b in self.bullets if b.rect.y >= 0]

        if now - self.last_spawn > SPAWN_INTERVAL_MS:
            self.spawn_enemy()
            self.last_spawn = now

        for enemy in self.enemies:
            enemy.rect.y += enemy.speed

        self._resolve_hits()

        if any(enemy.rect.y > SCREEN_HEIGHT for enemy in self.enemies):
            self.escaped = True

    def _resolve_hits(self) -> None:
        # A bullet that scores removes itself, and the bullet right after it
        # is left unchecked until the next frame.
        survivors: list[Bullet] = []
        skip_next = False
        for bullet in self.bullets:
            if skip_next:
                survivors.append(bullet)
                skip_next = False
                continue
            hit = next(
                (i for i, enemy in enumerate(self.enemies) if bullet.rect.intersects(enemy.rect)),
                None,
            )
            if hit is None:
                survivors.append(bullet)
                continue
            del self.enemies[hit]
            self.score += POINTS_PER_HIT
            skip_next = True
        self.bullets = survivors

    def is_over(self) -> bool:
        """True once an enemy got through or the winning score is reached."""
        return self.escaped or self.has_won()

    def has_won(self) -> bool:
        return self.score >= self.win_score