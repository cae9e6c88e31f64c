import random
import string

import pytest

from deadline_arcade.invaders import (
    CODE_PREFIX,
    LABELS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Bullet,
    Enemy,
    InvadersGame,
    Rect,
    generate_encrypted_code,
    glow_intensity,
    rects_collide,
)


def test_overlapping_rects_collide():
    assert rects_collide(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)) is True


def test_touching_rects_do_not_collide():
    assert Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10)) is False


def test_empty_rect_never_collides():
    assert Rect(0, 0, 0, 10).intersects(Rect(0, 0, 10, 10)) is False


def test_collision_is_symmetric():
    a, b = Rect(3, 4, 20, 5), Rect(10, 0, 4, 30)
    assert rects_collide(a, b) == rects_collide(b, a)


def test_encrypted_code_format():
    code = generate_encrypted_code(random.Random(7))
    assert code.startswith(CODE_PREFIX)
    letters = code[len(CODE_PREFIX):]
    assert len(letters) == 16
    assert all(c in string.ascii_uppercase for c in letters)


def test_encrypted_code_repeatable_with_seed():
    codes = {generate_encrypted_code(random.Random(3)) for _ in range(5)}
    assert len(codes) == 1


def test_encrypted_code_depends_on_rng():
    codes = {generate_encrypted_code(random.Random(seed)) for seed in range(20)}
    assert len(codes) > 1


def test_glow_at_zero_is_midpoint():
    assert glow_intensity(0) == 128


@pytest.mark.parametrize("ticks", [0, 150, 471, 942, 1413, 5000, 123456])
def test_glow_in_colour_range(ticks):
    assert 1 <= glow_intensity(ticks) <= 255


def test_fire_launches_from_ship_centre():
    game = InvadersGame()
    bullet = game.fire()
    assert bullet.rect.x + bullet.rect.w // 2 == game.player.x + game.player.w // 2
    assert bullet.rect.y == game.player.y
    assert game.bullets == [bullet]


def test_player_starts_centred_near_bottom():
    game = InvadersGame()
    assert game.player.x + game.player.w // 2 == SCREEN_WIDTH // 2
    assert game.player.y + game.player.h < SCREEN_HEIGHT


def test_move_stays_in_bounds():
    game = InvadersGame()
    game.player.x = 0
    game.move(left=True, right=False)
    assert game.player.x == 0
    game.player.x = SCREEN_WIDTH - game.player.w
    game.move(left=False, right=True)
    assert game.player.x == SCREEN_WIDTH - game.player.w


def test_move_left_and_right_cancel():
    game = InvadersGame()
    start = game.player.x
    game.move(left=True, right=True)
    assert game.player.x == start


def test_spawn_enemy_within_limits():
    game = InvadersGame(rng=random.Random(1))
    for _ in range(50):
        enemy = game.spawn_enemy()
        assert 0 <= enemy.rect.x <= SCREEN_WIDTH - enemy.rect.w
        assert enemy.rect.y == 0
        assert enemy.label in LABELS
        assert 2 <= enemy.speed <= 4
    assert len(game.enemies) == 50


def test_step_moves_bullet_up():
    game = InvadersGame()
    bullet = game.fire()
    y = bullet.rect.y
    game.step(0)
    assert bullet.rect.y == y + bullet.speed


def test_step_drops_bullets_off_top():
    game = InvadersGame()
    game.bullets.append(Bullet(Rect(100, 5, 10, 20)))
    game.step(0)
    assert game.bullets == []


def test_spawn_waits_for_interval():
    game = InvadersGame(rng=random.Random(2))
    game.step(1000)
    assert game.enemies == []
    game.step(1001)
    assert len(game.enemies) == 1
    assert game.last_spawn == 1001


def test_hit_scores_and_removes_both():
    game = InvadersGame()
    game.enemies.append(Enemy(Rect(100, 100, 60, 40), "LAB", 0))
    game.bullets.append(Bullet(Rect(110, 130, 10, 20)))
    game.step(0)
    assert game.score == 10
    assert game.enemies == []
    assert game.bullets == []


def test_bullet_after_a_hit_waits_a_frame():
    game = InvadersGame()
    game.enemies.append(Enemy(Rect(100, 100, 60, 40), "LAB", 0))
    game.enemies.append(Enemy(Rect(300, 100, 60, 40), "QUIZ", 0))
    game.bullets.append(Bullet(Rect(110, 130, 10, 20), speed=0))
    game.bullets.append(Bullet(Rect(310, 110, 10, 20), speed=0))
    game.step(0)
    assert game.score == 10
    assert len(game.bullets) == 1
    game.step(0)
    assert game.score == 20
    assert game.bullets == []


def test_enemy_reaching_bottom_ends_game():
    game = InvadersGame()
    game.enemies.append(Enemy(Rect(0, SCREEN_HEIGHT, 60, 40), "EXAM", 1))
    game.step(0)
    assert game.is_over() is True
    assert game.has_won() is False


def test_reaching_win_score_wins():
    game = InvadersGame(win_score=10)
    game.enemies.append(Enemy(Rect(100, 100, 60, 40), "PROJECT", 0))
    game.bullets.append(Bullet(Rect(110, 130, 10, 20)))
    assert game.is_over() is False
    game.step(0)
    assert game.has_won() is True
    assert game.is_over() is True