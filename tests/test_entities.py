import random

import pytest

from cosmosdodge.entities import (
    FALL_STEP,
    PLAYER_MAX_X,
    PLAYER_STEP,
    SPAWN_X_RANGE,
    SPAWN_Y,
    Alien,
    AlienKind,
    Player,
    Rect,
    spawn_alien,
)


def test_rects_overlapping_intersect_both_ways():
    a = Rect(0, 0, 70, 70)
    b = Rect(30, 30, 70, 70)
    assert a.intersects(b)
    assert b.intersects(a)


def test_disjoint_rects_do_not_intersect():
    assert not Rect(0, 0, 70, 70).intersects(Rect(200, 200, 70, 70))


def test_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 70, 70).intersects(Rect(70, 0, 70, 70))


def test_player_starts_at_source_position():
    player = Player()
    assert (player.x, player.y) == (215, 600)


def test_player_moves_left_by_step():
    player = Player(moving_left=True)
    start = player.x
    player.move()
    assert player.x == start - PLAYER_STEP


def test_player_holding_both_keys_stays_put():
    player = Player(moving_left=True, moving_right=True)
    start = player.x
    player.move()
    assert player.x == start


def test_player_stops_at_left_edge():
    player = Player(moving_left=True)
    for _ in range(100):
        player.move()
    resting = player.x
    player.move()
    assert player.x == resting
    assert resting <= 0


def test_player_stops_at_right_edge():
    player = Player(moving_right=True)
    for _ in range(100):
        player.move()
    resting = player.x
    player.move()
    assert player.x == resting
    assert resting >= PLAYER_MAX_X


def test_alien_falls_by_step():
    alien = Alien(AlienKind.GREEN, x=100, y=0)
    alien.fall()
    assert alien.y == FALL_STEP


def test_alien_on_player_collides():
    player = Player()
    alien = Alien(AlienKind.RED, x=player.x, y=player.y)
    assert alien.collides_with(player)


def test_far_alien_does_not_collide():
    player = Player()
    alien = Alien(AlienKind.RED, x=player.x, y=SPAWN_Y)
    assert not alien.collides_with(player)


def test_only_black_is_lethal():
    rng = random.Random(0)
    aliens = [spawn_alien(kind, rng) for kind in AlienKind]
    assert [a.kind for a in aliens if a.kind.is_lethal] == [AlienKind.BLACK]


def test_alien_image_name():
    alien = spawn_alien(AlienKind.GREEN, random.Random(1))
    assert alien.kind.image == "green.png"


@pytest.mark.parametrize("seed", range(20))
def test_spawn_alien_in_range(seed):
    alien = spawn_alien(AlienKind.BLACK, random.Random(seed))
    assert 0 <= alien.x < SPAWN_X_RANGE
    assert alien.y == SPAWN_Y
    assert alien.kind is AlienKind.BLACK


def test_spawn_alien_is_deterministic_for_seed():
    first = spawn_alien(AlienKind.GREEN, random.Random(7))
    second = spawn_alien(AlienKind.GREEN, random.Random(7))
    assert first == second