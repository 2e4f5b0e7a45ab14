import random

import pytest

from cosmosdodge.entities import SCENE_HEIGHT, Alien, AlienKind
from cosmosdodge.game import Direction, Game, Phase, Sound


def make_game():
    return Game(random.Random(1))


def finish_level(game):
    game.time_remaining = 1
    game.decrease_time()


def reach_level_three(game):
    finish_level(game)
    game.next_level()
    finish_level(game)
    game.next_level()


def place_on_player(game, kind):
    alien = Alien(kind, x=game.player.x, y=game.player.y)
    game.aliens[kind].append(alien)
    return alien


def test_initial_texts():
    game = make_game()
    assert game.lives_text() == "Жизни: 3"
    assert game.timer_text() == "Время: 10"


def test_music_starts_and_drain_clears():
    game = make_game()
    assert game.drain_sounds() == [Sound.MUSIC_PLAY]
    assert game.drain_sounds() == []


def test_one_second_spawns_green_and_counts_down():
    game = make_game()
    game.advance(1000)
    assert len(game.aliens[AlienKind.GREEN]) == 1
    assert game.timer_text() == "Время: 9"


def test_level_one_completes_after_ten_seconds():
    game = make_game()
    game.lives = 100
    game.drain_sounds()
    game.advance(10000)
    assert game.phase is Phase.LEVEL_COMPLETE
    assert game.time_remaining == 0
    assert Sound.MUSIC_STOP in game.drain_sounds()
    game.advance(5000)
    assert game.time_remaining == 0


def test_next_level_while_playing_raises():
    game = make_game()
    with pytest.raises(RuntimeError):
        game.next_level()


def test_next_level_starts_level_two():
    game = make_game()
    finish_level(game)
    game.drain_sounds()
    game.next_level()
    assert game.level == 2
    assert game.phase is Phase.PLAYING
    assert game.timer_text() == "Время: 20"
    assert game.drain_sounds() == [Sound.MUSIC_PLAY, Sound.NEW_LEVEL]


def test_level_two_spawns_reds():
    game = make_game()
    finish_level(game)
    game.next_level()
    game.advance(2000)
    assert len(game.aliens[AlienKind.RED]) == 1


def test_red_spawner_keeps_running_after_level_two():
    game = make_game()
    finish_level(game)
    game.next_level()
    finish_level(game)
    before = len(game.aliens[AlienKind.RED])
    greens = len(game.aliens[AlienKind.GREEN])
    game.advance(4000)
    assert len(game.aliens[AlienKind.RED]) > before
    assert len(game.aliens[AlienKind.GREEN]) == greens


def test_green_hit_costs_a_life():
    game = make_game()
    game.drain_sounds()
    place_on_player(game, AlienKind.GREEN)
    game.update()
    assert game.lives == 2
    assert game.aliens[AlienKind.GREEN] == []
    assert game.drain_sounds() == [Sound.HIT]
    assert game.lives_text() == "Жизни: 2"


def test_three_hits_lose_the_game():
    game = make_game()
    for _ in range(3):
        place_on_player(game, AlienKind.GREEN)
        game.update()
    assert game.phase is Phase.LOST
    assert game.lives == 0
    assert game.lives_text() == "Игра окончена!"
    assert Sound.MUSIC_STOP in game.drain_sounds()


def test_lost_game_ignores_time():
    game = make_game()
    game.lives = 1
    place_on_player(game, AlienKind.GREEN)
    game.update()
    game.advance(5000)
    assert game.time_remaining == 10


def test_red_ignored_in_level_one():
    game = make_game()
    alien = Alien(AlienKind.RED, x=0, y=0)
    game.aliens[AlienKind.RED].append(alien)
    game.update()
    assert alien.y == 0


def test_red_hit_in_level_two():
    game = make_game()
    finish_level(game)
    game.next_level()
    game.drain_sounds()
    place_on_player(game, AlienKind.RED)
    game.update()
    assert game.lives == 2
    assert game.drain_sounds() == [Sound.HIT_RED]


def test_black_hit_is_fatal():
    game = make_game()
    reach_level_three(game)
    game.lives = 3
    game.aliens[AlienKind.BLACK].clear()
    place_on_player(game, AlienKind.BLACK)
    game.update()
    assert game.lives == 0
    assert game.phase is Phase.LOST
    assert Sound.HIT_BLACK in game.drain_sounds()


def test_alien_below_scene_is_removed():
    game = make_game()
    game.aliens[AlienKind.GREEN].append(Alien(AlienKind.GREEN, x=0, y=SCENE_HEIGHT))
    game.update()
    assert game.aliens[AlienKind.GREEN] == []
    assert game.lives == 3


def test_finishing_level_three_wins():
    game = make_game()
    reach_level_three(game)
    assert game.timer_text() == "Время: 30"
    finish_level(game)
    assert game.phase is Phase.WON
    assert game.lives_text() == "Игра окончена!"


def test_keys_steer_player():
    game = make_game()
    start = game.player.x
    game.key_down(Direction.LEFT)
    game.update()
    assert game.player.x < start
    game.key_up(Direction.LEFT)
    moved = game.player.x
    game.update()
    assert game.player.x == moved
    game.key_down(Direction.RIGHT)
    game.update()
    assert game.player.x > moved


def test_negative_advance_raises():
    with pytest.raises(ValueError):
        make_game().advance(-1)