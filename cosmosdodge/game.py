"""Game rules: levels, lives, countdown, spawning and collisions."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from cosmosdodge.entities import Alien, AlienKind, Player, spawn_alien

START_LIVES = 3
TICK_MS = 20
COUNTDOWN_MS = 1000
LEVEL_TIMES = {1: 10, 2: 20, 3: 30}
GREEN_INTERVAL_FIRST = 1000
GREEN_INTERVAL_LATER = 800
RED_INTERVAL = 2000
BLACK_INTERVAL = 3000
FINAL_LEVEL = 3

GAME_OVER_TEXT = "Игра окончена!"


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


class Phase(Enum):
    PLAYING = "playing"
    LEVEL_COMPLETE = "level_complete"
    LOST = "lost"
    WON = "won"


class Sound(Enum):
    """Audio events the game asks its front end to play."""

    MUSIC_PLAY = "game2.wav"
    MUSIC_STOP = "game2.wav:stop"
    HIT = "hit.wav"
    HIT_RED = "hit1.wav"
    HIT_BLACK = "hit2.wav"
    NEW_LEVEL = "newlevel.wav"


_HIT_SOUNDS = {
    AlienKind.GREEN: Sound.HIT,
    AlienKind.RED: Sound.HIT_RED,
    AlienKind.BLACK: Sound.HIT_BLACK,
}


@dataclass
class _Timer:
    interval: int
    action: Callable[[], None]
    active: bool = True
    elapsed: int = 0

    def start(self, interval: int | None = None) -> None:
        if interval is not None:
            self.interval = interval
        self.elapsed = 0
        self.active = True

    def stop(self) -> None:
        self.active = False
        self.elapsed = 0


class Game:
    """State of one play-through, driven by simulated milliseconds."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player = Player()
        self.aliens: dict[AlienKind, list[Alien]] = {kind: [] for kind in AlienKind}
        self.lives = START_LIVES
        self.level = 1
        self.time_remaining = LEVEL_TIMES[1]
        self.phase = Phase.PLAYING
        self._sounds: list[Sound] = []

        self._green_timer = _Timer(GREEN_INTERVAL_FIRST, lambda: self.spawn(AlienKind.GREEN))
        self._tick_timer = _Timer(TICK_MS, self.update)
        self._countdown_timer = _Timer(COUNTDOWN_MS, self.decrease_time)
        self._red_timers: list[_Timer] = []
        self._black_timers: list[_Timer] = []
        self._timers = [self._green_timer, self._tick_timer, self._countdown_timer]

        self._sounds.append(Sound.MUSIC_PLAY)

    def key_down(self, direction: Direction) -> None:
        self._set_moving(direction, True)

    def key_up(self, direction: Direction) -> None:
        self._set_moving(direction, False)

    def _set_moving(self, direction: Direction, moving: bool) -> None:
        if direction is Direction.LEFT:
            self.player.moving_left = moving
        else:
            self.player.moving_right = moving

    def spawn(self, kind: AlienKind) -> Alien:
        """Drop a new alien of ``kind`` at the top of the scene."""
        alien = spawn_alien(kind, self.rng)
        self.aliens[kind].append(alien)
        return alien

    def _active_kinds(self) -> list[AlienKind]:
        kinds = [AlienKind.GREEN]
        if self.level >= 2:
            kinds.append(AlienKind.RED)
        if self.level == FINAL_LEVEL:
            kinds.append(AlienKind.BLACK)
        return kinds

    def update(self) -> None:
        """One game tick: move the player, drop aliens, resolve hits."""
        if self.phase is Phase.LOST:
            return
        self.player.move()
        for kind in self._active_kinds():
            if self.phase is Phase.LOST:
                break
            survivors: list[Alien] = []
            for alien in self.aliens[kind]:
                if self.phase is Phase.LOST:
                    survivors.append(alien)
                    continue
                alien.fall()
                if alien.collides_with(self.player):
                    self._hit(kind)
                elif not alien.is_off_screen:
                    survivors.append(alien)
            self.aliens[kind] = survivors

    def _hit(self, kind: AlienKind) -> None:
        self._sounds.append(_HIT_SOUNDS[kind])
        if kind.is_lethal:
            self.lives -= self.lives
        else:
            self.lives -= 1
        if self.lives <= 0:
            self._lose()

    def _lose(self) -> None:
        self._sounds.append(Sound.MUSIC_STOP)
        for timer in self._timers:
            timer.stop()
        self.phase = Phase.LOST

    def decrease_time(self) -> None:
        """Count down one second and finish the level when time runs out."""
        self.time_remaining -= 1
        if self.time_remaining > 0:
            return
        self._countdown_timer.stop()
        if self.level < FINAL_LEVEL:
            self._sounds.append(Sound.MUSIC_STOP)
            self._green_timer.stop()
            self._tick_timer.stop()
            self.phase = Phase.LEVEL_COMPLETE
        else:
            self._end_game()

    def _end_game(self) -> None:
        self._green_timer.stop()
        self._tick_timer.stop()
        for timer in self._red_timers + self._black_timers:
            timer.stop()
        self.phase = Phase.WON

    def next_level(self) -> None:
        """Start the following level after the current one is complete."""
        if self.phase is not Phase.LEVEL_COMPLETE:
            raise RuntimeError(f"cannot continue while the game is {self.phase.value}")
        self._sounds.append(Sound.MUSIC_PLAY)
        self._sounds.append(Sound.NEW_LEVEL)
        self.level += 1
        self.time_remaining = LEVEL_TIMES[self.level]
        self.phase = Phase.PLAYING

        self._countdown_timer.start(COUNTDOWN_MS)
        self._green_timer.start(GREEN_INTERVAL_LATER)
        red = _Timer(RED_INTERVAL, lambda: self.spawn(AlienKind.RED))
        self._red_timers.append(red)
        self._timers.append(red)
        if self.level == FINAL_LEVEL:
            black = _Timer(BLACK_INTERVAL, lambda: self.spawn(AlienKind.BLACK))
            self._black_timers.append(black)
            self._timers.append(black)
        self._tick_timer.start(TICK_MS)

    def advance(self, ms: int) -> None:
        """Let ``ms`` milliseconds of game time pass, firing due timers."""
        if ms < 0:
            raise ValueError("time cannot run backwards")
        remaining = ms
        while remaining > 0 and self.phase not in (Phase.LOST, Phase.WON):
            running = [timer for timer in self._timers if timer.active]
            if not running:
                break
            step = min(min(t.interval - t.elapsed for t in running), remaining)
            for timer in running:
                timer.elapsed += step
            remaining -= step
            for timer in running:
                if timer.active and timer.elapsed >= timer.interval:
                    timer.elapsed = 0
                    timer.action()

    def lives_text(self) -> str:
        if self.phase in (Phase.LOST, Phase.WON):
            return GAME_OVER_TEXT
        return f"Жизни: {self.lives}"

    def timer_text(self) -> str:
        return f"Время: {self.time_remaining}"

    def drain_sounds(self) -> list[Sound]:
        """Return the queued sound events and clear the queue."""
        sounds, self._sounds = self._sounds, []
        return sounds