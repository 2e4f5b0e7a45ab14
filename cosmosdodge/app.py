"""Main menu, dialogs and the pygame front end that drives a Game."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

import pygame

from cosmosdodge.entities import SCENE_HEIGHT, SCENE_WIDTH, SPRITE_SIZE, AlienKind
from cosmosdodge.game import Game, Phase, Sound

WINDOW_TITLE = "Главное меню"
TITLE_TEXT = "Космос️"
MENU_SIZE = (700, 500)
GAME_SIZE = (SCENE_WIDTH, SCENE_HEIGHT)
FPS = 50

BUTTON_WIDTH = 300
BUTTON_HEIGHT = 48
BUTTON_GAP = 6
TITLE_HEIGHT = 80
TITLE_SPACING = 30

CONTINUE_LABEL = "Продолжить игру"
CONTINUE_RECT = (150, 350, 200, 50)

LOSS_TITLE = "Поражение!"
LOSS_TEXT = "Пришельцы выиграли!"
WIN_TITLE = "Победа!"
WIN_TEXT = "Вы выиграли! Сыграть ещё раз?"
RULES_TITLE = "Правила"

CLICK_SOUND = "button.wav"
EFFECT_VOLUME = 0.5

_TITLE_COLOR = (144, 238, 144)
_BUTTON_TEXT = (255, 182, 193)
_BUTTON_FILL = (67, 57, 139)
_WHITE = (255, 255, 255)
_MENU_FILL = (10, 10, 40)
_GAME_FILL = (5, 5, 25)
_DIALOG_FILL = (240, 240, 240)
_DIALOG_TEXT = (20, 20, 20)
_SPRITE_COLORS = {
    AlienKind.GREEN: (60, 200, 60),
    AlienKind.RED: (210, 50, 50),
    AlienKind.BLACK: (40, 40, 40),
}
_PLAYER_COLOR = (190, 200, 255)

_RULES = (
    "⚓️ Правила игры:\n"
    "- В игре 3 раунда.\n"
    "- В первом раунде 1 вид монстров, который забирает 1 жизнь при столкновении.\n"
    "- Во втором раунде 2 вида монстров, оба вида забирают по 1 жизни.\n"
    "- В третьем раунде 3 вида монстров, новый забирает 2 жизни.\n"
    "- Цель - пройти все уровни.\n\n"
    "Удачи в игре!"
)


class MenuAction(Enum):
    """What a main-menu button does."""

    START = "start"
    RULES = "rules"
    EXIT = "exit"


@dataclass(frozen=True)
class Button:
    """A clickable labelled rectangle."""

    label: str
    x: int
    y: int
    width: int
    height: int
    action: Enum | None = None

    def contains(self, pos: tuple[int, int]) -> bool:
        px, py = pos
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    @property
    def rect(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


def _menu_top() -> int:
    total = TITLE_HEIGHT + TITLE_SPACING + 3 * BUTTON_HEIGHT + 2 * BUTTON_GAP
    return (MENU_SIZE[1] - total) // 2


def menu_buttons() -> list[Button]:
    """The main-menu buttons, top to bottom, centred in the menu window."""
    x = (MENU_SIZE[0] - BUTTON_WIDTH) // 2
    y = _menu_top() + TITLE_HEIGHT + TITLE_SPACING
    entries = [
        ("Новая игра", MenuAction.START),
        ("Правила игры", MenuAction.RULES),
        ("Выход", MenuAction.EXIT),
    ]
    buttons = []
    for label, action in entries:
        buttons.append(Button(label, x, y, BUTTON_WIDTH, BUTTON_HEIGHT, action))
        y += BUTTON_HEIGHT + BUTTON_GAP
    return buttons


def menu_action_at(pos: tuple[int, int]) -> MenuAction | None:
    """Return the action of the menu button under ``pos``, if any."""
    for button in menu_buttons():
        if button.contains(pos):
            return button.action  # type: ignore[return-value]
    return None


def rules_text() -> str:
    return _RULES


class _Screen(Enum):
    MENU = "menu"
    RULES = "rules"
    GAME = "game"
    LOST = "lost"
    WON = "won"


class _Choice(Enum):
    OK = "OK"
    YES = "Да"
    NO = "Нет"


class App:
    """The windowed application: menu, game and modal dialogs."""

    def __init__(self, assets_dir: str | Path | None = None, rng: random.Random | None = None) -> None:
        self.assets_dir = Path(assets_dir) if assets_dir is not None else None
        self.rng = rng
        self.screen_kind = _Screen.MENU
        self.game: Game | None = None
        self._running = False
        self._surface: pygame.Surface | None = None
        self._images: dict[tuple[str, tuple[int, int]], pygame.Surface | None] = {}
        self._sounds: dict[str, pygame.mixer.Sound | None] = {}
        self._audio = False
        self._music_channel: pygame.mixer.Channel | None = None
        self._dialog_buttons: list[Button] = []
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    def run(self) -> int:
        """Open the window and run the event loop until the user quits."""
        pygame.init()
        try:
            self._audio = self._init_audio()
            pygame.display.set_caption(WINDOW_TITLE)
            icon = self._image("icon.png", (32, 32))
            if icon is not None:
                pygame.display.set_icon(icon)
            self._surface = pygame.display.set_mode(MENU_SIZE)
            clock = pygame.time.Clock()
            self._running = True
            while self._running:
                elapsed = clock.tick(FPS)
                for event in pygame.event.get():
                    self._handle(event)
                if self.screen_kind is _Screen.GAME and self.game is not None:
                    self.game.advance(elapsed)
                    self._play_game_sounds()
                    self._check_game_end()
                if self._running:
                    self._draw()
                    pygame.display.flip()
        finally:
            pygame.quit()
        return 0

    # --- events ---------------------------------------------------------

    def _handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP) and self.screen_kind is _Screen.GAME:
            self._handle_key(event)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._click(event.pos)

    def _handle_key(self, event: pygame.event.Event) -> None:
        from cosmosdodge.game import Direction

        directions = {pygame.K_LEFT: Direction.LEFT, pygame.K_RIGHT: Direction.RIGHT}
        direction = directions.get(event.key)
        if direction is None or self.game is None:
            return
        if event.type == pygame.KEYDOWN:
            self.game.key_down(direction)
        else:
            self.game.key_up(direction)

    def _click(self, pos: tuple[int, int]) -> None:
        if self.screen_kind is _Screen.MENU:
            action = menu_action_at(pos)
            if action is None:
                return
            self._play(CLICK_SOUND)
            if action is MenuAction.START:
                self._start_game()
            elif action is MenuAction.RULES:
                self.screen_kind = _Screen.RULES
            else:
                self._running = False
        elif self.screen_kind is _Screen.GAME:
            game = self.game
            if game is not None and game.phase is Phase.LEVEL_COMPLETE:
                if Button(CONTINUE_LABEL, *CONTINUE_RECT).contains(pos):
                    game.next_level()
                    self._play_game_sounds()
        else:
            choice = next((b.action for b in self._dialog_buttons if b.contains(pos)), None)
            if choice is None:
                return
            if self.screen_kind is _Screen.RULES:
                self.screen_kind = _Screen.MENU
            elif self.screen_kind is _Screen.LOST:
                self._show_menu()
            elif choice is _Choice.YES:
                self._start_game()
            else:
                self._show_menu()

    def _start_game(self) -> None:
        self.game = Game(rng=self.rng)
        self._surface = pygame.display.set_mode(GAME_SIZE)
        self.screen_kind = _Screen.GAME
        self._dialog_buttons = []
        self._play_game_sounds()

    def _show_menu(self) -> None:
        self.game = None
        self._stop_music()
        self._surface = pygame.display.set_mode(MENU_SIZE)
        self.screen_kind = _Screen.MENU
        self._dialog_buttons = []

    def _check_game_end(self) -> None:
        if self.game is None:
            return
        if self.game.phase is Phase.LOST:
            self.screen_kind = _Screen.LOST
        elif self.game.phase is Phase.WON:
            self.screen_kind = _Screen.WON

    # --- resources ------------------------------------------------------

    def _init_audio(self) -> bool:
        try:
            pygame.mixer.init()
        except pygame.error:
            return False
        return True

    def _asset(self, folder: str, name: str) -> Path | None:
        if self.assets_dir is None:
            return None
        path = self.assets_dir / folder / name
        return path if path.is_file() else None

    def _image(self, name: str, size: tuple[int, int]) -> pygame.Surface | None:
        key = (name, size)
        if key not in self._images:
            path = self._asset("images", name)
            image = None
            if path is not None:
                try:
                    image = pygame.transform.smoothscale(pygame.image.load(str(path)), size)
                except pygame.error:
                    image = None
            self._images[key] = image
        return self._images[key]

    def _sound(self, name: str) -> pygame.mixer.Sound | None:
        if not self._audio:
            return None
        if name not in self._sounds:
            path = self._asset("sounds", name)
            sound = None
            if path is not None:
                try:
                    sound = pygame.mixer.Sound(str(path))
                except pygame.error:
                    sound = None
            self._sounds[name] = sound
        return self._sounds[name]

    def _play(self, name: str, volume: float = EFFECT_VOLUME) -> None:
        sound = self._sound(name)
        if sound is not None:
            sound.set_volume(volume)
            sound.play()

    def _stop_music(self) -> None:
        if self._music_channel is not None:
            self._music_channel.stop()
            self._music_channel = None

    def _play_game_sounds(self) -> None:
        if self.game is None:
            return
        for event in self.game.drain_sounds():
            if event is Sound.MUSIC_STOP:
                self._stop_music()
            elif event is Sound.MUSIC_PLAY:
                self._stop_music()
                music = self._sound(Sound.MUSIC_PLAY.value)
                if music is not None:
                    self._music_channel = music.play()
            else:
                self._play(event.value)

    # --- drawing --------------------------------------------------------

    def _font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont("arial", size, bold=bold)
        return self._fonts[key]

    def _draw(self) -> None:
        if self.screen_kind is _Screen.MENU or self.screen_kind is _Screen.RULES:
            self._draw_menu()
        else:
            self._draw_game()
        if self.screen_kind is _Screen.RULES:
            self._draw_dialog(RULES_TITLE, rules_text(), [_Choice.OK])
        elif self.screen_kind is _Screen.LOST:
            self._draw_dialog(LOSS_TITLE, LOSS_TEXT, [_Choice.OK])
        elif self.screen_kind is _Screen.WON:
            self._draw_dialog(WIN_TITLE, WIN_TEXT, [_Choice.YES, _Choice.NO])
        else:
            self._dialog_buttons = []

    def _draw_button(self, button: Button, font: pygame.font.Font) -> None:
        assert self._surface is not None
        pygame.draw.rect(self._surface, _BUTTON_FILL, button.rect)
        label = font.render(button.label, True, _BUTTON_TEXT)
        self._surface.blit(label, label.get_rect(center=pygame.Rect(button.rect).center))

    def _draw_menu(self) -> None:
        surface = self._surface
        assert surface is not None
        background = self._image("background1.jpg", MENU_SIZE)
        if background is not None:
            surface.blit(background, (0, 0))
        else:
            surface.fill(_MENU_FILL)
        title = self._font(60, bold=True).render(TITLE_TEXT, True, _TITLE_COLOR)
        title_box = pygame.Rect(0, _menu_top(), MENU_SIZE[0], TITLE_HEIGHT)
        surface.blit(title, title.get_rect(center=title_box.center))
        font = self._font(24, bold=True)
        for button in menu_buttons():
            self._draw_button(button, font)

    def _draw_sprite(self, name: str, color: tuple[int, int, int], x: float, y: float) -> None:
        assert self._surface is not None
        size = (SPRITE_SIZE, SPRITE_SIZE)
        image = self._image(name, size)
        if image is not None:
            self._surface.blit(image, (x, y))
        else:
            pygame.draw.ellipse(self._surface, color, (x, y, *size))

    def _draw_game(self) -> None:
        surface = self._surface
        game = self.game
        assert surface is not None
        background = self._image("background.png", GAME_SIZE)
        if background is not None:
            surface.blit(background, (0, 0))
        else:
            surface.fill(_GAME_FILL)
        if game is None:
            return
        self._draw_sprite("hero.png", _PLAYER_COLOR, game.player.x, game.player.y)
        for kind, aliens in game.aliens.items():
            for alien in aliens:
                self._draw_sprite(kind.image, _SPRITE_COLORS[kind], alien.x, alien.y)
        font = self._font(20)
        surface.blit(font.render(game.lives_text(), True, _WHITE), (10, 10))
        surface.blit(font.render(game.timer_text(), True, _WHITE), (360, 10))
        if game.phase is Phase.LEVEL_COMPLETE:
            self._draw_button(Button(CONTINUE_LABEL, *CONTINUE_RECT), self._font(18))

    def _wrap(self, font: pygame.font.Font, text: str, width: int) -> list[str]:
        lines: list[str] = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split(" "):
                candidate = f"{current} {word}" if current else word
                if current and font.size(candidate)[0] > width:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            lines.append(current)
        return lines

    def _draw_dialog(self, title: str, text: str, choices: Sequence[_Choice]) -> None:
        surface = self._surface
        assert surface is not None
        screen_w, screen_h = surface.get_size()
        shade = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 140))
        surface.blit(shade, (0, 0))

        box_w = min(screen_w - 40, 460)
        padding = 16
        title_font = self._font(22, bold=True)
        text_font = self._font(16)
        lines = self._wrap(text_font, text, box_w - 2 * padding)
        line_h = text_font.get_linesize()
        button_w, button_h = 100, 36
        box_h = padding * 4 + title_font.get_linesize() + line_h * len(lines) + button_h
        box = pygame.Rect((screen_w - box_w) // 2, (screen_h - box_h) // 2, box_w, box_h)
        pygame.draw.rect(surface, _DIALOG_FILL, box)

        y = box.y + padding
        surface.blit(title_font.render(title, True, _DIALOG_TEXT), (box.x + padding, y))
        y += title_font.get_linesize() + padding
        for line in lines:
            surface.blit(text_font.render(line, True, _DIALOG_TEXT), (box.x + padding, y))
            y += line_h

        buttons = []
        x = box.right - padding - len(choices) * (button_w + BUTTON_GAP) + BUTTON_GAP
        button_y = box.bottom - padding - button_h
        for choice in choices:
            buttons.append(Button(choice.value, x, button_y, button_w, button_h, choice))
            x += button_w + BUTTON_GAP
        button_font = self._font(18)
        for button in buttons:
            self._draw_button(button, button_font)
        self._dialog_buttons = buttons


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cosmosdodge", description="Dodge the falling aliens.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=None,
        help="directory holding images/ and sounds/ subdirectories",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for alien placement")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    return App(args.assets, rng).run()