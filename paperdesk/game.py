"""The main desk: menu, play, finale and results screens, plus the music switch."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from enum import Enum

from paperdesk.buttons import (
    CustomButton,
    Face,
    Follower,
    Signal,
    SwitchingButton,
    TextButton,
)
from paperdesk.documents import DocumentWindow, WindowKind
from paperdesk.level import Level
from paperdesk.lockable import Lockable
from paperdesk.mechanism import FORCED_FINISH, Mechanism

CREDITS = (
    "Спасибо, что сыграли!\n\n"
    "Эта игра посвящается всем, кто\n"
    "поддерживал её в процессе \nразработки.\n"
    "\n\n 2019 год, осень"
)

FAILED_PREFIX = (
    "УРОВЕНЬ ПРОВАЛЕН.\nНЕДЕЙСТВИТЕЛЬНОЕ СОГЛАСИЕ\nЧИТАЙТЕ МЕТОДИЧКУ.\n"
)

_SHOWN_ONCE = 7
_STATIC_TEXT = 11
_LEVER_CLOUD = 4


def _track(song: int) -> str:
    return f"Mus/Track{song}.mp3"


@dataclass(eq=False)
class _Picture:
    """A plain, non-interactive image placed in a scene."""

    pixmap: str
    x: int = 0
    y: int = 0
    visible: bool = True


class _Background(_Picture):
    """A backdrop that reports the cursor moving over it."""

    def __init__(self, number: int = 0) -> None:
        super().__init__(f"backgrounds/fon{number}.png")
        self.tingle = Signal()

    def hover_move(self) -> None:
        self.tingle.emit()


class Screen(Enum):
    """The screens the game can show."""

    MENU = "menu"
    PLAY = "play"
    FINALE = "finale"
    RESULTS = "results"


class Player:
    """Looping background music with the switch that turns it on and off."""

    def __init__(self, song: int = 0) -> None:
        self.song = song
        self.track = _track(song)
        self.is_playing = False
        self.lever: SwitchingButton | None = SwitchingButton(song, False)
        self._wire(self.lever)

    def _wire(self, lever: SwitchingButton) -> None:
        lever.enable.connect(self.play_change)
        lever.disable.connect(self.play_change)

    def play_change(self) -> None:
        """Pause the music if playing, start it otherwise."""
        self.is_playing = not self.is_playing

    def init(self, song: int, icon: int) -> None:
        """Select a track and make a fresh switch showing the current state."""
        if song != self.song:
            self.song = song
            self.track = _track(song)
        self.lever = SwitchingButton(icon, self.is_playing, _LEVER_CLOUD)
        self._wire(self.lever)

    def playing(self) -> int:
        """Return the playing track number plus one, or 0 when silent."""
        return self.song + 1 if self.is_playing else 0


class SubWindow:
    """Parts of the pop-up panel drawn over the desk."""

    def __init__(self) -> None:
        self.credits = CREDITS
        self.darkness = _Picture("backgrounds/darkness.png")
        self.box = _Picture("backgrounds/box.png")
        self.close_button = CustomButton(19, True)
        self.text = TextButton(self.credits, 12)


class Game:
    """The main window: builds each screen and wires its buttons together."""

    def __init__(self) -> None:
        self.scene: list[object] = []
        self.items: dict[str, object] = {}
        self.contents: list[Lockable] = []
        self.mus = Player(0)
        self.wm = WindowManager()
        self.sw: SubWindow | None = None
        self.level: Level | None = None
        self.mech: Mechanism | None = None
        self.score = 0
        self.screen = Screen.MENU
        self.button_pressed = Signal()
        self.add_point = Signal()
        self.wave_of_change = Signal()
        self.wm.provide.connect(self.players_guess)
        self.wm.privacy_break.connect(self._privacy_break)
        self.mode_menu()

    def _place(self, name: str | None, item, pos: tuple[int, int] | None = None):
        if pos is not None:
            item.x, item.y = pos
        self.scene.append(item)
        if name is not None:
            self.items[name] = item
        return item

    def _privacy_break(self) -> None:
        if self.mech is not None:
            self.mech.finish_force()

    def mode_play(self) -> None:
        """Build the desk for a new game."""
        self.clear_items()
        self.scene.clear()
        self.screen = Screen.PLAY

        self.score = 0
        self.level = level = Level()
        self.wm.level = level
        self.wm.dynamic_documents()
        self.sw = SubWindow()

        follower = Follower()
        back = _Background()
        vis = Face(level.face)
        door_frame = _Picture("other/door0.png")
        door = CustomButton(1, False, 2)
        passport = CustomButton(4, False, 13)
        agreement = CustomButton(11, False, 14)
        x_paper = CustomButton(12, False, 17)
        medicine = CustomButton(13, False, 16)
        tutorial = CustomButton(14, False, 11)
        license_ = CustomButton(15, False, 15)
        faks = CustomButton(17, False, 9)
        paper = CustomButton(16, True)
        help_ = SwitchingButton(3, False, 5)

        self.mech = mech = Mechanism(level)
        self.mus.init(1, 1)
        lever = self.mus.lever

        self._place("background", back)
        self._place("tick", mech.tick)
        self._place("cross", mech.cross)
        self._place("place_holder", mech.place_holder)
        self._place("lever", lever, (380, 395))
        self._place(None, door_frame, (50, 61))
        self._place("door", door, (56, 65))
        self._place("passport", passport, (156, 315))
        self._place("agreement", agreement, (190, 316))
        self._place("x_paper", x_paper, (250, 316))
        self._place("medicine", medicine, (230, 316))
        self._place("tutorial", tutorial, (90, 410))
        self._place("license", license_, (156, 334))
        self._place("counter", mech.counter)
        self._place("cup", mech.cup)
        self._place("pause", mech.pause)
        self._place("faks", faks, (385, 370))
        self._place("paper", paper, (40, 370))
        self._place("visitor", vis, (100, 54))
        self._place("help", help_, (461, 366))
        self._place("follower", follower)

        self.contents = [
            mech.tick, mech.cross, mech.place_holder, door, passport, agreement,
            x_paper, medicine, license_, faks, tutorial, paper, mech.cup,
            mech.counter, lever, mech.pause, vis, help_,
        ]

        paper.clicked.connect(self.show_stamps)
        paper.clicked.connect(self.lock_screen)
        door.clicked.connect(self.switch_menu)
        passport.clicked.connect(self.wm.open_passport)
        medicine.clicked.connect(self.wm.open_medicine)
        license_.clicked.connect(self.wm.open_license)
        x_paper.clicked.connect(self.wm.open_x)
        agreement.clicked.connect(self.wm.open_agreement)
        faks.clicked.connect(self.wm.open_stenography)
        tutorial.clicked.connect(self.wm.open_tutorial)

        self.add_point.connect(mech.score_update)
        vis.clicked_doc.connect(self.players_guess)
        mech.pause.clicked.connect(self.wm.pause_pressed)
        mech.result.connect(self.level_finalize)
        self.wave_of_change.connect(mech.level_update)
        self.wave_of_change.connect(vis.regenerate)

        for source in (
            door, mech.tick, mech.cross, mech.place_holder, mech.pause, tutorial,
            mech.counter, help_, lever, faks, passport, x_paper, license_,
            medicine, agreement,
        ):
            source.send_cloud.connect(follower.draw_at)

        back.tingle.connect(follower.hide)
        help_.enable.connect(follower.lock)
        help_.disable.connect(follower.release)

        if self.mus.playing():
            what = CustomButton(24)
            self._place("what", what, (480, 320))
            self.contents.append(what)
            secret = DocumentWindow(WindowKind.SECRET)
            self.items["secret"] = secret
            what.clicked.connect(secret.toggle_visibility)

    def mode_menu(self) -> None:
        """Build the main menu."""
        self.clear_items()
        self.scene.clear()
        self.screen = Screen.MENU
        self.sw = SubWindow()

        play = CustomButton(9)
        auth = CustomButton(22, True)
        exiter = CustomButton(10)
        self.mus.init(0, 0)
        lever = self.mus.lever

        self._place(None, _Picture("backgrounds/fon-1.png"))
        self._place("play", play, (300, 20))
        self._place("exit", exiter, (53, 18))
        self._place("lever", lever, (490, 10))
        self._place("auth", auth, (300, 110))

        self.contents = [play, exiter, lever, auth]

        play.clicked.connect(self.switch_play)
        auth.clicked.connect(self.lock_screen)
        exiter.clicked.connect(self.exit)

    def lock_screen(self) -> None:
        """Lock every item on the screen and open the pop-up panel."""
        for item in self.contents:
            item.unsafe_lock()
        self.subwindow_setup(1)

    def unlock_screen(self) -> None:
        """Unlock every item on the screen and close the pop-up panel."""
        for item in self.contents:
            item.unlock()
        self.subwindow_setup(0)

    def show_stamps(self) -> None:
        """Make the next pop-up panel show the stamp samples."""
        if self.sw is not None:
            self.sw.text.val = -1

    def subwindow_setup(self, mode: int) -> None:
        """Show (mode 1) or hide (mode 0) the pop-up panel in its prepared form."""
        sw = self.sw
        if sw is None:
            raise RuntimeError("no pop-up panel on this screen")
        if sw.close_button.param % _SHOWN_ONCE != 0:
            sw.close_button.x, sw.close_button.y = 400, 110
            sw.box.x, sw.box.y = 140, 100
            sw.text.x, sw.text.y = 150, 115
            sw.close_button.clicked.connect(self.unlock_screen)
            sw.text.safe_lock()
            sw.text.param *= _STATIC_TEXT
            for part in (sw.darkness, sw.box, sw.close_button, sw.text):
                self.scene.append(part)
            sw.close_button.param *= _SHOWN_ONCE

        if sw.text.val == -1:
            if mode == 1:
                sw.box.pixmap = "backgrounds/stamps.png"
                sw.box.x, sw.box.y = 130, 60
                sw.close_button.x, sw.close_button.y = 400, 70
                sw.text.visible = False
                sw.darkness.visible = True
                sw.box.visible = True
                sw.close_button.visible = True
                sw.close_button.unlock()
            else:
                sw.box.pixmap = "backgrounds/box.png"
                sw.box.x, sw.box.y = 140, 100
                sw.close_button.x, sw.close_button.y = 400, 110
                sw.darkness.visible = False
                sw.box.visible = False
                sw.close_button.visible = False
                sw.text.val = 0
                sw.close_button.safe_lock()
            return

        if mode == 1:
            if self.level is None:
                sw.text.text = sw.credits
            elif sw.text.val == FORCED_FINISH:
                sw.text.val = 0
                sw.text.text = FAILED_PREFIX + self.level.mistakes.text_form()
            else:
                sw.text.text = self.level.mistakes.text_form()
            for part in (sw.darkness, sw.box, sw.close_button, sw.text):
                part.visible = True
            sw.close_button.unlock()
        elif mode == 0:
            for part in (sw.darkness, sw.box, sw.close_button, sw.text):
                part.visible = False
            sw.close_button.safe_lock()
            if self.time_left() <= 0 and self.level is not None:
                self.switch_finale()

    def level_finalize(self, result: int) -> None:
        """Take a finished level's result and bring in the next visitor if time remains."""
        if result == FORCED_FINISH:
            self.sw.text.val = FORCED_FINISH
        else:
            self.score += result
        self.wm.clear_dynamics()
        self.lock_screen()
        if self.time_left() > 0:
            self.level.regenerate()
            self.wm.dynamic_documents()
            self.wave_of_change.emit(self.level.face)

    def players_guess(self, doc: str, code: int) -> None:
        """Check a clicked field against the level's mistakes and score a hit."""
        if self.level is None:
            return
        if self.level.mistakes.is_it_yours(doc, code):
            self.add_point.emit()

    def clear_items(self) -> None:
        """Drop everything that belongs to the current screen."""
        self.level = None
        self.sw = None
        self.wm.kill()
        self.wm.clear_dynamics()
        self.mech = None
        self.mus.lever = None
        self.contents = []
        self.items = {}
        self.add_point = Signal()
        self.wave_of_change = Signal()

    def switch_menu(self) -> None:
        """Close the open windows and go to the menu."""
        self.wm.kill()
        self.mode_menu()

    def switch_play(self) -> None:
        """Start a game."""
        self.mode_play()

    def switch_finale(self) -> None:
        """Show the end-of-shift screen."""
        self.clear_items()
        self.scene.clear()
        self.screen = Screen.FINALE
        hand = CustomButton(23)
        self.mus.init(2, 0)
        self._place(None, _Picture("backgrounds/fon-2.png"))
        self._place("hand", hand, (400, 200))
        self._place("lever", self.mus.lever, (490, 10))
        hand.clicked.connect(self.switch_finale2)

    def switch_finale2(self) -> None:
        """Show the results screen with the final score."""
        self.clear_items()
        self.scene.clear()
        self.screen = Screen.RESULTS
        back = _Background(-3)
        follower = Follower()
        to_menu = CustomButton(2, False, 2)
        leave = CustomButton(3, False, 1)
        help_ = SwitchingButton(3, False, 5)
        score = TextButton(str(self.score), 12, True, True, 3)
        self.mus.init(2, 0)
        lever = self.mus.lever
        lever.x, lever.y = 490, 10

        self._place("background", back)
        self._place("menu", to_menu, (370, 350))
        self._place("exit", leave, (390, 350))
        self._place("score", score, (95, 340))
        self._place("help", help_, (410, 350))
        self._place("lever", lever)
        self._place("follower", follower)

        to_menu.clicked.connect(self.switch_menu)
        leave.clicked.connect(self.exit)
        for source in (to_menu, leave, help_, score, lever):
            source.send_cloud.connect(follower.draw_at)
        back.tingle.connect(follower.hide)
        help_.enable.connect(follower.lock)
        help_.disable.connect(follower.release)

    def exit(self) -> None:
        """Ask for the application to close."""
        self.button_pressed.emit()

    def time_left(self) -> int:
        """Return the seconds left in the shift, or -1 outside play."""
        if self.mech is None:
            return -1
        return self.mech.timeleft


from paperdesk.windows import WindowManager  # noqa: E402

_WINDOW_NAMES = (
    "passport", "agreement", "medicine", "rights", "psycho", "stenography", "tutorial",
)

_USAGE = (
    "commands: press ITEM | close | click WINDOW FIELD | wait [SECONDS] | quit"
)


def _describe(game: Game) -> str:
    lines = [f"screen: {game.screen.value}", f"score: {game.score}"]
    if game.mech is not None:
        lines.append(f"time: {game.mech.time_string()}")
    lines.append("items: " + ", ".join(sorted(game.items)))
    sw = game.sw
    if sw is not None and sw.darkness in game.scene and sw.darkness.visible:
        if sw.text.visible:
            lines.append(sw.text.text)
        else:
            lines.append(f"[{sw.box.pixmap}]")
    for window in (game.wm.first, game.wm.second):
        if window is None:
            continue
        lines.append(f"[{window.kind.name.lower()}]")
        for name, field in window.fields.items():
            shown = getattr(field.item, "text", None) or getattr(field.item, "pixmap", "")
            lines.append(f"  {name}: {shown}")
    return "\n".join(lines)


def _run(game: Game, words: list[str]) -> str | None:
    command, *rest = words
    if command == "press" and rest:
        item = game.items.get(rest[0])
        if item is None or not hasattr(item, "press"):
            return f"no such item: {rest[0]}"
        item.press()
    elif command == "close":
        if game.sw is None:
            return "nothing to close"
        game.sw.close_button.press()
    elif command == "click" and len(rest) == 2:
        if rest[0] not in _WINDOW_NAMES:
            return f"no such window: {rest[0]}"
        window = getattr(game.wm, rest[0])
        field = window.fields.get(rest[1]) if window is not None else None
        if field is None or not field.interactive:
            return f"no such field: {rest[1]}"
        field.item.press()
    elif command == "wait":
        seconds = int(rest[0]) if rest and rest[0].isdigit() else 1
        for _ in range(seconds):
            if game.mech is not None and game.mech.timer_active:
                game.mech.time_flow()
    else:
        return _USAGE
    return None


def main(argv=None) -> int:
    """Play the game from text commands read on standard input."""
    parser = argparse.ArgumentParser(
        prog="paperdesk", description="Check visitors' papers for mistakes."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    random.seed(args.seed)

    game = Game()
    finished: list[bool] = []
    game.button_pressed.connect(lambda: finished.append(True))
    print(_describe(game))
    for line in sys.stdin:
        words = line.split()
        if not words:
            continue
        if words[0] == "quit":
            break
        message = _run(game, words)
        if message is not None:
            print(message)
        if finished:
            break
        print(_describe(game))
    return 0