"""The desk controls: verdict buttons, the countdown, the debug cup and pause."""

from __future__ import annotations

from paperdesk.buttons import CustomButton, Signal, SwitchingButton, TextButton
from paperdesk.level import Level

LEVEL_SECONDS = 60
TIMER_INTERVAL_MS = 1000

APPROVE_WRONG = -3
APPROVE_RIGHT = 6
REJECT_WRONG = -2
FORCED_FINISH = 100

_SWITCHED_ON = 3


class Mechanism:
    """Buttons that end a level, the countdown and the pause and debug switches.

    The countdown is driven from outside: while ``timer_active`` is true,
    ``time_flow`` is expected to be called once every ``TIMER_INTERVAL_MS``.
    Results of finished levels are sent through the ``result`` signal.
    """

    def __init__(self, level: Level) -> None:
        self.level = level
        self.score = 0
        self.timeleft = LEVEL_SECONDS
        self.result = Signal()

        self.tick = CustomButton(2, True, 6)
        self.cross = CustomButton(3, True, 8)
        self.place_holder = CustomButton(0, False, 7)
        self.counter = TextButton(self.time_string(), 12, True, True, 10)
        self.cup = SwitchingButton(2)
        self.pause = CustomButton(18, True, 12)
        self.timer_active = True

        self.tick.x, self.tick.y = 420, 366
        self.cross.x, self.cross.y = 440, 366
        self.pause.x, self.pause.y = 485, 366
        self.place_holder.x, self.place_holder.y = 440, 366
        self.cup.x, self.cup.y = 400, 295
        self.counter.x, self.counter.y = 435, 400

        self.cup.enable.connect(self.set_debug)
        self.cup.disable.connect(self.unset_debug)
        self.cross.clicked.connect(self.finish_red)
        self.tick.clicked.connect(self.finish_green)
        self.pause.clicked.connect(self.pause_press)

        self.button_reset()

    def time_string(self) -> str:
        """Return the remaining time as ``minutes:seconds``."""
        minutes, seconds = divmod(self.timeleft, 60)
        return f"{minutes}:{seconds}"

    def score_update(self) -> None:
        """Count a found mistake and open the reject button."""
        empty = self.score == 0
        if empty and self.level.mistakes.is_correct():
            self.score = 2
        if empty:
            self.score += 1
        self.score += 1
        self.cross_unlock()

    def finish_green(self) -> None:
        """End the level by approving the visitor."""
        if self.score > 0 or not self.level.mistakes.is_correct():
            outcome = APPROVE_WRONG
        else:
            outcome = APPROVE_RIGHT
        self.button_reset()
        self.result.emit(outcome)

    def finish_red(self) -> None:
        """End the level by rejecting the visitor."""
        if self.score == 0 and self.level.mistakes.is_correct():
            outcome = REJECT_WRONG
        else:
            outcome = self.score + 2
        self.button_reset()
        self.result.emit(outcome)

    def finish_force(self) -> None:
        """End the level because a forbidden document was read."""
        self.button_reset()
        self.result.emit(FORCED_FINISH)

    def set_debug(self) -> None:
        """Show the remaining mistakes instead of the countdown."""
        self.counter.text = self.level.mistakes.debug_string()

    def unset_debug(self) -> None:
        """Show the countdown again."""
        self.counter.text = self.time_string()

    def level_update(self, face: int) -> None:
        """Switch the debug cup off when a new visitor arrives."""
        if self.cup.param % _SWITCHED_ON == 0:
            self.cup.set_state(0, True)

    def time_flow(self) -> None:
        """Advance the countdown by one second."""
        if self.timeleft > 0:
            self.timeleft -= 1
        if self.cup.param % _SWITCHED_ON != 0:
            self.counter.text = self.time_string()

    def pause_press(self) -> None:
        """Stop or restart the countdown and mark the level paused accordingly."""
        if self.timer_active:
            self.timer_active = False
            self.level.paused = True
        else:
            self.timer_active = True
            self.level.paused = False

    def button_reset(self) -> None:
        """Reset the score and hide the reject button behind its placeholder."""
        self.score = 0
        self.cross.safe_lock()
        self.place_holder.unlock()
        self.cross.visible = False
        self.place_holder.visible = True

    def cross_unlock(self) -> None:
        """Reveal the reject button after the first mistake is found."""
        self.cross.unlock()
        self.place_holder.safe_lock()
        self.place_holder.visible = False
        self.cross.visible = True