"""Clickable scene items: buttons, switches, text labels, faces, stamps and the hint cloud."""

from __future__ import annotations

import random
from collections.abc import Callable
from enum import Enum

from paperdesk.lockable import Lockable
from paperdesk.randomizer import rand_in_pool, stamp_degenerator

# Flag factors kept in ``param`` next to the lock depth (powers of two).
_SWITCHED_ON = 3
_SELF_OFFING = 5
_ARIAL = 3
_GREEN = 5
_STATIC_TEXT = 11

_RIGHT_EDGE = 509
_TOP_MARGIN = 3
_HELP_CLOUD = 11
_HELP_CLOUD_POS = (80, 350)


def _button_image(image: int, lit: bool = False) -> str:
    return f"buttons/id{'-' if lit else ''}{image}.png"


def _switch_image(image: int, on: bool, lit: bool) -> str:
    return f"switches/SwB{'-' if on else ''}{image}{chr(39) if lit else ''}.png"


def _face_image(image: int) -> str:
    return f"these_guys/g{image}.png"


def _cloud_image(cloud: int) -> str:
    return f"other/cloud{cloud}.png"


class Signal:
    """A list of callbacks invoked together."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., object]] = []

    def connect(self, slot: Callable[..., object]) -> None:
        """Register a callback; registering it twice calls it twice."""
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., object]) -> None:
        """Remove every registration of a callback."""
        remaining = [s for s in self._slots if s != slot]
        if len(remaining) == len(self._slots):
            raise ValueError("slot is not connected")
        self._slots = remaining

    def emit(self, *args: object) -> None:
        """Call every registered callback with the given arguments."""
        for slot in list(self._slots):
            slot(*args)


class Color(Enum):
    """Text colours used by text buttons."""

    BLACK = "black"
    DARK_GRAY = "darkGray"
    GREEN = "green"
    DARK_GREEN = "darkGreen"


class _Item(Lockable):
    """A positioned, showable item with an image and a lock."""

    def __init__(self) -> None:
        super().__init__()
        self.x = 0
        self.y = 0
        self.visible = True
        self.pixmap = ""


class CustomButton(_Item):
    """A picture button that lights up under the cursor and reports clicks."""

    def __init__(self, image: int, self_offing: bool = False, cloud: int = -1) -> None:
        super().__init__()
        if self_offing:
            self.param *= _SELF_OFFING
        self.id = image
        self.cloud = cloud
        self.pixmap = _button_image(image)
        self.clicked = Signal()
        self.send_cloud = Signal()

    def press(self) -> None:
        """Handle a click: dim itself if self-offing, then emit ``clicked``."""
        if self.is_free():
            if self.param % _SELF_OFFING == 0:
                self.pixmap = _button_image(self.id)
            self.clicked.emit()

    def hover_enter(self) -> None:
        """Light up when the cursor enters."""
        if self.is_free():
            self.pixmap = _button_image(self.id, lit=True)

    def hover_leave(self) -> None:
        """Dim when the cursor leaves."""
        if self.is_free():
            self.pixmap = _button_image(self.id)

    def hover_move(self, x: int, y: int) -> None:
        """Ask for the hint cloud at the cursor, given in item coordinates."""
        if self.cloud > 0 and self.is_free():
            self.send_cloud.emit(self.x + x, self.y + y, self.cloud)


class SwitchingButton(_Item):
    """A button that stays on or off and emits ``enable`` or ``disable``."""

    def __init__(self, image: int, on: bool = False, cloud: int = -1) -> None:
        super().__init__()
        self.id = image
        self.cloud = cloud
        self.enable = Signal()
        self.disable = Signal()
        self.send_cloud = Signal()
        self.set_state(2 if on else 0, True)

    def set_state(self, state: int, force: bool = False) -> None:
        """Show a state: 0 off/dim, 1 off/lit, 2 on/dim, 3 on/lit.

        With ``force`` the on/off flag is brought in line with the picture.
        """
        if state > 1:
            if force and self.param % _SWITCHED_ON != 0:
                self.param *= _SWITCHED_ON
            self.pixmap = _switch_image(self.id, on=True, lit=state != 2)
        else:
            if force and self.param % _SWITCHED_ON == 0:
                self.param //= _SWITCHED_ON
            self.pixmap = _switch_image(self.id, on=False, lit=state != 0)

    def press(self) -> None:
        """Flip the switch and emit the matching signal."""
        if self.is_free():
            if self.param % _SWITCHED_ON == 0:
                self.set_state(1, True)
                self.disable.emit()
            else:
                self.set_state(3, True)
                self.enable.emit()

    def hover_enter(self) -> None:
        """Light up when the cursor enters."""
        if self.is_free():
            self.set_state(3 if self.param % _SWITCHED_ON == 0 else 1)

    def hover_leave(self) -> None:
        """Dim when the cursor leaves."""
        if self.is_free():
            self.set_state(2 if self.param % _SWITCHED_ON == 0 else 0)

    def hover_move(self, x: int, y: int) -> None:
        """Ask for the hint cloud at the cursor, given in item coordinates."""
        if self.cloud > 0 and self.is_free():
            self.send_cloud.emit(self.x + x, self.y + y, self.cloud)


class TextButton(_Item):
    """A clickable line of text that highlights under the cursor."""

    def __init__(
        self,
        text: str,
        size: int,
        green: bool = False,
        arial: bool = True,
        cloud: int = -1,
    ) -> None:
        super().__init__()
        self.text = text
        self.val = 0
        self.size = size
        self.cloud = cloud
        if arial:
            self.font = "Arial"
            self.param *= _ARIAL
        else:
            self.font = "Comic Sans MS"
        if green:
            self.color = Color.DARK_GREEN
            self.param *= _GREEN
        else:
            self.color = Color.BLACK
        self.clicked = Signal()
        self.send_cloud = Signal()

    def press(self) -> None:
        """Emit ``clicked`` with the button's value."""
        if self.is_free():
            self.clicked.emit(self.val)

    def hover_enter(self) -> None:
        """Highlight unless the text is marked static."""
        if self.param % _STATIC_TEXT != 0:
            self.color = Color.GREEN if self.param % _GREEN == 0 else Color.DARK_GRAY

    def hover_leave(self) -> None:
        """Restore the normal colour unless the text is marked static."""
        if self.param % _STATIC_TEXT != 0:
            self.color = Color.DARK_GREEN if self.param % _GREEN == 0 else Color.BLACK

    def hover_move(self) -> None:
        """Ask for the hint cloud just beside the text."""
        if self.cloud > 0 and self.is_free():
            self.send_cloud.emit(self.x - 10, self.y + 3, self.cloud)


class SimpleButton(_Item):
    """A plain picture that reports clicks with its value.

    With value 0 the click is reported on ``clicked_doc`` as ('P', 0),
    otherwise on ``clicked`` as the value.
    """

    def __init__(self) -> None:
        super().__init__()
        self.val = 0
        self.clicked = Signal()
        self.clicked_doc = Signal()

    def press(self) -> None:
        """Report a click."""
        if self.is_free():
            if self.val == 0:
                self.clicked_doc.emit("P", 0)
            else:
                self.clicked.emit(self.val)

    def regenerate(self, image: int) -> None:
        """Show the visitor picture with the given number."""
        self.pixmap = _face_image(image)


class Face(SimpleButton):
    """A visitor's face, or a photo of it when scaled below one."""

    def __init__(self, image: int, scale: float = 1.0, correct: bool = True) -> None:
        super().__init__()
        if not correct:
            other = rand_in_pool(1, 17)
            while other == image:
                other = rand_in_pool(1, 17)
            image = other
        if scale < 1:
            image = -image
        self.image = image
        self.scale = scale
        self.pixmap = _face_image(image)


class Stamp(SimpleButton):
    """A stamp on a document; wrong stamps are drawn when ``correct`` is false."""

    def __init__(self, doc: str, scale: float = 1.0, correct: bool = True) -> None:
        super().__init__()
        if doc == "X":
            doc = "M"
        if doc == "P":
            stamp = 5
        elif doc == "M":
            stamp = 7 if random.randrange(2) else 8
        elif doc == "R":
            stamp = 6
        else:
            raise ValueError(f"no stamp for document {doc!r}")
        if not correct:
            stamp = stamp_degenerator(stamp)
        self.stamp = stamp
        self.scale = scale
        self.pixmap = _button_image(stamp)


def _no_size(_cloud: int) -> tuple[int, int]:
    return (0, 0)


class Follower(_Item):
    """The hint cloud drawn above the cursor.

    ``cloud_size`` maps a cloud number to its (width, height); without it
    clouds are treated as having no size.
    """

    def __init__(self, cloud_size: Callable[[int], tuple[int, int]] | None = None) -> None:
        super().__init__()
        self.visible = False
        self._cloud_size = cloud_size or _no_size

    def draw_at(self, x: int, y: int, cloud: int) -> None:
        """Show the given cloud near the point, kept inside the window."""
        if not self.is_free():
            return
        self.pixmap = _cloud_image(cloud)
        self.x, self.y = self.recount(x, y, cloud)
        self.visible = True

    def recount(self, x: int, y: int, cloud: int) -> tuple[int, int]:
        """Return where to draw the cloud so that it fits in the window."""
        if cloud == _HELP_CLOUD:
            return _HELP_CLOUD_POS
        width, height = self._cloud_size(cloud)
        y -= height
        if y < _TOP_MARGIN:
            y += height + 7
        if x + width > _RIGHT_EDGE:
            x -= width
        return x, y

    def hide(self) -> None:
        """Hide the cloud."""
        self.visible = False

    def lock(self) -> None:
        """Hide the cloud and keep it hidden until released."""
        self.hide()
        self.safe_lock()

    def release(self) -> None:
        """Allow the cloud to be drawn again."""
        self.unlock()