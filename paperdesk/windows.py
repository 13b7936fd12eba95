"""Keeps the auxiliary windows and decides which may be opened."""

from __future__ import annotations

from paperdesk.buttons import Signal
from paperdesk.documents import DocumentWindow, WindowKind
from paperdesk.level import Level

_DYNAMIC = (
    ("passport", WindowKind.PASSPORT),
    ("agreement", WindowKind.AGREEMENT),
    ("medicine", WindowKind.INSURANCE),
    ("rights", WindowKind.LICENSE),
    ("psycho", WindowKind.CERTIFICATE),
    ("stenography", WindowKind.DOSSIER),
)

_BY_INDEX = {
    1: "passport",
    2: "agreement",
    3: "medicine",
    4: "rights",
    5: "psycho",
    6: "stenography",
    7: "tutorial",
}


class WindowManager:
    """Creates the document windows, keeps at most two open and routes their clicks.

    Clicks arrive on ``provide`` as (document letter, mistake code);
    ``privacy_break`` is emitted when a document is opened although the
    consent to data processing is invalid.
    """

    def __init__(self, level: Level | None = None) -> None:
        self.level = level
        self.first: DocumentWindow | None = None
        self.second: DocumentWindow | None = None
        self.passport: DocumentWindow | None = None
        self.agreement: DocumentWindow | None = None
        self.medicine: DocumentWindow | None = None
        self.rights: DocumentWindow | None = None
        self.psycho: DocumentWindow | None = None
        self.stenography: DocumentWindow | None = None
        self.tutorial = DocumentWindow(WindowKind.RULES)
        self.privacy_break = Signal()
        self.provide = Signal()

    def _require_level(self) -> Level:
        if self.level is None:
            raise RuntimeError("no level is set")
        return self.level

    def dynamic_documents(self) -> None:
        """Create the document windows for the current level."""
        level = self._require_level()
        for attribute, kind in _DYNAMIC:
            setattr(self, attribute, DocumentWindow(kind, level))
        self.passport.provide.connect(self.provide_passport)
        self.rights.provide.connect(self.provide_license)
        self.psycho.provide.connect(self.provide_x)
        self.medicine.provide.connect(self.provide_medicine)
        self.agreement.provide.connect(self.provide_agreement)

    def clear_dynamics(self) -> None:
        """Close open windows and drop every document window but the rules."""
        self.kill()
        for attribute, _kind in _DYNAMIC:
            setattr(self, attribute, None)

    def provide_passport(self, code: int) -> None:
        """Route a passport click; birth date and country belong to the consent slot."""
        if code == 6:
            self.provide.emit("A", 7)
        elif code == 12:
            self.provide.emit("A", 11)
        else:
            self.provide.emit("P", code)

    def provide_x(self, code: int) -> None:
        """Route a certificate click; its insurance number belongs to the insurance."""
        if code == 6:
            self.provide.emit("M", 7)
        else:
            self.provide.emit("X", code)

    def provide_license(self, code: int) -> None:
        """Route a driving licence click."""
        self.provide.emit("R", code)

    def provide_medicine(self, code: int) -> None:
        """Route an insurance click."""
        self.provide.emit("M", code)

    def provide_agreement(self, code: int) -> None:
        """Route a consent click."""
        self.provide.emit("A", code)

    def kill(self) -> None:
        """Close both open windows."""
        self.close_first()
        self.close_second()

    def close_first(self) -> None:
        """Close the first open window and free its slot."""
        window = self.first
        if window is not None:
            window.closed.disconnect(self.close_first)
            if window.visible:
                window.close()
            self.first = None

    def close_second(self) -> None:
        """Close the second open window and free its slot."""
        window = self.second
        if window is not None:
            window.closed.disconnect(self.close_second)
            if window.visible:
                window.close()
            self.second = None

    def _is_open(self, window: DocumentWindow) -> bool:
        return window is self.first or window is self.second

    def open(self, window: DocumentWindow | None) -> None:
        """Open a window in a free slot; nothing happens when both are taken."""
        if window is None or self._is_open(window):
            return
        if self.first is None:
            self.first = window
            window.show()
            window.closed.connect(self.close_first)
        elif self.second is None:
            self.second = window
            window.show()
            window.closed.connect(self.close_second)

    def close(self, window: DocumentWindow | None) -> None:
        """Close a window if it occupies a slot."""
        if window is None:
            return
        if window is self.first:
            window.close()
            self.first = None
        elif window is self.second:
            window.close()
            self.second = None

    def toggle(self, window: DocumentWindow | None) -> None:
        """Close the window if open, otherwise open it."""
        if window is None:
            return
        if self._is_open(window):
            self.close(window)
        else:
            self.open(window)

    def toggle_window(self, index: int) -> None:
        """Toggle a window by its kind number (1 to 7); other numbers are ignored."""
        attribute = _BY_INDEX.get(index)
        if attribute is not None:
            self.toggle(getattr(self, attribute))

    def open_tutorial(self) -> None:
        """Toggle the rules window."""
        self.toggle_window(WindowKind.RULES)

    def open_agreement(self) -> None:
        """Toggle the consent window unless paused."""
        if self._require_level().paused:
            return
        self.toggle_window(WindowKind.AGREEMENT)

    def open_stenography(self) -> None:
        """Toggle the dossier window unless paused."""
        if self._require_level().paused:
            return
        self.toggle_window(WindowKind.DOSSIER)

    def _open_guarded(self, kind: WindowKind) -> None:
        level = self._require_level()
        if level.paused:
            return
        if level.mistakes.is_consent_invalid():
            self.privacy_break.emit()
            return
        self.toggle_window(kind)

    def open_passport(self) -> None:
        """Toggle the passport window, if reading it is allowed."""
        self._open_guarded(WindowKind.PASSPORT)

    def open_medicine(self) -> None:
        """Toggle the insurance window, if reading it is allowed."""
        self._open_guarded(WindowKind.INSURANCE)

    def open_license(self) -> None:
        """Toggle the driving licence window, if reading it is allowed."""
        self._open_guarded(WindowKind.LICENSE)

    def open_x(self) -> None:
        """Toggle the certificate window, if reading it is allowed."""
        self._open_guarded(WindowKind.CERTIFICATE)

    def pause_pressed(self) -> None:
        """Close every window that may not be read while paused."""
        for window in (
            self.passport,
            self.psycho,
            self.medicine,
            self.rights,
            self.agreement,
            self.stenography,
        ):
            self.close(window)