"""Document windows: passport, consent, insurance, licence, certificate and more.

Each window lays out clickable fields filled from the current level.
Clicking a field reports its mistake code through the ``provide`` signal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

from paperdesk.buttons import (
    CustomButton,
    Face,
    Signal,
    Stamp,
    SwitchingButton,
    TextButton,
)
from paperdesk.level import Level
from paperdesk.names import generate_bad_country, generate_country
from paperdesk.randomizer import generate_document_number
from paperdesk.tutorial import TutorialPage

_STATIC_TEXT = 11

AGREEMENT_TEXT = (
    "Я, ______________________\n"
    "    (имя)     (фамилия)\n\n"
    "даю вашей конторе своё со-\n"
    "гласие на обработку, храние\n"
    "и продажу моих персональных\n"
    "данных. В случае кражи или\n"
    "утери вами моих данных либо\n"
    "документов обязуюсь выпла-\n"
    "тить вам штраф в размере\n"
    "пяти тысяч танцев.\n\n\n Дата:_________________"
)


class WindowKind(IntEnum):
    """The kinds of auxiliary window."""

    PASSPORT = 1
    AGREEMENT = 2
    INSURANCE = 3
    LICENSE = 4
    CERTIFICATE = 5
    DOSSIER = 6
    RULES = 7
    SECRET = 78


_ICONS = {
    WindowKind.PASSPORT: 4,
    WindowKind.AGREEMENT: 11,
    WindowKind.INSURANCE: 13,
    WindowKind.LICENSE: 15,
    WindowKind.CERTIFICATE: 12,
    WindowKind.DOSSIER: 17,
    WindowKind.RULES: 14,
}

_NEEDS_LEVEL = frozenset(
    {
        WindowKind.PASSPORT,
        WindowKind.AGREEMENT,
        WindowKind.INSURANCE,
        WindowKind.LICENSE,
        WindowKind.CERTIFICATE,
        WindowKind.DOSSIER,
    }
)


class _Layout(NamedTuple):
    doc: str
    title: str
    title_size: int
    date_size: int
    name_pos: tuple[int, int]
    surname_pos: tuple[int, int]
    title_pos: tuple[int, int]
    date_pos: tuple[int, int]


_IDENTITY = {
    WindowKind.PASSPORT: _Layout("P", "Паспорт", 36, 24, (250, 290), (320, 290), (180, 80), (255, 190)),
    WindowKind.AGREEMENT: _Layout("A", "Согласие", 20, 12, (170, 97), (240, 97), (190, 57), (190, 302)),
    WindowKind.INSURANCE: _Layout("M", "Страховой полис", 18, 12, (180, 110), (250, 110), (180, 70), (170, 303)),
    WindowKind.LICENSE: _Layout("R", "Лицензия на вождение", 20, 12, (145, 257), (215, 257), (150, 215), (150, 305)),
    WindowKind.CERTIFICATE: _Layout("X", "Заключение", 20, 12, (150, 227), (210, 227), (190, 180), (160, 360)),
}


@dataclass
class DocumentField:
    """One item placed in a window; interactive fields report clicks."""

    name: str
    item: object
    interactive: bool = False


class DocumentWindow:
    """An auxiliary window whose contents depend on its kind."""

    def __init__(self, kind: int, level: Level | None = None) -> None:
        try:
            self.kind = WindowKind(kind)
        except ValueError:
            raise ValueError(f"unknown window kind {kind!r}") from None
        if self.kind in _NEEDS_LEVEL and level is None:
            raise ValueError(f"window {self.kind.name.lower()} needs a level")
        self.level = level
        self.background = f"backgrounds/fon{int(self.kind)}.png"
        icon = _ICONS.get(self.kind)
        self.icon = f"buttons/id{icon}.png" if icon is not None else None
        self.visible = False
        self.fields: dict[str, DocumentField] = {}
        self.tutorial: TutorialPage | None = None
        self.text_position: tuple[int, int] | None = None
        self.closed = Signal()
        self.provide = Signal()
        self._build()

    def _add(self, name, item, pos, val=None, interactive=False):
        item.x, item.y = pos
        if val is not None:
            item.val = val
        if interactive:
            item.clicked.connect(self.provide_input)
        self.fields[name] = DocumentField(name, item, interactive)
        return item

    def _build(self) -> None:
        builders = {
            WindowKind.PASSPORT: self._build_passport,
            WindowKind.AGREEMENT: self._build_agreement,
            WindowKind.INSURANCE: self._build_insurance,
            WindowKind.LICENSE: self._build_license,
            WindowKind.CERTIFICATE: self._build_certificate,
            WindowKind.DOSSIER: self._build_dossier,
            WindowKind.RULES: self._build_rules,
            WindowKind.SECRET: self._build_secret,
        }
        builders[self.kind]()

    def _arial(self, doc: str) -> bool:
        return not self.level.mistakes.is_sans(doc)

    def _add_identity(self) -> None:
        layout = _IDENTITY[self.kind]
        level = self.level
        arial = self._arial(layout.doc)
        title = TextButton(layout.title, layout.title_size, False, arial)
        first = TextButton(level.name_for(layout.doc), 12, False, arial)
        second = TextButton(level.surname_for(layout.doc), 12, False, arial)
        date = TextButton(level.dates[layout.doc], layout.date_size, False, arial)
        if level.mistakes.is_swapped(layout.doc):
            first, second = second, first
        self._add("name", first, layout.name_pos, 2, True)
        self._add("surname", second, layout.surname_pos, 4, True)
        self._add("title", title, layout.title_pos, 5, True)
        self._add("date", date, layout.date_pos, 3, True)

    def _build_passport(self) -> None:
        level = self.level
        mistakes = level.mistakes
        arial = self._arial("P")
        country = generate_country() if mistakes.has_correct_country() else generate_bad_country()
        self._add("stamp", Stamp("P", 2, mistakes.is_stamp_correct("P")), (335, 365), 11, True)
        self._add("number", TextButton(generate_document_number(), 24, False, arial), (255, 138))
        self._add("country", TextButton(country, 24, False, arial), (220, 367), 12, True)
        self._add("birth", TextButton(level.dates["H"], 20, False, arial), (240, 317), 6, True)
        self._add("face", Face(level.face, 0.375, mistakes.is_face_correct("P")), (120, 290), 7, True)
        self._add_identity()

    def _build_agreement(self) -> None:
        body = TextButton(AGREEMENT_TEXT, 14, False, self._arial("A"))
        body.param *= _STATIC_TEXT
        self._add("body", body, (145, 95))
        self._add_identity()

    def _build_insurance(self) -> None:
        level = self.level
        arial = self._arial("M")
        self._add("stamp", Stamp("M", 2, level.mistakes.is_stamp_correct("M")), (265, 320), 11, True)
        self._add("number", TextButton(level.insurance_number, 12, False, arial), (180, 273), 7, True)
        self._add_identity()

    def _build_license(self) -> None:
        level = self.level
        mistakes = level.mistakes
        self._add("face", Face(level.face, 0.25, mistakes.is_face_correct("R")), (300, 280), 7, True)
        self._add("stamp", Stamp("R", 1, mistakes.is_stamp_correct("R")), (240, 310), 11, True)
        self._add_identity()

    def _build_certificate(self) -> None:
        level = self.level
        mistakes = level.mistakes
        arial = self._arial("X")
        stamp = Stamp("X", 2, mistakes.is_stamp_correct("X"))
        number = level.insurance_number
        if mistakes.medicine_number_mistakes():
            number = generate_document_number()
            while number == level.insurance_number:
                number = generate_document_number()
        verdict = "здоров" if mistakes.x_healthy() else "болен"
        self._add("number", TextButton(number, 12, False, arial), (160, 273), 6, True)
        self._add("result", TextButton(verdict, 16, False, arial), (155, 300), 7, True)
        self._add("stamp", stamp, (275, 330), 11, True)
        self._add_identity()

    def _build_dossier(self) -> None:
        name = TextButton("Имя: " + self.level.name, 22)
        surname = TextButton("Фамилия: " + self.level.surname, 22)
        name.param *= _STATIC_TEXT
        surname.param *= _STATIC_TEXT
        self._add("name", name, (215, 170))
        self._add("surname", surname, (215, 195))

    def _build_rules(self) -> None:
        left = CustomButton(20, True)
        right = CustomButton(21, True)
        tutorial = TutorialPage()
        self._add("left", left, (185, 430))
        self._add("right", right, (225, 430))
        left.safe_lock()
        self.tutorial = tutorial
        self.text_position = (7, 75)

        left.clicked.connect(tutorial.backward)
        right.clicked.connect(tutorial.forward)
        tutorial.lock_right.connect(right.safe_lock)
        tutorial.unlock_right.connect(right.unlock)
        tutorial.lock_left.connect(left.safe_lock)
        tutorial.unlock_left.connect(left.unlock)

    def _build_secret(self) -> None:
        self._add("switch", SwitchingButton(18, self.level is not None), (100, 50))

    def provide_input(self, code: int) -> None:
        """Pass a field's mistake code on, ignoring the codes 0 and 1."""
        if code * code != code:
            self.provide.emit(code)

    def show(self) -> None:
        """Make the window visible."""
        self.visible = True

    def close(self) -> None:
        """Close the window and emit ``closed``."""
        self.closed.emit()
        self.visible = False

    def toggle_visibility(self) -> None:
        """Hide the window if shown, show it if hidden."""
        self.visible = not self.visible