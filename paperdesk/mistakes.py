"""Generation and bookkeeping of the mistakes planted in a visitor's documents.

Each document letter maps to a product of mistake codes:

* 2 - wrong first name, 4 - wrong surname, 8 - first name and surname swapped
* 3 - wrong issue date, 5 - wrong font, 7 - wrong photo / diagnosis / number,
  11 - wrong stamp (or wrong country for the consent slot)
* 0 - a special marker: on 'P' the visitor is blacklisted, on 'X' the
  consent to data processing is invalid.
"""

from __future__ import annotations

import random
from collections.abc import Mapping

from paperdesk.randomizer import generate_perc, random_for_mistakes

DOCUMENTS = ("A", "P", "R", "M", "X")

_HEADER = "Оставшиеся ошибки:\n"


class _Remainder:
    """A mistake product from which found factors are divided out."""

    def __init__(self, value: int) -> None:
        self.value = value

    def take(self, factor: int) -> bool:
        if self.value in (0, 1):
            return factor == self.value
        if self.value % factor == 0:
            self.value //= factor
            return True
        return False


def _describe(value: int, doc: str) -> str:
    """Turn a mistake product into a human readable list of mistakes."""
    rest = _Remainder(value)
    text = " "
    if doc == "H":
        if rest.take(3):
            text += " - Дата рождения\n"
        if rest.take(11):
            text += " - Страна рождения"
        return text[1:]

    if value in (0, 1):
        return "."
    if rest.take(8):
        text += " - Порядок имя-фамилия"
    if rest.take(4):
        text += " - Фамилия"
    if rest.take(2):
        text += " - Имя"
    if rest.value != 1 and len(text) > 1:
        text += "\n"

    if rest.take(5):
        text += " - Шрифт"
        if rest.value != 1:
            text += "\n"

    if rest.take(3):
        text += " - Дата выдачи"
        if rest.value != 1:
            text += "\n"

    if rest.take(7):
        if doc == "X":
            text += " - Диагноз"
        elif doc == "M":
            text += " - Номера полиса в самом полисе и справке"
        else:
            text += " - Фото"
        if rest.value != 1:
            text += "\n"

    if rest.take(11):
        text += " - Печать"
    return text[1:]


def _same_kind(first: int, second: int) -> bool:
    """Equality in which all name mistakes (even codes) count as equal."""
    return first == second or (first % 2 == 0 and second % 2 == 0)


class Mistakes:
    """The mistakes of one level, generated once when the object is made."""

    def __init__(self, values: Mapping[str, int] | None = None) -> None:
        self._values = dict.fromkeys(DOCUMENTS, 1)
        if values is None:
            self._generate()
            return
        unknown = set(values) - set(DOCUMENTS)
        if unknown:
            raise ValueError(f"unknown document letters: {sorted(unknown)}")
        for doc, value in values.items():
            if value < 0:
                raise ValueError(f"mistake value for {doc!r} must not be negative")
            self._values[doc] = value

    @classmethod
    def from_values(cls, values: Mapping[str, int]) -> "Mistakes":
        """Build a mistake table from explicit values; missing letters are correct."""
        return cls(values)

    def _generate(self) -> None:
        if not generate_perc(30):
            if generate_perc(10):
                self._values["A"] = random_for_mistakes(False)
            elif generate_perc(10):
                self._values["P"] = 0
            else:
                first, second = self._two_codes()
                self._distribute(first)
                self._distribute(second)
        fix = self.any_date_mistakes()
        if fix not in (None, "H") and self._values["A"] == 7:
            self._values = dict.fromkeys(DOCUMENTS, 1)
            self._values["P"] = 0
        consent = self._values["A"]
        if consent != 1 and 77 % consent != 0:
            self._values["X"] = 0

    @staticmethod
    def _two_codes() -> tuple[int, int]:
        first = random_for_mistakes(True)
        while True:
            second = random_for_mistakes(True)
            if not _same_kind(first, second):
                return first, second

    def _distribute(self, code: int) -> None:
        slots = ["M", "P", "X", "R"]
        if code in (7, 11):
            slots.append("A")
        self._values[random.choice(slots)] *= code

    def _get(self, doc: str) -> int:
        try:
            return self._values[doc]
        except KeyError:
            raise ValueError(f"unknown document letter {doc!r}") from None

    def _name_mistake(self, doc: str, code: int) -> bool:
        value = self._get(doc)
        if value == 0 or code == 0 or value % 2 != 0:
            return False
        if value % 8 == 0:
            self._values[doc] //= 8
            return True
        if (code == 4 and value % 4 == 0) or (code == 2 and value % 4 != 0):
            self._values[doc] //= code
            return True
        return False

    def is_consent_invalid(self) -> bool:
        """Return True when the consent to data processing is invalid."""
        return self._values["X"] == 0

    def is_blacklisted(self) -> bool:
        """Return True when the visitor is on the black list."""
        return self._values["P"] == 0

    def is_correct(self) -> bool:
        """Return True when no findable mistakes remain."""
        return all(
            value in (0, 1) or doc == "X" for doc, value in self._values.items()
        )

    def is_it_yours(self, doc: str, code: int) -> bool:
        """Check a guessed mistake; a correct guess removes that mistake."""
        value = self._get(doc)
        if value == 0:
            if code == 0:
                self._values[doc] = 1
                return True
            return False
        if code % 2 == 0:
            return self._name_mistake(doc, code)
        if value % code == 0:
            self._values[doc] //= code
            return True
        return False

    def is_sans(self, doc: str) -> bool:
        """Return True when the document uses the wrong font."""
        value = self._get(doc)
        return value % 5 == 0 and value != 0

    def has_correct_country(self) -> bool:
        """Return True when the country of birth is valid."""
        return self._values["A"] % 11 != 0

    def x_healthy(self) -> bool:
        """Return True when the psychiatric certificate says healthy."""
        value = self._values["X"]
        return value % 7 != 0 or value == 0

    def medicine_number_mistakes(self) -> bool:
        """Return True when the insurance numbers disagree."""
        return self._values["M"] % 7 == 0

    def is_name_correct(self, doc: str) -> bool:
        """Return True when the first name on the document is right."""
        value = self._get(doc)
        return value % 2 != 0 or value % 4 == 0

    def is_surname_correct(self, doc: str) -> bool:
        """Return True when the surname on the document is right."""
        value = self._get(doc)
        return value % 4 != 0 or value % 8 == 0

    def is_swapped(self, doc: str) -> bool:
        """Return True when first name and surname are swapped."""
        value = self._get(doc)
        return value % 8 == 0 and value != 0

    def any_date_mistakes(self) -> str | None:
        """Return the letter of the document with a date mistake, 'H' for birth, or None."""
        if self.is_blacklisted():
            return None
        for doc, value in self._values.items():
            if value % 3 == 0 and value != 0:
                return doc
        if self._values["A"] % 7 == 0:
            return "H"
        return None

    def is_face_correct(self, doc: str) -> bool:
        """Return True when the photo on the document is right."""
        value = self._get(doc)
        return value % 7 != 0 or value == 0

    def is_stamp_correct(self, doc: str) -> bool:
        """Return True when the stamp on the document is right."""
        value = self._get(doc)
        return value % 11 != 0 or value == 0

    def debug_string(self) -> str:
        """Return a compact listing of the remaining mistakes."""
        if self.is_blacklisted():
            return "B"
        if self.is_correct():
            return "0"
        return "".join(
            f"{doc}{value}" for doc, value in self._values.items() if value != 1
        )

    def text_form(self) -> str:
        """Return the end-of-level description of the mistakes not found."""
        text = _HEADER
        values = self._values
        if self.is_correct():
            return text + "<Отсутствуют>"
        if self.is_blacklisted():
            return text + "Посетитель в чёрном списке"
        if values["A"] > 1:
            return text + "Согласие на обработку:\n" + _describe(values["A"], "A")
        if values["P"] > 1:
            text += "Паспорт:\n" + _describe(values["P"], "P") + "\n"
        if values["M"] > 1:
            text += "Полис:\n" + _describe(values["M"], "M") + "\n"
        if values["R"] > 1:
            text += "Права:\n" + _describe(values["R"], "R") + "\n"
        if values["X"] > 1:
            text += "Справка:\n" + _describe(values["X"], "X") + "\n"
        return text