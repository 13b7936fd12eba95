"""One visitor: their identity, document dates and planted mistakes."""

from __future__ import annotations

import random

from paperdesk.dates import DateGenerator
from paperdesk.mistakes import Mistakes
from paperdesk.names import degenerate_name, generate_name, generate_surname
from paperdesk.randomizer import generate_document_number, rand_in_pool


class Level:
    """Visitor data from which every document of a level is filled in."""

    def __init__(self) -> None:
        self.dates = DateGenerator()
        self.name = ""
        self.surname = ""
        self.face = 1
        self.mistakes = Mistakes.from_values({})
        self.paused = False
        self.insurance_number = ""
        self.regenerate()

    def name_for(self, doc: str) -> str:
        """Return the first name as printed on the given document."""
        if self.mistakes.is_name_correct(doc):
            return self.name
        if random.randrange(2):
            return degenerate_name(self.name)
        while True:
            other = generate_name()
            if other != self.name:
                return other

    def surname_for(self, doc: str) -> str:
        """Return the surname as printed on the given document."""
        if self.mistakes.is_surname_correct(doc):
            return self.surname
        if random.randrange(2):
            return degenerate_name(self.surname)
        while True:
            other = generate_surname()
            if other != self.surname:
                return other

    def regenerate(self) -> None:
        """Make a new visitor with fresh mistakes, dates and insurance number."""
        self.mistakes = Mistakes()
        if self.mistakes.is_blacklisted():
            self.set_black_list()
        else:
            self.face = rand_in_pool(1, 17)
            self.name = generate_name()
            self.surname = generate_surname()
        self.insurance_number = generate_document_number()
        self.dates = DateGenerator()
        self.dates.generate(self.mistakes.any_date_mistakes())

    def set_black_list(self) -> None:
        """Fill in the identity of the blacklisted visitor."""
        self.face = 1
        self.name = "Evgeny"
        self.surname = "Ponasenkov"