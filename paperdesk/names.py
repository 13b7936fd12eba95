"""Dictionaries of visitor names, surnames and countries."""

from __future__ import annotations

import random

from paperdesk.randomizer import rand_of_set

FIRST_NAMES = (
    "Evgeny", "Fedor", "John", "Sergey", "Konstantin",
    "Dmitri", "Bill", "Shirma", "Nikolai", "Boris",
)

SURNAMES = (
    "Lisevsky", "Jurianov", "Bushuev", "Krivenya", "Selivanov",
    "Burdashev", "Kravchenko", "Dvinyatin", "Dudikov", "Nikitin",
)

COUNTRIES = (
    "Россия", "Бразилия", "Гондурас", "Италия", "Словения",
    "Германия", "США", "Китай", "Австрия", "Венгрия",
)

BAD_COUNTRIES = (
    "Югославия", "СССР", "Чехословакия", "Пандария", "Нарния",
    "Сатурн", "Биробиджан", "Татарстан", "Атлантида", "Ералаш",
)

_TYPOS = {
    "Evgeny": ("Evgeni", "Evgeniy"),
    "Fedor": ("Febor", "Feedor"),
    "John": ("Jonn", "Iohn"),
    "Sergey": ("Sergei", "Sergeiy"),
    "Konstantin": ("Kontatin",),
    "Dmitri": ("Dmitrii", "Nikita", "Dmitriy"),
    "Bill": ("BiП", "Bi1l"),
    "Shirma": ("Shirna", "Snirma"),
    "Nikolai": ("Nikolay", "Hikolai"),
    "Boris": ("Borys",),
    "Lisevsky": ("Lisevski", "Licevsky"),
    "Jurianov": ("Juryanov", "Jurianow"),
    "Bushuev": ("Bushuew", "Buchuev"),
    "Krivenya": ("Kryvenia", "Krivenia"),
    "Selivanov": ("Silivanov", "Seliwanov"),
    "Burdashev": ("Burdachev", "Burdachew"),
    "Kravchenko": ("Kravchenkov", "Krachenko"),
    "Dvinyatin": ("Dvinyatyn", "Dvinya1in"),
    "Dudikov": ("Dudykov", "Dubikov"),
    "Nikitin": ("Nikiitin",),
}


def generate_name() -> str:
    """Return a random first name."""
    return random.choice(FIRST_NAMES)


def generate_surname() -> str:
    """Return a random surname."""
    return random.choice(SURNAMES)


def generate_country() -> str:
    """Return a random valid country of birth."""
    return random.choice(COUNTRIES)


def generate_bad_country() -> str:
    """Return a random invalid country of birth."""
    return random.choice(BAD_COUNTRIES)


def degenerate_name(name: str) -> str:
    """Return the name with a typo, or the name itself if no typo is known."""
    typos = _TYPOS.get(name)
    if typos is None:
        return name
    return rand_of_set(typos)