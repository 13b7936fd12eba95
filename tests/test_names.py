import random

import pytest

from paperdesk.names import (
    BAD_COUNTRIES,
    COUNTRIES,
    FIRST_NAMES,
    SURNAMES,
    degenerate_name,
    generate_bad_country,
    generate_country,
    generate_name,
    generate_surname,
)

ALL_NAMES = [
    "Evgeny", "Fedor", "John", "Sergey", "Konstantin", "Dmitri",
    "Bill", "Shirma", "Nikolai", "Boris", "Lisevsky", "Jurianov",
    "Bushuev", "Krivenya", "Selivanov", "Burdashev", "Kravchenko",
    "Dvinyatin", "Dudikov", "Nikitin",
]


@pytest.fixture(autouse=True)
def _seeded():
    random.seed(42)


def test_degenerate_bushuev_reaches_buchuev():
    results = {degenerate_name("Bushuev") for _ in range(50)}
    assert "Buchuev" in results


@pytest.mark.parametrize("name", ALL_NAMES)
def test_every_known_name_degenerates(name):
    assert degenerate_name(name) != name


def test_unknown_name_is_kept():
    assert degenerate_name("Ponasenkov") == "Ponasenkov"


def test_generators_stay_in_dictionaries():
    for _ in range(100):
        assert generate_name() in FIRST_NAMES
        assert generate_surname() in SURNAMES
        assert generate_country() in COUNTRIES
        assert generate_bad_country() in BAD_COUNTRIES


def test_good_and_bad_countries_disjoint():
    goods = {generate_country() for _ in range(300)}
    bads = {generate_bad_country() for _ in range(300)}
    assert goods.isdisjoint(bads)
    assert "Россия" in goods
    assert "СССР" in bads