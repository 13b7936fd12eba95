import random
import re

from paperdesk.level import Level
from paperdesk.mistakes import Mistakes
from paperdesk.names import FIRST_NAMES, SURNAMES

DATE_RE = re.compile(r"^\d\d\.\d\d\.\d{4}$")


def test_new_level_fields():
    random.seed(3)
    level = Level()
    assert level.paused is False
    assert 1 <= level.face <= 17
    assert len(level.insurance_number) == 10 and level.insurance_number.isdigit()
    for doc in "HPARMX":
        assert DATE_RE.match(level.dates[doc])


def test_identity_comes_from_dictionaries():
    for seed in range(100):
        random.seed(seed)
        level = Level()
        if level.mistakes.is_blacklisted():
            assert (level.name, level.surname) == ("Evgeny", "Ponasenkov")
        else:
            assert level.name in FIRST_NAMES
            assert level.surname in SURNAMES


def test_blacklisted_level_found():
    found = None
    for seed in range(1000):
        random.seed(seed)
        level = Level()
        if level.mistakes.is_blacklisted():
            found = level
            break
    assert found is not None
    assert found.face == 1
    assert found.name == "Evgeny"


def test_set_black_list():
    random.seed(1)
    level = Level()
    level.set_black_list()
    assert level.face == 1
    assert level.name == "Evgeny"
    assert level.surname == "Ponasenkov"


def test_correct_documents_show_true_names():
    random.seed(5)
    level = Level()
    level.mistakes = Mistakes.from_values({})
    for doc in "APRMX":
        assert level.name_for(doc) == level.name
        assert level.surname_for(doc) == level.surname


def test_wrong_first_name_differs():
    for seed in range(50):
        random.seed(seed)
        level = Level()
        level.name = "Bushuev" if seed % 2 else level.name
        level.mistakes = Mistakes.from_values({"P": 2})
        assert level.name_for("P") != level.name
        assert level.surname_for("P") == level.surname


def test_regenerate_replaces_mistakes():
    random.seed(11)
    level = Level()
    before = level.mistakes
    level.regenerate()
    assert level.mistakes is not before
    assert len(level.insurance_number) == 10