import random
import re

import pytest

from paperdesk.mistakes import Mistakes

HEADER = "Оставшиеся ошибки:\n"


def _entries(mistakes):
    return {doc: int(value) for doc, value in re.findall(r"([APRMX])(\d+)", mistakes.debug_string())}


def test_defaults_are_correct():
    m = Mistakes.from_values({})
    assert m.is_correct()
    assert m.debug_string() == "0"
    assert m.any_date_mistakes() is None
    assert m.text_form() == HEADER + "<Отсутствуют>"


def test_blacklist():
    m = Mistakes.from_values({"P": 0})
    assert m.is_blacklisted()
    assert m.debug_string() == "B"
    assert m.any_date_mistakes() is None
    assert m.is_it_yours("P", 0)
    assert not m.is_blacklisted()


def test_blacklist_text_when_other_mistakes_remain():
    m = Mistakes.from_values({"P": 0, "M": 5})
    assert m.text_form() == HEADER + "Посетитель в чёрном списке"


def test_first_name_mistake():
    m = Mistakes.from_values({"P": 2})
    assert not m.is_name_correct("P")
    assert m.is_surname_correct("P")
    assert not m.is_it_yours("P", 4)
    assert m.is_it_yours("P", 2)
    assert m.is_correct()


def test_surname_mistake():
    m = Mistakes.from_values({"R": 4})
    assert m.is_name_correct("R")
    assert not m.is_surname_correct("R")
    assert not m.is_it_yours("R", 2)
    assert m.is_it_yours("R", 4)
    assert m.is_correct()


def test_swapped_names_found_by_either_field():
    m = Mistakes.from_values({"M": 8})
    assert m.is_swapped("M")
    assert m.is_name_correct("M") and m.is_surname_correct("M")
    assert m.is_it_yours("M", 2)
    assert not m.is_swapped("M")


def test_odd_code_found_once():
    m = Mistakes.from_values({"M": 7})
    assert m.medicine_number_mistakes()
    assert not m.is_face_correct("M")
    assert m.is_it_yours("M", 7)
    assert not m.is_it_yours("M", 7)
    assert not m.medicine_number_mistakes()


def test_zero_code_does_not_match_ordinary_mistake():
    m = Mistakes.from_values({"R": 5})
    assert not m.is_it_yours("R", 0)
    assert not m.is_it_yours("R", 3)
    assert m.is_sans("R")


def test_invalid_consent_marker():
    m = Mistakes.from_values({"X": 0})
    assert m.is_consent_invalid()
    assert m.x_healthy()
    assert m.is_it_yours("X", 0)
    assert not m.is_consent_invalid()


def test_certificate_mistakes_do_not_block_correctness():
    m = Mistakes.from_values({"X": 7})
    assert not m.x_healthy()
    assert m.is_correct()


@pytest.mark.parametrize("doc", ["R", "M", "P", "X"])
def test_date_mistake_letter(doc):
    assert Mistakes.from_values({doc: 3}).any_date_mistakes() == doc


def test_birth_date_mistake_from_consent_photo_code():
    assert Mistakes.from_values({"A": 7}).any_date_mistakes() == "H"


def test_country_and_stamp():
    m = Mistakes.from_values({"A": 11, "P": 11})
    assert not m.has_correct_country()
    assert not m.is_stamp_correct("P")
    assert m.is_stamp_correct("R")


def test_text_form_passport_font():
    m = Mistakes.from_values({"P": 5})
    assert m.text_form() == HEADER + "Паспорт:\n - Шрифт\n"


def test_text_form_consent_stamp():
    m = Mistakes.from_values({"A": 11})
    assert m.text_form() == HEADER + "Согласие на обработку:\n - Печать"


def test_text_form_certificate_diagnosis_listed():
    m = Mistakes.from_values({"R": 5, "X": 7})
    text = m.text_form()
    assert "Права:\n - Шрифт\n" in text
    assert "Справка:\n - Диагноз\n" in text


def test_unknown_document_rejected():
    m = Mistakes.from_values({})
    with pytest.raises(ValueError):
        m.is_it_yours("Z", 2)
    with pytest.raises(ValueError):
        Mistakes.from_values({"Z": 1})
    with pytest.raises(ValueError):
        Mistakes.from_values({"P": -1})


def test_generated_tables_keep_invariants():
    seen_correct = seen_wrong = False
    for seed in range(400):
        random.seed(seed)
        m = Mistakes()
        if m.is_blacklisted():
            assert m.debug_string() == "B"
            continue
        entries = _entries(m)
        consent = entries.get("A", 1)
        if consent not in (1, 7, 11, 77):
            assert entries.get("X") == 0
        assert m.any_date_mistakes() in (None, "A", "P", "R", "M", "X", "H")
        if m.is_correct():
            seen_correct = True
        else:
            seen_wrong = True
    assert seen_correct and seen_wrong