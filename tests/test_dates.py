import random

import pytest

from paperdesk.dates import Date, DateGenerator


@pytest.fixture(autouse=True)
def _seeded():
    random.seed(7)


def test_order():
    a = Date(1, 2, 2000)
    b = Date(2, 2, 2000)
    c = Date(15, 1, 2000)
    d = Date(31, 6, 1970)
    assert a < b
    assert c < a
    assert d < c
    assert b > a


def test_rand_between():
    a = Date(12, 4, 2016)
    b = Date(13, 5, 1984)
    for _ in range(50):
        c = b.between(a)
        assert c < a
        assert b < c


def test_between_wrong_order_gives_default():
    assert Date(12, 4, 2016).between(Date(13, 5, 1984)) == Date()


def test_between_without_room_raises():
    with pytest.raises(ValueError):
        Date(1, 1, 2000).between(Date(2, 1, 2000))


def test_month_before():
    a = Date(12, 4, 2016)
    b = Date(12, 4, 2016)
    a.previous_month()
    assert a.day == 12
    assert a.month == 3
    assert a.year == 2016
    c = b.within_month_before()
    assert c < b
    assert a < c


def test_month_steps_wrap_year():
    d = Date(5, 1, 2000)
    d.previous_month()
    assert (d.day, d.month, d.year) == (5, 12, 1999)
    d.next_month()
    assert (d.day, d.month, d.year) == (5, 1, 2000)


def test_string_form():
    assert str(Date(31, 5, 2019)) == "31.05.2019"
    assert str(Date()) == "01.11.2000"


def test_long_months():
    assert Date.is_long_month(5)
    assert not Date.is_long_month(4)
    assert not Date.is_long_month(2)


def test_fill_day_valid_range():
    for _ in range(100):
        d = Date(month=2, year=2001)
        d.fill_day(True)
        assert 1 <= d.day <= 28
        d = Date(month=2, year=2000)
        d.fill_day(True)
        assert 1 <= d.day <= 29
        d = Date(month=4, year=2000)
        d.fill_day(True)
        assert 1 <= d.day <= 30


def test_fill_day_invalid():
    d = Date(month=2, year=2001)
    d.fill_day(False)
    assert d.day == 31


def test_years_shift_round_trip():
    d = Date(31, 5, 2019)
    assert d.years_before(18).years_after(18) == d
    assert d.years_before(18).year == 2001
    assert d == Date(31, 5, 2019)


def test_randomize_earlier_and_later():
    base = Date(15, 6, 2005)
    for _ in range(50):
        earlier = Date(15, 6, 2005)
        earlier.randomize_earlier()
        assert earlier < base
        assert earlier.year >= 1970
        later = Date(15, 6, 2005)
        later.randomize_later()
        assert later > base
        assert later < Date(31, 5, 2019)


def test_randomize_later_without_room_raises():
    with pytest.raises(ValueError):
        Date(30, 5, 2019).randomize_later()


def test_randomize_invalid_earlier():
    for start in (Date(10, 8, 2010), Date(10, 3, 2010), Date(10, 1, 2010)):
        d = Date(start.day, start.month, start.year)
        d.randomize_invalid_earlier()
        assert d.day == 31
        assert not Date.is_long_month(d.month)
        assert d < start


def test_before_month_of():
    start = Date(1, 1, 2000)
    end = Date(31, 5, 2019)
    for _ in range(30):
        d = start.before_month_of(end)
        assert start < d
        assert d < Date(31, 4, 2019)


def test_generator_today_and_unknown_key():
    gen = DateGenerator()
    gen.generate()
    assert gen["Z"] == "31.05.2019"
    assert str(gen.dates[6]) == "31.05.2019"


def test_generator_without_mistake_is_consistent():
    today = Date(31, 5, 2019)
    for _ in range(50):
        gen = DateGenerator()
        gen.generate(None)
        birth, passport, consent, licence, insurance, cert = gen.dates[:6]
        adult = birth.years_after(14)
        assert birth < today.years_before(18)
        assert adult < passport < today
        assert adult < licence < today
        assert Date(31, 4, 2019) < cert < today
        assert Date(31, 4, 2019) < consent < today
        assert adult < insurance < cert
        assert gen["H"] == str(birth)
        assert gen["M"] == str(insurance)


def test_generator_birth_mistake():
    for _ in range(30):
        gen = DateGenerator()
        gen.generate("H")
        birth = gen.dates[0]
        assert birth.day == 31
        assert not Date.is_long_month(birth.month)


def test_generator_passport_mistake():
    for _ in range(30):
        gen = DateGenerator()
        gen.generate("P")
        birth, passport = gen.dates[0], gen.dates[1]
        adult = birth.years_after(14)
        invalid = passport.day == 31 and not Date.is_long_month(passport.month)
        too_early = birth < passport < adult
        assert invalid or too_early


def test_generator_certificate_mistake():
    for _ in range(30):
        gen = DateGenerator()
        gen.generate("X")
        cert = gen.dates[5]
        assert gen["X"] == "31.04.2019" or cert < Date(31, 4, 2019)
        assert gen.dates[0].years_after(14) < cert