import pytest

from paperdesk.tutorial import TutorialPage


class Recorder:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


def test_starts_on_contents():
    tut = TutorialPage()
    assert tut.page == 0
    assert tut.text.startswith("Содержание:")
    assert tut.text_visible
    assert tut.page_count == len(tut.pages)


def test_first_forward_unlocks_left():
    tut = TutorialPage()
    rec = Recorder()
    tut.unlock_left.connect(rec)
    tut.forward()
    assert rec.count == 1
    assert tut.text == tut.pages[1]


def test_forward_backward_round_trip():
    tut = TutorialPage()
    tut.forward()
    tut.forward()
    tut.backward()
    assert tut.text == tut.pages[1]


def test_back_to_start_locks_left():
    tut = TutorialPage()
    rec = Recorder()
    tut.lock_left.connect(rec)
    tut.forward()
    tut.backward()
    assert rec.count == 1
    assert tut.text == tut.pages[0]


def test_picture_pages_at_end():
    tut = TutorialPage()
    locked = Recorder()
    tut.lock_right.connect(locked)
    for _ in range(tut.page_count):
        tut.forward()
    assert tut.guys_visible
    assert not tut.text_visible
    tut.forward()
    assert not tut.guys_visible
    assert tut.captain_visible
    assert locked.count == 1


def test_back_from_last_picture_unlocks_right():
    tut = TutorialPage()
    unlocked = Recorder()
    tut.unlock_right.connect(unlocked)
    for _ in range(tut.page_count + 1):
        tut.forward()
    tut.backward()
    assert unlocked.count == 1
    assert tut.guys_visible
    assert not tut.captain_visible
    tut.backward()
    assert not tut.guys_visible
    assert tut.text_visible


def test_turning_past_the_ends_raises():
    tut = TutorialPage()
    with pytest.raises(IndexError):
        tut.backward()
    for _ in range(tut.page_count + 1):
        tut.forward()
    with pytest.raises(IndexError):
        tut.forward()