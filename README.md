# paperdesk

A small puzzle game about checking paperwork. A visitor comes up to your
desk with a stack of documents: a passport, a consent form for processing
personal data, a medical insurance policy, a driving licence and a
psychiatrist's certificate. Each visitor hides up to two mistakes: a
misspelled name, swapped first name and surname, a wrong font, a date that
cannot exist (31 April), a wrong photo, a forged stamp, a country that no
longer exists, or a visitor on the black list. Find the mistakes, then let
the visitor through or refuse them before the shift runs out.

The in-game texts are in Russian.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
paperdesk
paperdesk --seed 42
```

The game is played with text commands read from standard input. After each
command the current screen is printed: the screen name, the score, the time
left, the names of the items on screen, the pop-up panel when it is open,
and the fields of every open document window.

Commands:

- `press ITEM` – click an item by the name shown in the `items:` line,
  for example `press play` in the menu, or `press passport`, `press tick`
  (let through), `press cross` (refuse), `press pause`, `press door` on the
  desk.
- `close` – click the close button of the pop-up panel.
- `click WINDOW FIELD` – click a field in a document window. Windows are
  `passport`, `agreement`, `medicine`, `rights`, `psycho`, `stenography`
  and `tutorial`; fields include `name`, `surname`, `title`, `date`,
  `stamp`, `face`, `number`, `country`, `birth` and `result`.
- `wait [SECONDS]` – let the countdown run for the given number of seconds
  (one by default); nothing happens while paused.
- `quit` – leave the game.

`--seed` makes the visitors and their mistakes repeatable.

Rules in brief: the game date is always 31.05.2019 and a shift lasts
60 seconds. Clicking a wrong field records the mistake and unlocks the
refusal button. At most two document windows can be open at once. If the
consent form is invalid, opening any other document ends the visit as a
failure. Letting through a visitor with correct papers scores 6, letting
through a wrong one costs 3; refusing a correct one costs 2, refusing a
wrong one scores 2 plus the points for the mistakes found.

## What it does not do

There is no graphical window and no sound. Pictures, music tracks and
cursors are kept only as file names on the items; nothing is drawn or
played. The countdown does not run by itself: it advances only on `wait`.

## Using the pieces

The game logic can also be used on its own.

```python
from paperdesk.dates import Date, DateGenerator
from paperdesk.mistakes import Mistakes
from paperdesk.level import Level

a = Date(1, 2, 2000)
b = Date(2, 2, 2000)
assert a < b
print(str(a))                  # 01.02.2000

between = Date(13, 5, 1984).between(Date(12, 4, 2016))

mistakes = Mistakes.from_values({"P": 5})
print(mistakes.is_sans("P"))   # True
print(mistakes.is_it_yours("P", 5), mistakes.is_correct())

level = Level()
print(level.name_for("P"), level.surname_for("P"))
print(level.mistakes.text_form())
```

Modules:

- `paperdesk.randomizer` – random helpers: `two_digit`, `random_for_mistakes`,
  `rand_in_pool`, `generate_perc`, `generate_document_number`,
  `stamp_degenerator`, `rand_of_set`.
- `paperdesk.names` – names, surnames, valid and invalid countries, and
  `degenerate_name`, which returns a name with a typo.
- `paperdesk.lockable` – `Lockable`, a nestable lock used by the buttons.
- `paperdesk.dates` – `Date`, which may hold impossible days on purpose,
  and `DateGenerator`, which fills in every document's date.
- `paperdesk.mistakes` – `Mistakes`, the hidden errors of one visitor.
- `paperdesk.level` – `Level`, the visitor and their data.
- `paperdesk.resizer` – `scale` and `double` for lengths and size tuples.
- `paperdesk.buttons` – `Signal`, `CustomButton`, `SwitchingButton`,
  `TextButton`, `SimpleButton`, `Face`, `Stamp` and the hint cloud
  `Follower`.
- `paperdesk.tutorial` – `TutorialPage`, the rule book.
- `paperdesk.documents` – `DocumentWindow` and `DocumentField`, the
  contents of each document window.
- `paperdesk.mechanism` – `Mechanism`: the verdict buttons, countdown,
  pause and debug switch.
- `paperdesk.windows` – `WindowManager`, which opens, closes and routes
  the document windows.
- `paperdesk.game` – `Game`, `Player`, `SubWindow` and the `main` command.