"""The rule book window: pages of text with two hidden pictures at the end."""

from __future__ import annotations

from paperdesk.buttons import Signal

PAGES = (
    "Содержание:\n"
    "  - Управление\n"
    "  - Общие положения\n"
    "  - Список документов\n",

    "Управление 1.\n\n"
    "  Для управления вам понадобится только мышь.\n"
    "  Нажимайте на активные предметы, чтобы взаи-\nмодействовать с ними.\n"
    "  Некоторые предметы открывают новые окна.\n"
    "  У вас может быть открыто не более двух вспо-\nмогательных окон.\n"
    "  Динамик включает и выключает музыку.\n  Выход - дверь.\n"
    "  Обратите внимание, в игре всегда одна и та\nже дата (31.05.2019) и свой ход времени.\n\n"
    "  При входе посетитель называет имя и фамилию, \n"
    "их можно прочитать на листке бумаги, торащем\nиз принтера."
    "\n",

    "Управление 2.\n\n"
    "  Ваша задача: вынести вердикт, верно ли оформ-\nлены документы.\n"
    "  Нажмите на неправильное поле в документе,\nчтобы зафиксировать ошибку.\n"
    "  На уровне генерируется 0-2 ошибок.\n"
    "  Обнаружение ошибки открывает кнопку отказа.\n"
    "  Посетителям с правильными документами надо \nдавать разрешение, "
    "с неправильными - отказ.\n"
    "  Неправильный шрифт фиксируется нажатием \nна название документа.\n"
    "  Неправильное время визита фиксируется на-\nжатием на часы.\n"
    "  Чёрный список фиксируется нажатием на само-\nго посетителя.\n"
    "  Если дата рождения неправильна, все осталь-\nные даты считать правильными.",

    "Общие положения 1.\n\n"
    "  При наличии ошибок в документе он считается \n"
    "недействительным. Если согласие на обработку \nданных"
    " недействительно, то вы не имеете права \nчитать другие документы.\n"
    "  Названные имя, фамилия и дата рождения долж-\nны совпадать с данными документов.\n"
    "  Обращайте внимание на порядок написания\nимени и фамилии, в этом фальсификаторы до-\nкументов часто прокалываются\n"
    "  Шрифт общей части док-та: GOST Common.\n"
    "  Шрифт индивидуальной части док-та: Arial.\n"
    "  Справка от психиатра должна содержать кор-\nректный номер полиса\n"
    "  Психически больные люди получают отказ.\n",

    "Общие положения 2.\n\n"
    "  Документы граждане получают не раньше 14 лет\n"
    "  Справка ссылается на действующий полис, по-\nэтому дата её выдачи будет позже полиса.\n"
    "  Срок действия справки - 1 месяц. Более позд-\n"
    "ние справки недействительны. Аналогично для сог-\n"
    "ласия на обработку данных.\n\n\n"
    "  Обращаем Ваше внимание, что у запрет на под-\nделку печатей распространяется и на эту мето-\nдичку, "
    "поэтому мы не можем приводить здесь об-\nразцы верных печатей.\n  Надеемся, вы запомнили их в ходе стажировки.",

    "Список требуемых документов.\n\n"
    "  Согласие на обработку персональных данных\n"
    "  Паспорт\n"
    "  Полис медицинского страхования\n"
    "  Водительские права\n"
    "  Справка от психиатра\n\n\n\n\n\n\n\n\n\n\n      --Конец методички--",

    " ",
)


class TutorialPage:
    """Page turning through the rules, with signals for the arrow buttons.

    After the last text page come two picture pages: first one picture,
    then the other, after which the right arrow is locked.
    """

    def __init__(self) -> None:
        self.pages = PAGES
        self.page_count = len(PAGES)
        self.page = 0
        self.text = self.pages[0]
        self.text_visible = True
        self.guys_visible = False
        self.captain_visible = False
        self.lock_left = Signal()
        self.lock_right = Signal()
        self.unlock_left = Signal()
        self.unlock_right = Signal()

    def _show_page(self) -> None:
        if self.page < self.page_count:
            self.text = self.pages[self.page]
            self.text_visible = True
        else:
            self.text_visible = False

    def forward(self) -> None:
        """Turn to the next page."""
        if self.page > self.page_count:
            raise IndexError("already on the last page")
        self.page += 1
        if self.page == self.page_count:
            self.guys_visible = True
        if self.page == self.page_count + 1:
            self.guys_visible = False
            self.captain_visible = True
            self.lock_right.emit()
        if self.page == 1:
            self.unlock_left.emit()
        self._show_page()

    def backward(self) -> None:
        """Turn to the previous page."""
        if self.page <= 0:
            raise IndexError("already on the first page")
        self.page -= 1
        if self.page == self.page_count:
            self.guys_visible = True
            self.captain_visible = False
            self.unlock_right.emit()
        else:
            self.guys_visible = False
        if self.page == 0:
            self.lock_left.emit()
        self._show_page()