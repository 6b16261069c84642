"""Справочные тексты: значения чисел 1-9 и линии сетки"""
from typing import Dict, List, Optional

from .models import LineGuide, NumberGuide


NUMBER_GUIDES: Dict[int, NumberGuide] = {
    1: NumberGuide(
        short="Лидер",
        type="Творчество, независимость",
        plus="Инициативен, самостоятелен, умеет начинать новое и вести за собой.",
        minus="Упрям, властен, плохо слышит чужое мнение.",
    ),
    2: NumberGuide(
        short="Партнер",
        type="Сотрудничество, чувствительность",
        plus="Мягок, тактичен, хороший посредник и помощник.",
        minus="Нерешителен, зависим от оценки окружающих, обидчив.",
    ),
    3: NumberGuide(
        short="Оптимист",
        type="Самовыражение, общение",
        plus="Легок в общении, остроумен, полон идей.",
        minus="Разбрасывается, поверхностен, язвителен.",
    ),
    4: NumberGuide(
        short="Строитель",
        type="Порядок, надежность",
        plus="Трудолюбив, организован, доводит дело до конца.",
        minus="Консервативен, негибок, излишне осторожен.",
    ),
    5: NumberGuide(
        short="Искатель свободы",
        type="Перемены, движение",
        plus="Любознателен, быстро адаптируется, любит путешествия.",
        minus="Непостоянен, импульсивен, избегает обязательств.",
    ),
    6: NumberGuide(
        short="Опекун",
        type="Забота, ответственность",
        plus="Заботлив, ответственен, ценит семью и красоту.",
        minus="Навязчив в опеке, тревожен, берет на себя слишком много.",
    ),
    7: NumberGuide(
        short="Мыслитель",
        type="Анализ, поиск истины",
        plus="Глубок, наблюдателен, хороший аналитик.",
        minus="Замкнут, недоверчив, склонен к скептицизму.",
    ),
    8: NumberGuide(
        short="Организатор",
        type="Власть, материальный успех",
        plus="Деловит, целеустремлен, умеет управлять ресурсами.",
        minus="Жесток в достижении цели, зависим от статуса и денег.",
    ),
    9: NumberGuide(
        short="Мудрец",
        type="Служение, идеализм",
        plus="Великодушен, щедр, мыслит широко.",
        minus="Мечтателен, непрактичен, легко разочаровывается.",
    ),
}


# Порядок важен: в таком порядке линии выводятся пользователю
LINE_GUIDES: List[LineGuide] = [
    LineGuide(code="123", name="Линия творчества"),
    LineGuide(code="456", name="Линия организованности"),
    LineGuide(code="789", name="Линия власти"),
    LineGuide(code="147", name="Линия материального"),
    LineGuide(code="258", name="Линия чувств"),
    LineGuide(code="369", name="Линия мудрости"),
    LineGuide(code="159", name="Линия карьеры"),
    LineGuide(code="357", name="Линия популярности"),
    LineGuide(code="1590", name="Линия упорства"),
]


def get_number_guide(number: Optional[int]) -> Optional[NumberGuide]:
    """Возвращает описание числа или None"""
    return NUMBER_GUIDES.get(number)
