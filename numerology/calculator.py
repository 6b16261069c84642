"""Калькулятор чисел и фигур на сетке 3x3"""
import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from .models import LineGuide, NumerologyResult, ShapeScore
from .parser import DateParser

logger = logging.getLogger(__name__)

GRID_NUMBERS = range(1, 10)


def sum_digits(value: int) -> int:
    """Сумма десятичных цифр числа"""
    return sum(int(digit) for digit in str(value))


def reduce_to_single(value: int) -> int:
    """Сворачивает число до однозначного"""
    while value > 9:
        value = sum_digits(value)
    return value


def count_digits(digits: Iterable[int]) -> Dict[int, int]:
    """Считает цифры 1-9, ноль не учитывается"""
    counts = {number: 0 for number in GRID_NUMBERS}
    for digit in digits:
        if digit in counts:
            counts[digit] += 1
    return counts


class NumerologyCalculator:
    """Класс для расчета чисел по дате рождения"""

    # Вес фигур
    CIRCLE_WEIGHT = 1
    TRIANGLE_WEIGHT = 2
    SQUARE_WEIGHT = 4
    RISK_THRESHOLD = 2

    def __init__(self, parser: Optional[DateParser] = None):
        self.parser = parser or DateParser()

    def derive(self, raw) -> Optional[NumerologyResult]:
        """Основной метод расчета. None, если дата некорректна"""
        parsed = self.parser.normalize(raw)
        if parsed is None:
            return None

        postnatal = sum(parsed.digits)
        # Ровно один проход суммы цифр
        second_total = sum_digits(postnatal)
        if second_total >= 10:
            master = second_total
            life = reduce_to_single(master)
        else:
            master = None
            life = second_total

        circles = count_digits(parsed.digits)

        triangle_source = str(postnatal)
        if master is not None:
            triangle_source += str(master)
        triangles = count_digits(int(ch) for ch in triangle_source)

        square_at = life
        visible_digits = self._collect_visible_digits(circles, triangles, square_at)
        line_digits = self._collect_line_digits(visible_digits, parsed.digits)

        logger.debug(
            f"{parsed.year}/{parsed.month:02d}/{parsed.day:02d}: "
            f"postnatal={postnatal}, master={master}, life={life}"
        )

        return NumerologyResult(
            postnatal=postnatal,
            master=master,
            life=life,
            circles=circles,
            triangles=triangles,
            square_at=square_at,
            visible_digits=visible_digits,
            line_digits=line_digits,
        )

    def _collect_visible_digits(self, circles: Dict[int, int], triangles: Dict[int, int],
                                square_at: int) -> FrozenSet[int]:
        """Цифры 1-9, на которых есть хотя бы одна фигура"""
        return frozenset(
            number for number in GRID_NUMBERS
            if circles[number] > 0 or triangles[number] > 0 or square_at == number
        )

    def _collect_line_digits(self, visible_digits: FrozenSet[int],
                             raw_digits: Sequence[int]) -> FrozenSet[int]:
        """Для линий добавляем 0 из даты рождения (линия 1590)"""
        if 0 in raw_digits:
            return visible_digits | {0}
        return visible_digits

    @staticmethod
    def is_line_active(line_code: str, present_digits: Set[int]) -> bool:
        """Линия сформирована, если на сетке есть все ее цифры"""
        return all(int(digit) in present_digits for digit in line_code)

    # Производные данные для отображения

    def shape_scores(self, result: Optional[NumerologyResult]) -> Dict[int, int]:
        """Вес фигур по каждому числу: круг 1, треугольник 2, квадрат 4"""
        if result is None:
            return {number: 0 for number in GRID_NUMBERS}

        scores = {}
        for number in GRID_NUMBERS:
            score = result.circles[number] * self.CIRCLE_WEIGHT
            score += result.triangles[number] * self.TRIANGLE_WEIGHT
            if result.square_at == number:
                score += self.SQUARE_WEIGHT
            scores[number] = score
        return scores

    def risk_items(self, result: Optional[NumerologyResult]) -> List[ShapeScore]:
        """Числа с весом больше порога, по убыванию веса"""
        items = [
            ShapeScore(number=number, score=score)
            for number, score in self.shape_scores(result).items()
            if score > self.RISK_THRESHOLD
        ]
        items.sort(key=lambda item: (-item.score, item.number))
        return items

    def born_digits(self, result: Optional[NumerologyResult]) -> List[int]:
        """Цифры, которые есть в дате рождения"""
        if result is None:
            return []
        return [number for number in GRID_NUMBERS if result.circles[number] > 0]

    def line_states(self, result: Optional[NumerologyResult],
                    lines: Iterable[LineGuide]) -> List[Tuple[LineGuide, bool]]:
        """Состояние каждой линии из таблицы"""
        return [
            (line, result is not None and self.is_line_active(line.code, result.line_digits))
            for line in lines
        ]
