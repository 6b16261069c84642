"""Разбор и нормализация даты рождения"""
import calendar
import logging
import re
from typing import List, Mapping, Optional, Union
from urllib.parse import urlencode

from config import settings
from .models import ParsedDate

logger = logging.getLogger(__name__)

QUERY_PARAM = "d"

Part = Union[int, str, None]


class DateParser:
    """Приводит введенный текст к дате ГГГГ/ММ/ДД"""

    DIGITS_RE = re.compile(r'[0-9]')

    MIN_YEAR = 1000
    MAX_YEAR = 2999

    def only_digits(self, raw) -> List[int]:
        """Оставляет только цифры"""
        if not isinstance(raw, str):
            return []
        return [int(ch) for ch in self.DIGITS_RE.findall(raw)]

    def normalize(self, raw) -> Optional[ParsedDate]:
        """
        Разбирает дату из произвольного текста.

        Все нецифровые символы отбрасываются, должно остаться ровно 8 цифр
        (ГГГГММДД). Проверяются только диапазоны, 31 февраля допустимо.
        Для некорректного ввода возвращает None.
        """
        digits = self.only_digits(raw)
        if len(digits) != 8:
            logger.debug(f"Ожидалось 8 цифр, получено {len(digits)}: {raw!r}")
            return None

        year = int(''.join(map(str, digits[0:4])))
        month = int(''.join(map(str, digits[4:6])))
        day = int(''.join(map(str, digits[6:8])))

        if not 1 <= month <= 12:
            return None
        if not 1 <= day <= 31:
            return None
        if not self.MIN_YEAR <= year <= self.MAX_YEAR:
            return None

        return ParsedDate(digits=tuple(digits), year=year, month=month, day=day)

    def canonicalize(self, raw) -> str:
        """Возвращает ГГГГ/ММ/ДД или исходный текст, если дата не разобрана"""
        parsed = self.normalize(raw)
        if parsed is None:
            return raw
        return f"{parsed.year}/{parsed.month:02d}/{parsed.day:02d}"

    def to_query(self, raw) -> str:
        """Параметр d для URL; пустая строка, если сохранять нечего"""
        canonical = self.canonicalize(raw)
        if not canonical:
            return ""
        return urlencode({QUERY_PARAM: canonical})

    def from_query(self, params: Mapping[str, str]) -> str:
        """Читает дату из параметров запроса"""
        return self.canonicalize(params.get(QUERY_PARAM) or "")

    # Ввод через выпадающие списки

    def assemble(self, year: Part, month: Part, day: Part) -> str:
        """Собирает строку даты из выбранных года, месяца и дня"""
        if not year or not month or not day:
            return ""
        return f"{year}/{int(month):02d}/{int(day):02d}"

    def days_in_month(self, year: Part = None, month: Part = None) -> int:
        """Количество дней для списка выбора дня"""
        if not month or not 1 <= int(month) <= 12:
            return 31
        safe_year = int(year) if year else settings.default_year
        return calendar.monthrange(safe_year, int(month))[1]

    def assemble_selection(self, year: Part, month: Part, day: Part) -> str:
        """Как assemble, но сбрасывает день, которого нет в выбранном месяце"""
        if day and int(day) > self.days_in_month(year, month):
            day = None
        return self.assemble(year, month, day)

    def year_options(self, current_year: int) -> List[int]:
        """Годы для выбора, от текущего к минимальному"""
        return list(range(current_year, settings.min_year - 1, -1))
