"""Модели данных для нумерологии"""
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple


class ParsedDate(BaseModel):
    """Разобранная дата рождения"""
    model_config = ConfigDict(frozen=True)

    # Цифры в том виде, в каком они введены (ведущие нули сохраняются)
    digits: Tuple[int, ...]
    year: int
    month: int
    day: int


class NumerologyResult(BaseModel):
    """Результат расчета"""
    model_config = ConfigDict(frozen=True)

    # Основные числа
    postnatal: int           # Сумма 8 цифр даты
    master: Optional[int]    # Сумма цифр postnatal, только если >= 10
    life: int                # Главное число (1-9)

    # Фигуры на сетке 3x3
    circles: Mapping[int, int]    # Цифры даты рождения
    triangles: Mapping[int, int]  # Цифры postnatal и master
    square_at: int

    visible_digits: FrozenSet[int]
    line_digits: FrozenSet[int]  # visible_digits + 0 из даты

    @field_validator('circles', 'triangles', mode='after')
    @classmethod
    def _freeze_counts(cls, value: Mapping[int, int]) -> Mapping[int, int]:
        """Счетчики только для чтения"""
        return MappingProxyType(dict(value))

    @field_serializer('circles', 'triangles')
    def _dump_counts(self, value: Mapping[int, int]) -> Dict[int, int]:
        return dict(value)


class NumberGuide(BaseModel):
    """Описание числа 1-9"""
    model_config = ConfigDict(frozen=True)

    short: str
    type: str
    plus: str
    minus: str


class LineGuide(BaseModel):
    """Линия на сетке"""
    model_config = ConfigDict(frozen=True)

    code: str
    name: str


class ShapeScore(BaseModel):
    """Вес фигур для одного числа"""
    model_config = ConfigDict(frozen=True)

    number: int
    score: int
