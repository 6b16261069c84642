"""Модуль расчета чисел и фигур на сетке 3x3"""
from .calculator import NumerologyCalculator, reduce_to_single, sum_digits
from .interpretations import LINE_GUIDES, NUMBER_GUIDES, get_number_guide
from .models import LineGuide, NumberGuide, NumerologyResult, ParsedDate, ShapeScore
from .parser import DateParser

_parser = DateParser()
_calculator = NumerologyCalculator(_parser)

normalize = _parser.normalize
canonicalize = _parser.canonicalize
derive = _calculator.derive
is_line_active = NumerologyCalculator.is_line_active

__all__ = [
    'DateParser', 'NumerologyCalculator',
    'ParsedDate', 'NumerologyResult', 'NumberGuide', 'LineGuide', 'ShapeScore',
    'NUMBER_GUIDES', 'LINE_GUIDES', 'get_number_guide',
    'normalize', 'canonicalize', 'derive', 'is_line_active',
    'reduce_to_single', 'sum_digits',
]
