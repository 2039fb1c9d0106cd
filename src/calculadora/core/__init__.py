"""
Módulo core con la lógica principal de la calculadora.
Contiene el motor de estados y las funciones de formateo numérico.
"""

from .calculator import CalculatorEngine, EntryMode, Operation
from .formatting import format_result, group_thousands, parse_number

__all__ = [
    'CalculatorEngine',
    'EntryMode',
    'Operation',
    'format_result',
    'group_thousands',
    'parse_number',
]
