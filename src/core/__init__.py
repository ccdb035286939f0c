"""
Módulo core con la lógica principal de la calculadora.
Contiene los eventos de entrada y el motor de cálculo.
"""

from .buttons import ButtonKind, ButtonPress, Operator
from .calculator import (
    CalculatorEngine,
    CalculatorState,
    apply_operator,
    format_result,
    handle,
    parse_entry,
)

__all__ = [
    'ButtonKind', 'ButtonPress', 'Operator',
    'CalculatorEngine', 'CalculatorState',
    'apply_operator', 'format_result', 'handle', 'parse_entry',
]
