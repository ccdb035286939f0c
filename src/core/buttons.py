"""
Eventos de entrada de la calculadora.

Este módulo define los operadores aritméticos y las pulsaciones de botón
que la capa de presentación envía al motor de cálculo.
"""

from enum import Enum


# ============================================================================
# ENUM: Operator
# Propósito: Las cuatro operaciones aritméticas del teclado
# ============================================================================
class Operator(Enum):
    """Operación aritmética binaria (inmutable, sin estado)."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def title(self):
        """Símbolo mostrado en el teclado (+, -, ×, ÷)."""
        return _OPERATOR_TITLES[self]

    @property
    def glyph(self):
        """Versión ASCII del símbolo (las fuentes Hershey de OpenCV no tienen × ni ÷)."""
        return _OPERATOR_GLYPHS[self]


_OPERATOR_TITLES = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}

_OPERATOR_GLYPHS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "x",
    Operator.DIVIDE: "/",
}


class ButtonKind(Enum):
    """Variantes de pulsación."""

    DIGIT = "digit"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    DECIMAL = "decimal"


# ============================================================================
# CLASE: ButtonPress
# Propósito: Una pulsación discreta del usuario
# Responsabilidades:
#   - Identificar el tipo de botón (dígito, operador, igual, borrar, decimal)
#   - Transportar el dígito o el operador asociado
#   - Proveer el texto que dibuja el teclado
# ============================================================================
class ButtonPress:
    """
    Pulsación de botón producida por la capa de presentación.

    Se construye con los métodos de clase en lugar del constructor:
        ButtonPress.digit("7"), ButtonPress.operator(Operator.ADD),
        ButtonPress.equals(), ButtonPress.clear(), ButtonPress.decimal()

    El motor la consume una sola vez y no la retiene.
    """

    __slots__ = ("kind", "value")

    def __init__(self, kind, value=None):
        self.kind = kind
        self.value = value

    @classmethod
    def digit(cls, d):
        """
        Crea la pulsación de un dígito.

        Args:
            d (str): Un único carácter entre '0' y '9'

        Raises:
            ValueError: Si d no es exactamente un dígito decimal
        """
        if not isinstance(d, str) or len(d) != 1 or d not in "0123456789":
            raise ValueError(f"Dígito inválido: {d!r}")
        return cls(ButtonKind.DIGIT, d)

    @classmethod
    def operator(cls, op):
        if not isinstance(op, Operator):
            raise ValueError(f"Operador inválido: {op!r}")
        return cls(ButtonKind.OPERATOR, op)

    @classmethod
    def equals(cls):
        return cls(ButtonKind.EQUALS)

    @classmethod
    def clear(cls):
        return cls(ButtonKind.CLEAR)

    @classmethod
    def decimal(cls):
        return cls(ButtonKind.DECIMAL)

    @property
    def title(self):
        """Texto del botón tal como aparece en el teclado."""
        if self.kind is ButtonKind.DIGIT:
            return self.value
        if self.kind is ButtonKind.OPERATOR:
            return self.value.title
        return {ButtonKind.EQUALS: "=", ButtonKind.CLEAR: "C", ButtonKind.DECIMAL: "."}[self.kind]

    @property
    def glyph(self):
        """Texto ASCII para dibujar con cv2.putText."""
        if self.kind is ButtonKind.OPERATOR:
            return self.value.glyph
        return self.title

    def __eq__(self, other):
        if not isinstance(other, ButtonPress):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.value is None:
            return f"ButtonPress({getattr(self.kind, 'name', self.kind)})"
        return f"ButtonPress({getattr(self.kind, 'name', self.kind)}, {self.value!r})"
