"""
Lógica de calculadora aritmética básica.

Este módulo contiene el estado de la calculadora, la máquina de estados
que procesa cada pulsación y la clase CalculatorEngine que la encapsula.
La evaluación es estrictamente de izquierda a derecha, sin precedencia.
"""

import re

import numpy as np

from .buttons import ButtonKind, Operator


# Literal decimal: dígitos con como máximo un punto y al menos un dígito
_NUMBER_RE = re.compile(r"\d+\.?\d*|\.\d+")

_UFUNCS = {
    Operator.ADD: np.add,
    Operator.SUBTRACT: np.subtract,
    Operator.MULTIPLY: np.multiply,
    Operator.DIVIDE: np.divide,
}


def apply_operator(op, a, b):
    """
    Aplica una operación aritmética con semántica IEEE 754.

    Args:
        op (Operator): Operación a aplicar
        a (float): Operando izquierdo (valor acumulado)
        b (float): Operando derecho (número recién tecleado)

    Returns:
        float: Resultado. La división por cero produce inf, -inf o nan
        en lugar de lanzar ZeroDivisionError.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(_UFUNCS[op](np.float64(a), np.float64(b)))


def format_result(value):
    """
    Formatea un resultado en modo general (%g).

    Ejemplos:
        8.0 → "8", 0.1 + 0.2 → "0.3", 1e20 → "1e+20", 1 / 0 → "inf"
    """
    return "%g" % value


def parse_entry(text):
    """
    Interpreta el buffer de entrada como número.

    Returns:
        float | None: None si el texto no es un literal decimal válido
        (buffer vacío o solo ".")
    """
    if not text or not _NUMBER_RE.fullmatch(text):
        return None
    try:
        return float(text)
    except ValueError:
        return None


# ============================================================================
# CLASE: CalculatorState
# Propósito: Único estado mutable de la calculadora
#   - current_entry: Número siendo tecleado (texto sin interpretar)
#   - accumulated_value: Resultado de las operaciones confirmadas (o None)
#   - pending_operator: Operación que espera su segundo operando (o None)
#   - display_text: Texto mostrado al usuario ("0" por defecto)
# ============================================================================
class CalculatorState:
    """Estado de la calculadora, mutado en sitio por cada pulsación."""

    def __init__(self):
        self.reset()

    def reset(self):
        """Vuelve todos los campos a sus valores por defecto."""
        self.current_entry = ""
        self.accumulated_value = None
        self.pending_operator = None
        self.display_text = "0"

    @property
    def is_resolved(self):
        """True justo después de que = produzca un resultado final."""
        return (not self.current_entry and self.pending_operator is None
                and self.accumulated_value is not None)

    def __repr__(self):
        return (f"CalculatorState(current_entry={self.current_entry!r}, "
                f"accumulated_value={self.accumulated_value!r}, "
                f"pending_operator={self.pending_operator!r}, "
                f"display_text={self.display_text!r})")


# ============================================================================
# MÁQUINA DE ESTADOS
# Cada manejador recibe el estado y la pulsación, y muta el estado en sitio.
# Ninguna pulsación válida lanza excepciones: un operando no interpretable
# simplemente omite la operación.
# ============================================================================
def _handle_digit(state, press):
    if state.current_entry == "0":
        state.current_entry = press.value   # "0","5" → "5", nunca "05"
    else:
        state.current_entry += press.value
    state.display_text = state.current_entry


def _handle_decimal(state, press):
    # Con buffer vacío queda "." (comportamiento heredado, se interpreta luego como ".5")
    if "." not in state.current_entry:
        state.current_entry += "."
    state.display_text = state.current_entry


def _resolve_pending(state):
    """
    Resuelve la operación pendiente si ambos operandos están disponibles.

    Returns:
        bool: True si se calculó un resultado
    """
    operand = parse_entry(state.current_entry)
    if state.pending_operator is None or state.accumulated_value is None or operand is None:
        return False

    result = apply_operator(state.pending_operator, state.accumulated_value, operand)
    state.accumulated_value = result
    state.display_text = format_result(result)
    return True


def _handle_operator(state, press):
    if not _resolve_pending(state):
        # Primer operador de la cadena: el número tecleado pasa a ser el acumulado.
        # Si el buffer no es un número, el acumulado anterior se conserva.
        operand = parse_entry(state.current_entry)
        if operand is not None:
            state.accumulated_value = operand
    state.current_entry = ""
    state.pending_operator = press.value


def _handle_equals(state, press):
    if _resolve_pending(state):
        state.current_entry = ""
        state.pending_operator = None


def _handle_clear(state, press):
    state.reset()


_HANDLERS = {
    ButtonKind.DIGIT: _handle_digit,
    ButtonKind.DECIMAL: _handle_decimal,
    ButtonKind.OPERATOR: _handle_operator,
    ButtonKind.EQUALS: _handle_equals,
    ButtonKind.CLEAR: _handle_clear,
}


def handle(state, press):
    """
    Aplica una pulsación al estado de la calculadora.

    Args:
        state (CalculatorState): Estado actual (se muta en sitio)
        press (ButtonPress): Pulsación a procesar

    Returns:
        CalculatorState: El mismo objeto de estado; su display_text es el
        texto autoritativo para renderizar

    Raises:
        ValueError: Si la pulsación tiene un tipo desconocido
    """
    handler = _HANDLERS.get(press.kind)
    if handler is None:
        raise ValueError(f"Pulsación desconocida: {press!r}")
    handler(state, press)
    return state


# ============================================================================
# CLASE: CalculatorEngine
# Propósito: Motor de calculadora con un único estado propio
# Responsabilidades:
#   - Recibir pulsaciones de la capa de presentación
#   - Mantener el estado (nunca compartido con otros objetos)
#   - Exponer el texto del display tras cada pulsación
# ============================================================================
class CalculatorEngine:
    """
    Motor de calculadora de cuatro operaciones.

    Modelo de operación:
        1. Usuario teclea dígitos → se acumulan en current_entry
        2. Usuario pulsa un operador → se resuelve la operación pendiente
           (izquierda a derecha, sin precedencia) y se guarda el nuevo operador
        3. Usuario pulsa = → se resuelve la operación pendiente
        4. C borra todo el estado

    Ejemplo:
        2 + 3 × → el acumulado pasa a 5 y × queda pendiente
    """

    def __init__(self):
        self._state = CalculatorState()

    @property
    def state(self):
        return self._state

    @property
    def display(self):
        """Texto a mostrar en el display principal."""
        return self._state.display_text

    def press(self, button):
        """
        Procesa una pulsación y retorna el nuevo texto del display.

        Args:
            button (ButtonPress): Pulsación recibida

        Returns:
            str: Texto del display tras la pulsación
        """
        handle(self._state, button)
        return self._state.display_text

    def press_all(self, buttons):
        """Procesa una secuencia de pulsaciones en orden."""
        for button in buttons:
            self.press(button)
        return self._state.display_text
