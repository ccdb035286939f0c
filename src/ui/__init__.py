"""
Módulo de interfaz de usuario.
Contiene el renderizador del teclado y del display.
"""

from .keypad import BUTTON_ROWS, KeypadRenderer

__all__ = ['BUTTON_ROWS', 'KeypadRenderer']
