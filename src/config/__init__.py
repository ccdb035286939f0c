"""
Módulo de configuración para la calculadora.
Contiene la configuración visual del teclado.
"""

from .keypad import KeypadConfig

__all__ = ['KeypadConfig']
