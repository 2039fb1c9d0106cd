"""
Calculadora básica de teclado y ratón.

El motor (core) no depende de la interfaz: recibe acciones abstractas y
devuelve los textos del display.
"""

from .core import CalculatorEngine, EntryMode, Operation

__version__ = "1.0.0"

__all__ = ['CalculatorEngine', 'EntryMode', 'Operation']
