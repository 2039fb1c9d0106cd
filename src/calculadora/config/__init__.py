"""
Módulo de configuración para la calculadora.
Contiene la configuración visual de ventana, colores y fuentes.
"""

from .display import DisplayConfig

__all__ = ['DisplayConfig']
