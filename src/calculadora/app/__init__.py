"""
Módulo de la aplicación.
Contiene la traducción de teclas y botones a acciones del motor.

La ventana (CalculatorApp) vive en app.calculator_app y depende de OpenCV.
"""

from .keyboard import BUTTON_ACTIONS, KEY_BUTTONS, dispatch, handle_button, handle_key

__all__ = ['BUTTON_ACTIONS', 'KEY_BUTTONS', 'dispatch', 'handle_button', 'handle_key']
