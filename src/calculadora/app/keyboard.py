"""
Traducción de teclas y botones a acciones del motor.

Este módulo contiene las tablas que asocian cada tecla (código de
cv2.waitKey) y cada botón del teclado en pantalla con una acción de
CalculatorEngine.
"""

# ============================================================================
# BOTONES -> ACCIONES
# Cada botón tiene un ID (ej: "num_7", "add") y una acción (método, argumento)
# ============================================================================
BUTTON_ACTIONS = {f"num_{digit}": ("append_digit", str(digit)) for digit in range(10)}
BUTTON_ACTIONS.update({
    "dot": ("append_digit", "."),
    "add": ("choose_operation", "+"),
    "subtract": ("choose_operation", "-"),
    "multiply": ("choose_operation", "*"),
    "divide": ("choose_operation", "/"),
    "equal": ("equals", None),
    "percent": ("apply_percent", None),
    "sign": ("toggle_sign", None),
    "backspace": ("backspace", None),
    "clear_all": ("reset", None),
})

_ENGINE_ACTIONS = {action for action, _ in BUTTON_ACTIONS.values()}

# ============================================================================
# TECLAS -> BOTONES
# Códigos de cv2.waitKey(...) & 0xFF
# ============================================================================
KEY_ENTER = 13
KEY_LINE_FEED = 10
KEY_ESCAPE = 27
KEY_BACKSPACE = 8
KEY_DELETE = 127

KEY_BUTTONS = {ord(str(digit)): f"num_{digit}" for digit in range(10)}
KEY_BUTTONS.update({
    ord("."): "dot",
    ord(","): "dot",
    ord("+"): "add",
    ord("-"): "subtract",
    ord("*"): "multiply",
    ord("x"): "multiply",
    ord("/"): "divide",
    ord("="): "equal",
    KEY_ENTER: "equal",
    KEY_LINE_FEED: "equal",
    ord("%"): "percent",
    ord("n"): "sign",
    KEY_BACKSPACE: "backspace",
    KEY_DELETE: "backspace",
    KEY_ESCAPE: "clear_all",
    ord("c"): "clear_all",
})


def dispatch(engine, action, argument=None):
    """
    Ejecuta una acción sobre el motor.

    Args:
        engine (CalculatorEngine): Motor de la calculadora
        action (str): Nombre del método ("append_digit", "equals", ...)
        argument (str | None): Argumento de la acción, si lleva

    Returns:
        bool: True (la acción siempre se ejecuta)

    Raises:
        KeyError: Si la acción no es una acción del motor
    """
    if action not in _ENGINE_ACTIONS:
        raise KeyError(action)
    method = getattr(engine, action)
    if argument is None:
        method()
    else:
        method(argument)
    return True


def handle_button(engine, button_id):
    """
    Procesa la pulsación de un botón del teclado en pantalla.

    Returns:
        bool: True si el botón existe y se ejecutó su acción
    """
    if button_id not in BUTTON_ACTIONS:
        return False
    action, argument = BUTTON_ACTIONS[button_id]
    return dispatch(engine, action, argument)


def handle_key(engine, key):
    """
    Procesa una tecla de cv2.waitKey.

    Args:
        engine (CalculatorEngine): Motor de la calculadora
        key (int): Código de tecla (ya enmascarado con 0xFF)

    Returns:
        str | None: ID del botón equivalente si la tecla tiene acción
    """
    button_id = KEY_BUTTONS.get(key)
    if button_id is None:
        return None
    handle_button(engine, button_id)
    return button_id
