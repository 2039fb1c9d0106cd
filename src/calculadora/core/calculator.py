"""
Lógica de calculadora aritmética básica.

Este módulo contiene la clase CalculatorEngine, la máquina de estados que
construye la entrada dígito a dígito, encadena operaciones binarias y
produce los dos textos del display.
"""

from enum import Enum

from .formatting import (
    DIVISION_BY_ZERO_MESSAGE,
    ERROR_MARKERS,
    ERROR_TEXT,
    MAX_DECIMAL_DIGITS,
    MAX_INTEGER_DIGITS,
    format_result,
    group_thousands,
    number_to_text,
    parse_number,
)


DIGITS = "0123456789"
DECIMAL_POINT = "."


# ============================================================================
# ENUM: Operation
# Propósito: Las cuatro operaciones binarias con su símbolo de display
# ============================================================================
class Operation(Enum):
    """Operación binaria pendiente. El valor es el símbolo mostrado."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self):
        return self.value

    @property
    def is_additive(self):
        """True para suma y resta (el porcentaje se toma del primer operando)."""
        return self in (Operation.ADD, Operation.SUBTRACT)

    @classmethod
    def from_symbol(cls, symbol):
        """
        Convierte un símbolo de teclado o de display en una operación.

        Args:
            symbol (str | Operation): "+", "-", "*", "/" o "−", "×", "÷"

        Returns:
            Operation: Operación correspondiente

        Raises:
            ValueError: Si el símbolo no es una operación conocida
        """
        if isinstance(symbol, cls):
            return symbol
        try:
            return _SYMBOLS[symbol]
        except KeyError:
            raise ValueError(f"Operación desconocida: {symbol!r}") from None

    def apply(self, left, right):
        """Aplica la operación. La división por cero la controla el motor."""
        if self is Operation.ADD:
            return left + right
        if self is Operation.SUBTRACT:
            return left - right
        if self is Operation.MULTIPLY:
            return left * right
        return left / right


_SYMBOLS = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "−": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "×": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
    "÷": Operation.DIVIDE,
}


class EntryMode(Enum):
    """
    Modo de la entrada actual.

    FRESH: Se acaba de calcular un resultado (o un error); el siguiente
           dígito sin operación pendiente empieza un número nuevo.
    ACCUMULATING: Los dígitos se añaden a la entrada actual.
    """

    FRESH = "fresh"
    ACCUMULATING = "accumulating"


def build_expression(previous, operation, current):
    """
    Texto de la operación en curso para el display secundario.

    Args:
        previous (str): Primer operando
        operation (Operation): Operación pendiente
        current (str): Segundo operando

    Returns:
        str: Ej: "1,200 + 35.5"
    """
    return f"{group_thousands(previous)} {operation.symbol} {group_thousands(current)}"


# ============================================================================
# CLASE: CalculatorEngine
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Construir la entrada actual dígito a dígito (con límites)
#   - Guardar el primer operando y la operación pendiente
#   - Resolver operaciones encadenadas, porcentajes y cambio de signo
#   - Producir los textos del display (expresión y valor actual)
# ============================================================================
class CalculatorEngine:
    """
    Motor de la calculadora con un único estado mutable.

    Modelo de operación:
        1. Usuario ingresa dígitos -> se acumulan en current_entry
        2. Usuario elige operación -> current_entry pasa a previous_entry
        3. Usuario ingresa el segundo operando
        4. Usuario presiona = (u otra operación) -> se calcula el resultado

    Variables de estado:
        - current_entry: Número siendo ingresado o último resultado ("0" inicial)
        - previous_entry: Primer operando ("" si no hay operación pendiente)
        - operation: Operation pendiente o None
        - expression: Texto del display secundario
        - mode: EntryMode (FRESH tras un resultado, ACCUMULATING en otro caso)

    Ninguna acción lanza excepciones por entradas del usuario: las acciones
    inválidas se ignoran y los errores aritméticos quedan en el display.
    """

    def __init__(self):
        """Inicializa el motor en estado borrado."""
        self.reset()

    def reset(self):
        """
        Borra TODO el estado de la calculadora (AC = All Clear).

        Equivalente al botón "AC" o a la tecla Escape.
        """
        self.current_entry = "0"
        self.previous_entry = ""
        self.operation = None
        self.expression = ""
        self.mode = EntryMode.ACCUMULATING

    @property
    def just_completed(self):
        """True justo después de un cálculo, antes de teclear otro número."""
        return self.mode is EntryMode.FRESH

    @property
    def has_error(self):
        """True si la entrada actual es un marcador de error ("Error", "Infinity")."""
        return self.current_entry in ERROR_MARKERS

    def _refresh_expression(self):
        if self.operation is not None:
            self.expression = build_expression(
                self.previous_entry, self.operation, self.current_entry
            )

    def append_digit(self, token):
        """
        Añade un dígito o el punto decimal a la entrada actual.

        Args:
            token (str): "0"-"9" o "."

        Comportamiento:
            - Tras un resultado sin operación pendiente: empieza número nuevo
            - "." se ignora si ya hay punto; "0" pasa a "0."
            - Máximo 9 dígitos enteros y 8 decimales; el resto se ignora
            - "0" se reemplaza por el primer dígito
            - Cualquier otro token se ignora
        """
        if token != DECIMAL_POINT and (len(token) != 1 or token not in DIGITS):
            return

        if self.mode is EntryMode.FRESH and self.operation is None:
            self.reset()

        if token == DECIMAL_POINT:
            if DECIMAL_POINT in self.current_entry:
                return
            if self.current_entry == "0":
                self.current_entry = "0."
            else:
                self.current_entry += DECIMAL_POINT
        else:
            has_point = DECIMAL_POINT in self.current_entry
            integer_part, _, decimal_part = self.current_entry.partition(DECIMAL_POINT)
            integer_digits = sum(1 for char in integer_part if char in DIGITS)

            if not has_point and integer_digits >= MAX_INTEGER_DIGITS:
                return
            if has_point and len(decimal_part) >= MAX_DECIMAL_DIGITS:
                return

            if self.current_entry == "0":
                self.current_entry = token
            else:
                self.current_entry += token

        self.mode = EntryMode.ACCUMULATING
        self._refresh_expression()

    def toggle_sign(self):
        """Cambia el signo de la entrada actual (sin efecto sobre "0" o un error)."""
        if self.current_entry == "0" or self.has_error:
            return
        if self.current_entry.startswith("-"):
            self.current_entry = self.current_entry[1:]
        else:
            self.current_entry = "-" + self.current_entry
        self.mode = EntryMode.ACCUMULATING
        self._refresh_expression()

    def apply_percent(self):
        """
        Calcula el porcentaje con comportamiento contextual.

        Comportamiento:
            - Sin operación: la entrada se divide por 100 ("50" -> "0.5")
            - Con + o −: porcentaje del primer operando (200 + 10% -> 20)
            - Con × o ÷: la entrada se divide por 100

        La operación pendiente y el primer operando se conservan.
        """
        if self.current_entry == "0":
            return
        current = parse_number(self.current_entry)
        if current is None:
            return

        if self.operation is not None and self.previous_entry:
            if self.operation.is_additive:
                previous = parse_number(self.previous_entry)
                if previous is None:
                    return
                value = previous * current / 100
            else:
                value = current / 100
            self.current_entry = number_to_text(value)
            shown = group_thousands(self.current_entry)
            self.expression = (
                f"{build_expression(self.previous_entry, self.operation, self.current_entry)}"
                f" ({shown}%)"
            )
        else:
            self.current_entry = number_to_text(current / 100)
            self.expression = f"{group_thousands(self.current_entry)}%"

    def choose_operation(self, op):
        """
        Selecciona la operación a realizar.

        Args:
            op (Operation | str): Operación o su símbolo ("+", "-", "*", "/")

        Comportamiento:
            - Sin efecto si aún no se ingresó nada ("0" sin primer operando)
            - Si ya había operación pendiente se resuelve primero:
              "2 + 3 ×" calcula 2 + 3 = 5 y luego queda "5 ×"

        Raises:
            ValueError: Si op no es una operación conocida
        """
        operation = Operation.from_symbol(op)
        if self.current_entry == "0" and self.previous_entry == "":
            return

        self.expression = (
            f"{group_thousands(self.previous_entry or self.current_entry)} {operation.symbol}"
        )

        if self.previous_entry != "":
            self.equals()

        self.operation = operation
        self.previous_entry = self.current_entry
        self.current_entry = "0"
        self.mode = EntryMode.ACCUMULATING

    def equals(self):
        """
        Realiza el cálculo de la operación pendiente.

        Sin efecto si no hay operación o si algún operando no es numérico.

        División por cero:
            - current_entry = "Error"
            - expression = mensaje fijo de error
            - Se descarta la operación; el siguiente dígito empieza de nuevo
        """
        previous = parse_number(self.previous_entry)
        current = parse_number(self.current_entry)
        if previous is None or current is None or self.operation is None:
            return

        if self.operation is Operation.DIVIDE and current == 0:
            self.current_entry = ERROR_TEXT
            self.expression = DIVISION_BY_ZERO_MESSAGE
            self.operation = None
            self.previous_entry = ""
            self.mode = EntryMode.FRESH
            return

        self.expression = (
            f"{build_expression(self.previous_entry, self.operation, self.current_entry)} ="
        )
        result = self.operation.apply(previous, current)

        self.current_entry = format_result(result)
        self.operation = None
        self.previous_entry = ""
        self.mode = EntryMode.FRESH

    def backspace(self):
        """Borra el último carácter de la entrada (nunca la deja vacía)."""
        entry = self.current_entry
        if (
            self.has_error
            or len(entry) == 1
            or (len(entry) == 2 and entry.startswith("-"))
        ):
            self.current_entry = "0"
        else:
            self.current_entry = entry[:-1]
        self.mode = EntryMode.ACCUMULATING
        self._refresh_expression()

    def render(self):
        """
        Obtiene los textos del display.

        Returns:
            tuple: (expresión, valor actual)
                - ("1,200 + 35", "35"): Operación en curso
                - ("No se puede dividir por 0", "0"): Tras un error el valor queda en "0"
                - ("", "0"): Estado inicial
        """
        return self.expression, group_thousands(self.current_entry) or "0"
