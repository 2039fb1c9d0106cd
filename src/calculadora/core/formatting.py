"""
Conversión entre números y texto para la calculadora.

Este módulo contiene las funciones puras que interpretan la entrada del
usuario como número y que formatean los resultados para el display.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext


# ============================================================================
# CONSTANTES DE ENTRADA Y DISPLAY
# ============================================================================
MAX_INTEGER_DIGITS = 9          # Dígitos máximos antes del punto decimal
MAX_DECIMAL_DIGITS = 8          # Dígitos máximos después del punto decimal

ERROR_TEXT = "Error"            # Marcador de error en la entrada actual
INFINITY_TEXT = "Infinity"      # Marcador de desbordamiento
ERROR_MARKERS = (ERROR_TEXT, INFINITY_TEXT)

DIVISION_BY_ZERO_MESSAGE = "No se puede dividir por 0"

# Umbrales para pasar a notación exponencial en los resultados
EXPONENTIAL_UPPER = 1e9
EXPONENTIAL_LOWER = 1e-6

# Prefijo numérico: signo, dígitos con punto opcional y exponente opcional.
# "Infinity" no se acepta: un resultado desbordado bloquea la aritmética.
_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text):
    """
    Interpreta el prefijo numérico de un texto.

    Args:
        text (str): Texto de la entrada (ej: "12.5", "-0.", "1.5e9")

    Returns:
        float | None: Valor del prefijo, o None si el texto no empieza
        por un número (vacío, "-", "Error", "Infinity")

    Ejemplos:
        "5."     -> 5.0
        "-0."    -> -0.0
        "2e9"    -> 2000000000.0
        "Error"  -> None
    """
    if not text:
        return None
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return None
    return float(match.group(0))


def _round_half_up(value, digits):
    """Redondea el valor exacto del float, empates lejos de cero."""
    return Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def group_thousands(text):
    """
    Formatea un número con separadores de miles en la parte entera.

    Args:
        text (str): Número como texto (ej: "1234567.890")

    Returns:
        str: Número agrupado (ej: "1,234,567.890"), o "" si el texto está
        vacío o su parte entera no es numérica

    Reglas:
        - Solo se agrupa la parte entera, redondeada a entero
        - La parte decimal se conserva tal cual (incluidos ceros finales)
        - Un punto sin decimales se conserva ("12." -> "12.")
    """
    if not text:
        return ""

    parts = text.split(".")
    number = parse_number(parts[0])
    if number is None:
        return ""

    if number.is_integer():
        integer = int(number)
    else:
        integer = int(_round_half_up(number, 0))

    grouped = f"{integer:,}"
    if integer == 0 and math.copysign(1.0, number) < 0:
        grouped = "-0"

    if len(parts) > 1:
        return f"{grouped}.{parts[1]}"
    return grouped


def number_to_text(value):
    """
    Texto canónico de un número: los dígitos más cortos que lo representan.

    Args:
        value (float): Número a convertir

    Returns:
        str: Notación posicional entre 1e-7 y 1e21 ("0.05", "20"),
        exponencial fuera de ese rango ("1e-7", "1.5e+21")

    Usado para los resultados del porcentaje, que pasan a ser la entrada
    actual sin recorte de decimales.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()[1:]
    digits = "".join(str(d) for d in digits_tuple)
    k = len(digits)
    n = k + exponent            # posición del punto decimal

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        e_text = ("+" if e >= 0 else "-") + str(abs(e))
        if k == 1:
            body = digits + "e" + e_text
        else:
            body = digits[0] + "." + digits[1:] + "e" + e_text
    return sign + body


def _to_exponential(value, digits):
    """Notación exponencial con `digits` decimales en la mantisa ("1.500000e+9")."""
    number = Decimal(value)
    sign = "-" if number.is_signed() else ""
    number = abs(number)
    exponent = number.adjusted()

    with localcontext() as ctx:
        ctx.prec = 1100         # suficiente para el valor exacto de cualquier float
        mantissa = number.scaleb(-exponent)
    step = Decimal(1).scaleb(-digits)
    mantissa = mantissa.quantize(step, rounding=ROUND_HALF_UP)
    if mantissa >= 10:
        mantissa = Decimal(1).quantize(step)
        exponent += 1

    e_sign = "+" if exponent >= 0 else "-"
    return f"{sign}{mantissa}e{e_sign}{abs(exponent)}"


def format_result(value):
    """
    Formatea el resultado de una operación para mostrarlo como entrada.

    Args:
        value (float): Resultado numérico

    Returns:
        str: Texto del resultado

    Formateo:
        - NaN                     -> "Error"
        - Infinito (+/-)          -> "Infinity"
        - |v| >= 1e9 o |v| < 1e-6 -> exponencial con 6 decimales sin ceros
                                     finales y sin "+" ("1.5e9", "1.23e-7")
        - Resto                   -> decimal, máximo 8 decimales, sin ceros
                                     finales ("2.1", "0.33333333", "20")
    """
    if math.isnan(value):
        return ERROR_TEXT
    if math.isinf(value):
        return INFINITY_TEXT
    if value == 0:
        value = 0.0             # -0.0 se muestra como "0"

    magnitude = abs(value)
    if magnitude >= EXPONENTIAL_UPPER or 0 < magnitude < EXPONENTIAL_LOWER:
        text = _to_exponential(value, 6)
        text = re.sub(r"\.?0+e", "e", text, count=1)
        return re.sub(r"e\+?", "e", text, count=1)

    text = number_to_text(value)
    if "." in text and len(text.split(".")[1]) > MAX_DECIMAL_DIGITS:
        text = format(_round_half_up(value, MAX_DECIMAL_DIGITS), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
