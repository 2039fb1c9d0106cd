"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el display y el
teclado de la calculadora sobre un lienzo de numpy.
"""

import cv2
import numpy as np

from ..config.display import DisplayConfig


# Las fuentes Hershey de OpenCV solo dibujan ASCII
_ASCII_GLYPHS = str.maketrans({"−": "-", "×": "x", "÷": "/"})

# Filas del teclado: (ID de botón, etiqueta, tipo)
KEYPAD = [
    [("clear_all", "AC", "function"), ("backspace", "DEL", "function"),
     ("percent", "%", "function"), ("divide", "/", "operator")],
    [("num_7", "7", "digit"), ("num_8", "8", "digit"),
     ("num_9", "9", "digit"), ("multiply", "x", "operator")],
    [("num_4", "4", "digit"), ("num_5", "5", "digit"),
     ("num_6", "6", "digit"), ("subtract", "-", "operator")],
    [("num_1", "1", "digit"), ("num_2", "2", "digit"),
     ("num_3", "3", "digit"), ("add", "+", "operator")],
    [("sign", "+/-", "digit"), ("num_0", "0", "digit"),
     ("dot", ".", "digit"), ("equal", "=", "equals")],
]


def to_ascii(text):
    """Reemplaza los símbolos de operación por equivalentes ASCII."""
    return text.translate(_ASCII_GLYPHS)


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display: expresión en curso (arriba) y valor actual (grande)
        2. Teclado: cuadrícula de 5x4 botones
        3. Resaltado temporal del último botón pulsado
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (DisplayConfig): Configuración visual (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else DisplayConfig(width, height)
        self.highlighted = None         # ID del botón resaltado
        self.highlight_timer = 0        # Frames restantes de resaltado
        self.buttons = self.layout_buttons()

    def layout_buttons(self):
        """
        Calcula la posición de cada botón del teclado.

        Returns:
            list: [{'id': 'num_7', 'label': '7', 'kind': 'digit',
                    'rect': (x, y, w, h)}, ...]
        """
        pad = self.config.padding
        gap = self.config.button_gap
        top = pad + self.config.display_height() + pad
        rows = len(KEYPAD)
        cols = len(KEYPAD[0])

        button_w = (self.width - 2 * pad - (cols - 1) * gap) // cols
        button_h = (self.height - top - pad - (rows - 1) * gap) // rows

        buttons = []
        for r, row in enumerate(KEYPAD):
            for c, (button_id, label, kind) in enumerate(row):
                x = pad + c * (button_w + gap)
                y = top + r * (button_h + gap)
                buttons.append({
                    'id': button_id,
                    'label': label,
                    'kind': kind,
                    'rect': (x, y, button_w, button_h),
                })
        return buttons

    def button_at(self, x, y):
        """
        Busca el botón bajo un punto de la ventana.

        Args:
            x (int): Coordenada horizontal en píxeles
            y (int): Coordenada vertical en píxeles

        Returns:
            str | None: ID del botón, o None si el punto no cae en ninguno
        """
        for button in self.buttons:
            bx, by, bw, bh = button['rect']
            if bx <= x < bx + bw and by <= y < by + bh:
                return button['id']
        return None

    def highlight(self, button_id, duration=None):
        """Resalta un botón durante unos frames (confirmación visual)."""
        self.highlighted = button_id
        self.highlight_timer = duration if duration is not None else self.config.highlight_frames

    def new_canvas(self):
        """Lienzo BGR vacío con el color de fondo."""
        img = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        img[:] = self.config.background_color
        return img

    def _fit_text(self, text, font, scale, thickness, max_width):
        # Recorta por la izquierda hasta que el texto quepa
        while text and cv2.getTextSize(text, font, scale, thickness)[0][0] > max_width:
            text = text[1:]
        return text

    def draw_display(self, img, engine):
        """
        Dibuja el display de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            engine (CalculatorEngine): Motor con el estado actual

        Colores del valor:
            - Blanco: Número en construcción
            - Verde: Resultado de cálculo
            - Rojo: Error
        """
        cfg = self.config
        x, y = cfg.padding, cfg.padding
        w, h = self.width - 2 * cfg.padding, cfg.display_height()
        inner_w = w - 40

        cv2.rectangle(img, (x, y), (x + w, y + h), cfg.display_color, -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), cfg.border_color, 2)

        expression, value = engine.render()

        # Expresión (parte superior, alineada a la derecha)
        expression = self._fit_text(to_ascii(expression), cv2.FONT_HERSHEY_SIMPLEX,
                                    cfg.expression_font_scale, 1, inner_w)
        if expression:
            text_w = cv2.getTextSize(expression, cv2.FONT_HERSHEY_SIMPLEX,
                                     cfg.expression_font_scale, 1)[0][0]
            cv2.putText(img, expression, (x + w - 20 - text_w, y + 40),
                        cv2.FONT_HERSHEY_SIMPLEX, cfg.expression_font_scale,
                        cfg.expression_color, 1, cv2.LINE_AA)

        color = cfg.value_color
        if engine.has_error:
            color = cfg.error_color
        elif engine.just_completed:
            color = cfg.result_color

        scale = cfg.value_font_scale_for(value)
        value = self._fit_text(value, cv2.FONT_HERSHEY_DUPLEX, scale, 2, inner_w)
        text_w = cv2.getTextSize(value, cv2.FONT_HERSHEY_DUPLEX, scale, 2)[0][0]
        cv2.putText(img, value, (x + w - 20 - text_w, y + h - 25),
                    cv2.FONT_HERSHEY_DUPLEX, scale, color, 2, cv2.LINE_AA)

    def draw_keypad(self, img):
        """
        Dibuja los botones del teclado.

        El botón resaltado se pinta con color claro mientras dure
        highlight_timer (se descuenta un frame por llamada).
        """
        cfg = self.config
        colors = {
            'digit': cfg.digit_button_color,
            'function': cfg.function_button_color,
            'operator': cfg.operator_button_color,
            'equals': cfg.equals_button_color,
        }

        for button in self.buttons:
            bx, by, bw, bh = button['rect']
            color = colors[button['kind']]
            if self.highlight_timer > 0 and button['id'] == self.highlighted:
                color = cfg.highlight_color
            cv2.rectangle(img, (bx, by), (bx + bw, by + bh), color, -1)

            label = button['label']
            (text_w, text_h), _ = cv2.getTextSize(label, cv2.FONT_HERSHEY_SIMPLEX,
                                                  cfg.button_font_scale, 2)
            cv2.putText(img, label, (bx + (bw - text_w) // 2, by + (bh + text_h) // 2),
                        cv2.FONT_HERSHEY_SIMPLEX, cfg.button_font_scale,
                        cfg.button_text_color, 2, cv2.LINE_AA)

        if self.highlight_timer > 0:
            self.highlight_timer -= 1

    def render(self, engine):
        """
        Dibuja un frame completo.

        Args:
            engine (CalculatorEngine): Motor con el estado actual

        Returns:
            np.array: Imagen BGR de tamaño (height, width, 3)
        """
        img = self.new_canvas()
        self.draw_display(img, engine)
        self.draw_keypad(img)
        return img
