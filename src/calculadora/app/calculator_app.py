"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2

from ..config.display import DisplayConfig
from ..core.calculator import CalculatorEngine
from ..ui.renderer import UIRenderer
from .keyboard import handle_button, handle_key


KEY_NONE = 255          # cv2.waitKey(...) & 0xFF sin tecla pulsada
KEY_QUIT = ord('q')


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - CalculatorEngine: Lógica aritmética y estado
        - UIRenderer: Renderizado del display y del teclado
        - keyboard: Traducción de teclas/clics a acciones del motor
        - CalculatorApp: Coordinador y loop principal

    Cada evento (tecla o clic) se traduce en una sola acción del motor;
    el frame siguiente muestra el estado resultante.
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación.

        Args:
            config (DisplayConfig): Configuración visual (opcional)

        La ventana no se abre hasta run(), de modo que los manejadores de
        eventos se pueden usar sin interfaz gráfica.
        """
        self.config = config if config else DisplayConfig()
        self.window_name = self.config.window_title
        self.engine = CalculatorEngine()
        self.ui = UIRenderer(self.config.width, self.config.height, self.config)
        self.running = False

    def on_key(self, key):
        """
        Procesa una tecla leída con cv2.waitKey.

        Args:
            key (int): Código de tecla enmascarado con 0xFF

        Returns:
            bool: True si la tecla produjo una acción
        """
        if key == KEY_NONE:
            return False
        if key == KEY_QUIT:
            self.running = False
            return True

        button_id = handle_key(self.engine, key)
        if button_id is None:
            return False
        self.ui.highlight(button_id)
        return True

    def on_mouse(self, event, x, y, flags, param):
        """
        Callback de ratón registrado con cv2.setMouseCallback.

        Solo el clic izquierdo sobre un botón produce una acción.
        """
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        button_id = self.ui.button_at(x, y)
        if button_id is not None and handle_button(self.engine, button_id):
            self.ui.highlight(button_id)

    def frame(self):
        """Imagen del estado actual."""
        return self.ui.render(self.engine)

    def _window_closed(self):
        return cv2.getWindowProperty(self.window_name, cv2.WND_PROP_VISIBLE) < 1

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Dibujar el frame con el estado actual
            2. Mostrar frame y esperar una tecla
            3. Procesar la tecla (los clics llegan por on_mouse)
            4. Repetir hasta 'q' o cierre de ventana

        Raises:
            RuntimeError: Si OpenCV no puede crear la ventana
        """
        print("\n" + "=" * 60)
        print("CALCULADORA")
        print("=" * 60)
        print("\nNumeros: 0-9 y '.'   Operaciones: + - * /")
        print("Enter o '=': calcular   '%': porcentaje   'n': cambiar signo")
        print("Backspace: borrar digito   Escape o 'c': borrar todo")
        print("\nPresiona 'q' para salir")
        print("=" * 60 + "\n")

        try:
            cv2.namedWindow(self.window_name, cv2.WINDOW_AUTOSIZE)
        except cv2.error as e:
            raise RuntimeError(f"Error al abrir ventana: {e}") from e
        cv2.setMouseCallback(self.window_name, self.on_mouse)

        self.running = True
        while self.running:
            cv2.imshow(self.window_name, self.frame())

            key = cv2.waitKey(self.config.frame_delay_ms) & 0xFF
            self.on_key(key)

            if self._window_closed():
                break

        cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
