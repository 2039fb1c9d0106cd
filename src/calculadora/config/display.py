"""
Configuración de la ventana y del aspecto visual de la calculadora.

Este módulo contiene la configuración centralizada de tamaños, colores y
fuentes usados por el renderizador.
"""

# ============================================================================
# CLASE: DisplayConfig
# Propósito: Preferencias visuales de la calculadora
# Responsabilidades:
#   - Almacenar dimensiones de ventana, display y teclado
#   - Definir la paleta de colores (formato BGR de OpenCV)
#   - Ajustar el tamaño de fuente según la longitud del número
# ============================================================================
class DisplayConfig:
    """
    Configuración visual de la calculadora.

    Opciones disponibles:
        - Dimensiones de ventana y márgenes
        - Colores del display y de cada tipo de botón
        - Escalas de fuente para expresión, valor y botones
    """

    def __init__(self, width=400, height=600):
        """
        Inicializa configuración con valores por defecto.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
        """
        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = "Calculadora"
        self.width = width
        self.height = height
        self.padding = 14                   # Margen exterior
        self.button_gap = 8                 # Separación entre botones
        self.display_ratio = 0.28           # Fracción del alto para el display
        self.frame_delay_ms = 30            # Espera de cv2.waitKey por frame

        # ====================================================================
        # COLORES (BGR)
        # ====================================================================
        self.background_color = (30, 30, 30)
        self.display_color = (35, 35, 35)
        self.border_color = (100, 200, 255)
        self.expression_color = (180, 180, 180)
        self.value_color = (255, 255, 255)
        self.result_color = (100, 255, 100)     # Verde tras un cálculo
        self.error_color = (100, 100, 255)      # Rojo para "Error" / "Infinity"
        self.digit_button_color = (70, 70, 70)
        self.function_button_color = (120, 120, 120)
        self.operator_button_color = (0, 150, 255)
        self.equals_button_color = (60, 170, 60)
        self.button_text_color = (255, 255, 255)
        self.highlight_color = (200, 200, 200)

        # ====================================================================
        # FUENTES
        # ====================================================================
        self.expression_font_scale = 0.7
        self.value_font_scale = 2.0
        self.value_font_scale_small = 1.2
        self.long_value_length = 9          # A partir de aquí se usa la fuente pequeña
        self.button_font_scale = 1.0
        self.highlight_frames = 6           # Frames que un botón queda resaltado

    def display_height(self):
        """Alto en píxeles del display (expresión + valor)."""
        return int(self.height * self.display_ratio)

    def value_font_scale_for(self, text):
        """
        Escala de fuente del valor según su longitud.

        Args:
            text (str): Texto a mostrar en el display principal

        Returns:
            float: Escala grande para textos cortos, pequeña para largos
        """
        if len(text) < self.long_value_length:
            return self.value_font_scale
        return self.value_font_scale_small
