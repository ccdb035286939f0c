"""
Configuración visual del teclado de la calculadora.

Este módulo centraliza dimensiones, colores y fuentes de la capa de
presentación. El motor de cálculo nunca lee esta configuración.
"""

import cv2


# ============================================================================
# CLASE: KeypadConfig
# Propósito: Preferencias de la ventana y del teclado
# Responsabilidades:
#   - Dimensiones de la ventana y separación entre botones
#   - Colores por tipo de botón (BGR, formato de OpenCV)
#   - Fuentes y escalas de texto
# ============================================================================
class KeypadConfig:
    """
    Configuración de la capa de presentación.

    Geometría (heredada del diseño original):
        - Unidad de botón = (ancho - 5 * separación) / 4
        - El botón "0" ocupa dos unidades de ancho
        - Todos los botones miden una unidad de alto
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = 'Calculadora'
        self.width = 420                    # Ancho de la ventana en píxeles
        self.display_height = 140           # Alto del área del display
        self.spacing = 10                   # Separación entre botones

        # ====================================================================
        # COLORES (BGR)
        # ====================================================================
        self.background_color = (0, 0, 0)
        self.display_text_color = (255, 255, 255)
        self.digit_color = (128, 128, 128)      # Gris
        self.operator_color = (0, 165, 255)     # Naranja
        self.control_color = (255, 0, 0)        # Azul: =, C y .
        self.button_text_color = (255, 255, 255)
        self.highlight_color = (255, 255, 255)  # Borde de botón pulsado

        # ====================================================================
        # TEXTO
        # ====================================================================
        self.font = cv2.FONT_HERSHEY_DUPLEX
        self.display_font_scale = 2.2
        self.button_font_scale = 1.4
        self.font_thickness = 2
        self.highlight_frames = 6           # Frames que dura el resaltado

    @property
    def unit(self):
        """Lado de un botón estándar en píxeles."""
        return (self.width - 5 * self.spacing) // 4

    @property
    def height(self):
        """Alto total: display + 5 filas de botones + separaciones."""
        rows = 5
        return self.display_height + rows * (self.unit + self.spacing) + self.spacing
