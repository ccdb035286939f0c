"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2
from core.calculator import CalculatorEngine
from ui.keypad import KeypadRenderer
from config.keypad import KeypadConfig


# ============================================================================
class CalculatorApp:
    """
    Aplicación de calculadora con teclado en ventana OpenCV.

    Arquitectura:
        - CalculatorEngine: Lógica aritmética y estado
        - KeypadRenderer: Dibujo del display y resolución de clics
        - CalculatorApp: Coordinador y loop principal

    Flujo de una pulsación:
        clic → KeypadRenderer.button_at → CalculatorEngine.press → redibujar
    """

    def __init__(self, config=None):
        """
        Inicializa los componentes (la ventana se abre en run()).

        Args:
            config (KeypadConfig): Configuración visual (opcional)
        """
        self.config = config if config else KeypadConfig()
        self.engine = CalculatorEngine()
        self.ui = KeypadRenderer(self.config)
        self.running = False

    def handle_click(self, x, y):
        """
        Procesa un clic en coordenadas de ventana.

        Args:
            x (int): Coordenada horizontal en píxeles
            y (int): Coordenada vertical en píxeles

        Returns:
            ButtonPress | None: Botón procesado, None si el clic no cae en un botón
        """
        press = self.ui.button_at(x, y)
        if press is None:
            return None
        self.engine.press(press)
        self.ui.highlight(press)
        return press

    def _on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV (se ejecuta dentro de waitKey)."""
        if event == cv2.EVENT_LBUTTONDOWN:
            self.handle_click(x, y)

    def _window_closed(self):
        return cv2.getWindowProperty(self.config.window_title, cv2.WND_PROP_VISIBLE) < 1

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar display y teclado
            2. Mostrar frame y esperar eventos (los clics llegan por callback)
            3. Repetir hasta ESC, 'q' o cierre de ventana
        """
        print("\n" + "=" * 50)
        print("CALCULADORA")
        print("=" * 50)
        print("\nHaz clic en los botones para operar")
        print("Presiona ESC o 'q' para salir\n")

        title = self.config.window_title
        cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(title, self._on_mouse)
        print(f"✓ Ventana: {self.ui.width}x{self.ui.height}")

        self.running = True
        try:
            while self.running:
                frame = self.ui.render(self.engine.display)
                cv2.imshow(title, frame)

                key = cv2.waitKey(30) & 0xFF
                if key == 27 or key == ord('q'):
                    break
                if self._window_closed():
                    break
        finally:
            self.running = False
            cv2.destroyAllWindows()     # Cerrar ventanas de OpenCV
        print("\nOK Aplicacion cerrada correctamente")
