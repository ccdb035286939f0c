"""
Interfaz de usuario y renderizado del teclado.

Este módulo contiene la clase KeypadRenderer que dibuja el display y la
rejilla de botones, y traduce posiciones de clic a pulsaciones.
"""

import cv2
import numpy as np

from core.buttons import ButtonKind, ButtonPress, Operator
from config.keypad import KeypadConfig


# Rejilla de botones, de arriba a abajo (el "0" doble de la última fila es heredado)
BUTTON_ROWS = [
    [ButtonPress.clear(), ButtonPress.operator(Operator.DIVIDE),
     ButtonPress.operator(Operator.MULTIPLY), ButtonPress.operator(Operator.SUBTRACT)],
    [ButtonPress.digit("7"), ButtonPress.digit("8"), ButtonPress.digit("9"),
     ButtonPress.operator(Operator.ADD)],
    [ButtonPress.digit("4"), ButtonPress.digit("5"), ButtonPress.digit("6"),
     ButtonPress.equals()],
    [ButtonPress.digit("1"), ButtonPress.digit("2"), ButtonPress.digit("3"),
     ButtonPress.decimal()],
    [ButtonPress.digit("0"), ButtonPress.digit("0")],
]


# ============================================================================
# CLASE: KeypadRenderer
# Propósito: Capa de presentación de la calculadora
# Responsabilidades:
#   - Calcular la geometría de cada botón
#   - Dibujar display y botones sobre una imagen numpy (BGR)
#   - Resolver qué botón hay bajo un punto (clic del ratón)
#   - Resaltar brevemente el último botón pulsado
# ============================================================================
class KeypadRenderer:
    """
    Renderizador del teclado de la calculadora.

    Componentes visuales:
        1. Display: texto del motor alineado a la derecha
        2. Botones: dígitos en gris, operadores en naranja, =/C/. en azul
        3. Resaltado: borde blanco sobre el último botón pulsado
    """

    def __init__(self, config=None):
        """
        Args:
            config (KeypadConfig): Configuración visual (opcional)
        """
        self.config = config if config else KeypadConfig()
        self.width = self.config.width
        self.height = self.config.height
        self._layout = self._build_layout()

        self.highlighted = None     # Botón resaltado actualmente
        self.highlight_timer = 0    # Frames restantes de resaltado

    def _build_layout(self):
        """Calcula el rectángulo (x, y, w, h) de cada botón."""
        cfg = self.config
        unit, gap = cfg.unit, cfg.spacing
        layout = []

        y = cfg.display_height + gap
        for row in BUTTON_ROWS:
            x = gap
            for press in row:
                # El "0" ocupa dos unidades más la separación que absorbe
                w = 2 * unit + gap if press == ButtonPress.digit("0") else unit
                layout.append((press, (x, y, w, unit)))
                x += w + gap
            y += unit + gap
        return layout

    def layout(self):
        """
        Retorna la geometría del teclado.

        Returns:
            list: [(ButtonPress, (x, y, w, h)), ...] en orden de lectura
        """
        return list(self._layout)

    def button_at(self, px, py):
        """
        Busca el botón que contiene el punto (px, py).

        Returns:
            ButtonPress | None: None si el punto cae en el display o entre botones
        """
        for press, (x, y, w, h) in self._layout:
            if x <= px < x + w and y <= py < y + h:
                return press
        return None

    def highlight(self, press):
        """Marca un botón como pulsado durante unos frames."""
        self.highlighted = press
        self.highlight_timer = self.config.highlight_frames

    def button_color(self, press):
        """Color de fondo según el tipo de botón."""
        if press.kind is ButtonKind.DIGIT:
            return self.config.digit_color
        if press.kind is ButtonKind.OPERATOR:
            return self.config.operator_color
        return self.config.control_color

    def display_font_scale(self, text):
        """
        Escala de fuente para que el texto quepa en el display.

        Números cortos usan la escala configurada; los largos se reducen
        en pasos de 0.2 hasta caber (mínimo 0.6).
        """
        cfg = self.config
        max_w = self.width - 2 * cfg.spacing
        scale = cfg.display_font_scale
        while scale > 0.6:
            text_w = cv2.getTextSize(text, cfg.font, scale, cfg.font_thickness)[0][0]
            if text_w <= max_w:
                break
            scale -= 0.2
        return max(scale, 0.6)

    def render(self, display_text):
        """
        Dibuja el estado completo de la calculadora.

        Args:
            display_text (str): Texto del display leído del motor

        Returns:
            np.ndarray: Imagen BGR uint8 de tamaño (height, width, 3)
        """
        img = np.full((self.height, self.width, 3), self.config.background_color, dtype=np.uint8)
        self.draw_display(img, display_text)

        for press, rect in self._layout:
            self.draw_button(img, press, rect)

        if self.highlight_timer > 0:
            self.highlight_timer -= 1
            for press, (x, y, w, h) in self._layout:
                if press == self.highlighted:
                    cv2.rectangle(img, (x, y), (x + w - 1, y + h - 1),
                                  self.config.highlight_color, 3)
        return img

    def draw_display(self, img, text):
        """Dibuja el texto del display alineado a la derecha."""
        cfg = self.config
        scale = self.display_font_scale(text)
        (text_w, text_h), _ = cv2.getTextSize(text, cfg.font, scale, cfg.font_thickness)
        x = self.width - cfg.spacing - text_w
        y = cfg.display_height - cfg.spacing - (cfg.display_height - text_h) // 4
        cv2.putText(img, text, (x, y), cfg.font, scale,
                    cfg.display_text_color, cfg.font_thickness)

    def draw_button(self, img, press, rect):
        """
        Dibuja un botón con bordes redondeados (círculo o píldora).

        Args:
            img (np.ndarray): Imagen sobre la cual dibujar
            press (ButtonPress): Botón a dibujar
            rect (tuple): (x, y, w, h)
        """
        cfg = self.config
        x, y, w, h = rect
        color = self.button_color(press)
        r = h // 2

        # Píldora: rectángulo central + semicírculos en los extremos
        cv2.rectangle(img, (x + r, y), (x + w - r, y + h - 1), color, -1)
        cv2.circle(img, (x + r, y + r), r, color, -1, cv2.LINE_AA)
        cv2.circle(img, (x + w - r, y + r), r, color, -1, cv2.LINE_AA)

        label = press.glyph
        (text_w, text_h), _ = cv2.getTextSize(label, cfg.font, cfg.button_font_scale,
                                              cfg.font_thickness)
        cv2.putText(img, label, (x + (w - text_w) // 2, y + (h + text_h) // 2),
                    cfg.font, cfg.button_font_scale, cfg.button_text_color,
                    cfg.font_thickness, cv2.LINE_AA)
