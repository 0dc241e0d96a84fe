from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

# Qt
from PyQt5.QtCore import Qt, QPoint, QRect, QSize, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QPainter, QPalette, QPolygon
from PyQt5.QtWidgets import QWidget

from ..config import StickConfig
from ..errors import ConfigurationError
from ..geometry import PadLayout
from ..virtual_stick import VirtualStick


def _or_default(colour: Optional[QColor], default: QColor) -> QColor:
    return QColor(colour) if colour is not None else default


@dataclass
class StickStyle:
    """Colours and outline used when painting the stick."""
    pad_colour: Optional[QColor] = None
    stick_colour: Optional[QColor] = None
    arrow_colour: Optional[QColor] = None
    outline_colour: Optional[QColor] = None
    draw_outline: bool = False
    outline_width: int = 1

    def __post_init__(self):
        if self.outline_colour is None:
            self.outline_colour = QColor(Qt.black)
        self.validate()

    def validate(self):
        if self.outline_width < 0:
            raise ConfigurationError("Outline width must be non-negative")

    def resolve(self, background: QColor) -> "StickStyle":
        """Fill unset colours from *background*, the same way the palette shades them."""
        return StickStyle(
            pad_colour=_or_default(self.pad_colour, background.lighter(120)),
            stick_colour=_or_default(self.stick_colour, background.lighter(120).lighter(120)),
            arrow_colour=_or_default(self.arrow_colour, QColor(background)),
            outline_colour=self.outline_colour,
            draw_outline=self.draw_outline,
            outline_width=self.outline_width,
        )


# =========================== Widget (View/Controller) =========================

class StickWidget(QWidget):
    """
    On-screen joystick widget.
    - Composes a VirtualStick and forwards left-button mouse events to it.
    - Paints the pad, the four direction arrows and the thumb from one layout per paint.
    """

    # Signals
    moved = pyqtSignal(float, float)    # processed (after dead zone/inversion)
    clicked = pyqtSignal()

    def __init__(
        self,
        config: Optional[StickConfig] = None,
        style: Optional[StickStyle] = None,
        parent=None,
    ) -> None:
        super().__init__(parent)

        self._stick = VirtualStick(config, surface_size=lambda: (self.width(), self.height()))
        # Copied so setters never leak into a style shared with other widgets.
        self._style = replace(style) if style is not None else StickStyle()

        self._stick.add_moved_listener(self._on_stick_moved)
        self._stick.add_clicked_listener(self._on_stick_clicked)

        self.setAutoFillBackground(False)
        self.setMinimumSize(40, 40)

    def stick(self) -> VirtualStick:
        return self._stick

    def sizeHint(self) -> QSize:
        return QSize(200, 200)

    # ---- public position api ----
    def get_x(self) -> float:
        return self._stick.get_x()

    def get_y(self) -> float:
        return self._stick.get_y()

    def get_magnitude(self) -> float:
        return self._stick.get_magnitude()

    def get_angle_radians(self) -> float:
        return self._stick.get_angle_radians()

    def get_angle_degrees(self) -> float:
        return self._stick.get_angle_degrees()

    # ---- public config api ----
    def get_config(self) -> StickConfig:
        return self._stick.get_config()

    def set_config(self, cfg: StickConfig) -> None:
        self._stick.set_config(cfg)
        self.update()

    def set_stick_size_ratio(self, ratio: float) -> None:
        self._stick.set_stick_size_ratio(ratio)
        self.update()

    def set_arrow_size_ratio(self, ratio: float) -> None:
        self._stick.set_arrow_size_ratio(ratio)
        self.update()

    def set_dead_zone(self, value: float) -> None:
        self._stick.set_dead_zone(value)

    def get_stick_size_ratio(self) -> float:
        return self._stick.get_stick_size_ratio()

    def get_arrow_size_ratio(self) -> float:
        return self._stick.get_arrow_size_ratio()

    def get_dead_zone(self) -> float:
        return self._stick.get_dead_zone()

    def is_y_inverted(self) -> bool:
        return self._stick.is_y_inverted()

    def set_invert_y(self, invert: bool) -> None:
        self._stick.set_invert_y(invert)

    # ---- style api ----
    def get_style(self) -> StickStyle:
        return self._style

    def resolved_style(self) -> StickStyle:
        """Style with unset colours filled from the palette, as painted."""
        return self._style.resolve(self.palette().color(QPalette.Window))

    def get_pad_colour(self) -> QColor:
        return self.resolved_style().pad_colour

    def get_stick_colour(self) -> QColor:
        return self.resolved_style().stick_colour

    def get_arrow_colour(self) -> QColor:
        return self.resolved_style().arrow_colour

    def get_outline_colour(self) -> QColor:
        return QColor(self._style.outline_colour)

    def is_draw_outline(self) -> bool:
        return self._style.draw_outline

    def set_pad_colour(self, colour: QColor) -> None:
        self._style.pad_colour = QColor(colour)
        self.update()

    def set_stick_colour(self, colour: QColor) -> None:
        self._style.stick_colour = QColor(colour)
        self.update()

    def set_arrow_colour(self, colour: QColor) -> None:
        self._style.arrow_colour = QColor(colour)
        self.update()

    def set_outline_colour(self, colour: QColor) -> None:
        self._style.outline_colour = QColor(colour)
        self.update()

    def set_draw_outline(self, enabled: bool) -> None:
        self._style.draw_outline = bool(enabled)
        self.update()

    def set_outline_width(self, width: int) -> None:
        previous = self._style.outline_width
        self._style.outline_width = int(width)
        try:
            self._style.validate()
        except ConfigurationError:
            self._style.outline_width = previous
            raise
        self.update()

    # ---- painting ----
    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        layout = self._stick.layout()
        if layout.is_empty:
            return

        style = self.resolved_style()
        origin_x, origin_y = layout.pad_origin
        self._draw_disc(painter, origin_x, origin_y, layout.pad_diameter, style.pad_colour, style)
        self._draw_arrows(painter, layout, style.arrow_colour)

        thumb_x, thumb_y = layout.thumb_origin(self._stick.get_displacement())
        self._draw_disc(painter, thumb_x, thumb_y, layout.stick_diameter, style.stick_colour, style)

    def _draw_disc(self, painter: QPainter, x: int, y: int, diameter: int, fill: QColor, style: StickStyle):
        painter.save()
        painter.setPen(Qt.NoPen)

        if style.draw_outline:
            width = style.outline_width
            painter.setBrush(QBrush(style.outline_colour))
            painter.drawEllipse(QRect(x, y, diameter, diameter))
            painter.setBrush(QBrush(fill))
            inner = max(diameter - width * 2, 0)
            painter.drawEllipse(QRect(x + width, y + width, inner, inner))
        else:
            painter.setBrush(QBrush(fill))
            painter.drawEllipse(QRect(x, y, diameter, diameter))

        painter.restore()

    def _draw_arrows(self, painter: QPainter, layout: PadLayout, colour: QColor):
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(colour))
        for triangle in layout.arrow_triangles:
            painter.drawPolygon(QPolygon([QPoint(x, y) for x, y in triangle.vertices]))
        painter.restore()

    # ---- mouse ----
    def mousePressEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._stick.on_pointer_down(e.x(), e.y())

    def mouseMoveEvent(self, e) -> None:
        if e.buttons() & Qt.LeftButton:
            self._stick.on_pointer_move(e.x(), e.y())

    def mouseReleaseEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._stick.on_pointer_up(e.x(), e.y())

    # ---- internal helpers ----
    def _on_stick_moved(self, stick: VirtualStick) -> None:
        self.moved.emit(stick.get_x(), stick.get_y())
        self.update()

    def _on_stick_clicked(self, stick: VirtualStick) -> None:
        self.clicked.emit()
        self.update()
