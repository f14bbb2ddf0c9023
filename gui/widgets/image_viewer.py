"""Image view that doubles as a pipeline write port."""

import numpy as np
from PySide6.QtWidgets import QGraphicsView, QGraphicsScene
from PySide6.QtGui import QPixmap, QImage, QColor, QPainter, QFont
from PySide6.QtCore import Qt, QRectF


class ImageViewer(QGraphicsView):
    """QGraphicsView showing RGBA rasters with nearest-neighbour scaling."""

    def __init__(self, parent=None, label: str = ""):
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._pixmap_item = None
        self._raster = None
        self._label = label

        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setBackgroundBrush(QColor(40, 40, 40))
        self.setMinimumSize(240, 240)
        # Keep individual pixels visible when scaled up
        self.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, False)

    @property
    def raster(self):
        return self._raster

    def write_pixels(self, raster: np.ndarray, x: int, y: int):
        """Display an (H, W, 4) uint8 RGBA raster with its corner at (x, y)."""
        self._raster = np.ascontiguousarray(raster)
        h, w = self._raster.shape[:2]
        qimage = QImage(self._raster.data, w, h, 4 * w, QImage.Format.Format_RGBA8888)
        # QImage does not own the numpy buffer
        pixmap = QPixmap.fromImage(qimage.copy())

        if self._pixmap_item is None:
            self._pixmap_item = self._scene.addPixmap(pixmap)
        else:
            self._pixmap_item.setPixmap(pixmap)
        self._pixmap_item.setPos(x, y)
        self._pixmap_item.setTransformationMode(Qt.TransformationMode.FastTransformation)

        self.setSceneRect(QRectF(x, y, w, h))
        self.fitInView(self._pixmap_item, Qt.AspectRatioMode.KeepAspectRatio)

    def clear_image(self):
        self._scene.clear()
        self._pixmap_item = None
        self._raster = None
        self.viewport().update()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self._pixmap_item is not None:
            self.fitInView(self._pixmap_item, Qt.AspectRatioMode.KeepAspectRatio)

    def paintEvent(self, event):
        super().paintEvent(event)

        if self._pixmap_item is None:
            painter = QPainter(self.viewport())
            rect = self.viewport().rect()
            painter.setFont(QFont("Segoe UI", 11))
            painter.setPen(QColor(100, 100, 100))
            text = self._label or "No image"
            tw = painter.fontMetrics().horizontalAdvance(text)
            painter.drawText(rect.width() // 2 - tw // 2, rect.height() // 2, text)
            painter.end()
