"""Main application window."""

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QFormLayout, QGroupBox,
    QFileDialog, QMessageBox
)
from PySide6.QtGui import QAction

from models.errors import ChromaLabError
from engines.controller import VisualizationController
from utils.render_surface import ArraySurface
from utils.test_images import DEMO_IMAGES, generate_demo_image
from gui.widgets.image_viewer import ImageViewer
from gui.widgets.styled_combobox import OptionComboBox

APP_NAME = "Chroma Lab"
APP_VERSION = "1.0"

DEFAULT_DEMO = "color_bars"
# Pipeline works pixel by pixel; keep demo sources small
DEMO_SIZE = 128

# (view name, title, transformation options, has scheme selector)
PANELS = [
    ('rgb', "RGB channels", [
        ('original', "Original"), ('r', "R"), ('g', "G"), ('b', "B"),
    ], False),
    ('ycc', "YCbCr channels", [
        ('y', "Y (luma)"), ('cb', "Cb"), ('cr', "Cr"),
    ], False),
    ('subsampling', "Chroma subsampling", [
        ('original', "Original"), ('y', "Y (luma)"), ('cb', "Cb"), ('cr', "Cr"),
    ], True),
]

SCHEME_OPTIONS = [('4:4:4', "4:4:4"), ('4:2:2', "4:2:2"), ('4:2:0', "4:2:0")]


class MainWindow(QMainWindow):
    """
    Three side-by-side views of one source image.

    Each viewer is the write port of its view; selector changes go through
    the controller, which re-renders only the affected view.
    """

    def __init__(self):
        super().__init__()

        self.setWindowTitle(f"{APP_NAME}: Color Spaces and Chroma Subsampling")
        self.setMinimumSize(1000, 520)

        self._viewers = {}
        self._target_combos = {}
        self._scheme_combo = None

        self._init_ui()
        self._controller = VisualizationController(writers=self._viewers)
        self._init_menu()
        self.statusBar()

        self._load_demo(DEFAULT_DEMO)

    def _init_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QHBoxLayout(central_widget)
        layout.setContentsMargins(8, 8, 8, 8)

        for name, title, targets, has_scheme in PANELS:
            layout.addWidget(self._create_panel(name, title, targets, has_scheme))

    def _create_panel(self, name, title, targets, has_scheme) -> QWidget:
        group = QGroupBox(title)
        layout = QVBoxLayout(group)

        viewer = ImageViewer(label=title)
        self._viewers[name] = viewer
        layout.addWidget(viewer, stretch=1)

        form = QFormLayout()
        target_combo = OptionComboBox(targets)
        target_combo.currentIndexChanged.connect(
            lambda _, view=name: self._on_target_changed(view)
        )
        self._target_combos[name] = target_combo
        form.addRow("Component:", target_combo)

        if has_scheme:
            self._scheme_combo = OptionComboBox(SCHEME_OPTIONS)
            self._scheme_combo.currentIndexChanged.connect(
                lambda _, view=name: self._on_scheme_changed(view)
            )
            form.addRow("Scheme:", self._scheme_combo)

        layout.addLayout(form)
        return group

    def _init_menu(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        open_action = QAction("&Open Image...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._on_open_image)
        file_menu.addAction(open_action)
        file_menu.addSeparator()
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        demo_menu = menubar.addMenu("&Demo")
        for key in DEMO_IMAGES:
            action = QAction(key.replace('_', ' ').title(), self)
            action.triggered.connect(lambda _=False, k=key: self._load_demo(k))
            demo_menu.addAction(action)

    def _load_demo(self, key: str):
        self._set_source(ArraySurface.from_rgb(generate_demo_image(key, DEMO_SIZE)), key)

    def _on_open_image(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Open Image", "", "Images (*.png *.jpg *.jpeg *.bmp *.tif *.tiff)"
        )
        if not path:
            return
        try:
            surface = ArraySurface.from_image(path)
        except ValueError as e:
            QMessageBox.warning(self, "Open Image", str(e))
            return
        self._set_source(surface, path)

    def _set_source(self, surface: ArraySurface, label: str):
        try:
            self._controller.load_source(surface)
        except ChromaLabError as e:
            QMessageBox.critical(self, APP_NAME, str(e))
            return
        self._sync_selectors()
        self.statusBar().showMessage(f"{label}: {surface.width}x{surface.height}")

    def _sync_selectors(self):
        for name, combo in self._target_combos.items():
            combo.set_value(self._controller.config(name).transformation_target)
        if self._scheme_combo is not None:
            self._scheme_combo.set_value(self._controller.config('subsampling').subsampling_scheme)

    def _on_target_changed(self, view: str):
        self._apply(self._controller.set_transformation, view, self._target_combos[view].value())

    def _on_scheme_changed(self, view: str):
        self._apply(self._controller.set_subsampling_scheme, view, self._scheme_combo.value())

    def _apply(self, setter, view, value):
        try:
            setter(view, value)
        except (ChromaLabError, RuntimeError) as e:
            self.statusBar().showMessage(f"Error: {e}")
