"""GUI widgets for the chroma lab."""

from .image_viewer import ImageViewer
from .styled_combobox import OptionComboBox

__all__ = ['ImageViewer', 'OptionComboBox']
