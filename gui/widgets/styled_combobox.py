"""ComboBox listing fixed option values with display labels."""

from PySide6.QtWidgets import QComboBox, QStyledItemDelegate


class ComboBoxItemDelegate(QStyledItemDelegate):
    """Delegate ensuring consistent item height in dropdown."""

    def __init__(self, item_height=26, parent=None):
        super().__init__(parent)
        self._item_height = item_height

    def sizeHint(self, option, index):
        size = super().sizeHint(option, index)
        size.setHeight(self._item_height)
        return size


class OptionComboBox(QComboBox):
    """ComboBox whose items carry the option value as user data."""

    def __init__(self, options, parent=None):
        super().__init__(parent)
        self.setItemDelegate(ComboBoxItemDelegate(item_height=26, parent=self))
        self.setMinimumHeight(28)
        for value, label in options:
            self.addItem(label, value)

    def value(self):
        return self.currentData()

    def set_value(self, value):
        """Select the item holding value without emitting change signals."""
        index = self.findData(value)
        if index >= 0:
            self.blockSignals(True)
            self.setCurrentIndex(index)
            self.blockSignals(False)
