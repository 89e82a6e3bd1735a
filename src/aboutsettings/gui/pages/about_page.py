from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QGridLayout,
    QGroupBox,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from aboutsettings.models.about import AboutInfo, DiskUsageRow
from aboutsettings.services.report_service import human_bytes

_STORAGE_LABELS = {
    "system": "System",
    "user": "User data",
    "mass": "Mass storage",
}


class AboutPage(QWidget):
    def __init__(self) -> None:
        super().__init__()

        self._fields: dict[str, QLabel] = {}
        info = QGroupBox("Device")
        grid = QGridLayout(info)
        rows = [
            ("software_version", "Software version"),
            ("adaptation_version", "Adaptation version"),
            ("serial", "Serial number"),
            ("imei", "IMEI"),
            ("wlan_mac_address", "WLAN MAC address"),
            ("bluetooth_address", "Bluetooth address"),
        ]
        for r, (key, title) in enumerate(rows):
            value = QLabel("-")
            value.setTextInteractionFlags(Qt.TextSelectableByMouse)
            self._fields[key] = value
            grid.addWidget(QLabel(title), r, 0)
            grid.addWidget(value, r, 1)

        storage = QGroupBox("Storage")
        self._disk = QTableWidget(0, 4)
        self._disk.setHorizontalHeaderLabels(["TYPE", "PATH", "AVAILABLE", "TOTAL"])
        self._disk.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self._disk.setSelectionBehavior(QAbstractItemView.SelectRows)
        self._disk.horizontalHeader().setStretchLastSection(True)
        l = QVBoxLayout(storage)
        l.addWidget(self._disk)

        layout = QVBoxLayout(self)
        layout.addWidget(info)
        layout.addWidget(storage)
        layout.addStretch(1)

    def set_data(self, info: AboutInfo) -> None:
        for key, label in self._fields.items():
            label.setText(str(getattr(info, key)) or "-")
        self._fill_disk(info.disk_usage)

    def _fill_disk(self, rows: list[DiskUsageRow]) -> None:
        t = self._disk
        t.setRowCount(len(rows))
        for r, row in enumerate(rows):
            t.setItem(r, 0, QTableWidgetItem(_STORAGE_LABELS[row.storage_type.value]))
            t.setItem(r, 1, QTableWidgetItem(row.path))
            t.setItem(r, 2, QTableWidgetItem(human_bytes(row.available)))
            t.setItem(r, 3, QTableWidgetItem(human_bytes(row.total)))
        t.resizeColumnsToContents()
