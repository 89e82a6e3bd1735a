from __future__ import annotations

from typing import Any

from PySide6.QtCore import QThreadPool
from PySide6.QtWidgets import QMainWindow, QPushButton

from aboutsettings.gui.pages.about_page import AboutPage
from aboutsettings.gui.workers import SnapshotJob, SnapshotWorker
from aboutsettings.models.about import AboutInfo
from aboutsettings.services.about_settings import AboutSettings
from aboutsettings.services.config_service import ConfigService
from aboutsettings.services.report_service import ReportService


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("About This Device")
        self.resize(640, 480)

        self._config = ConfigService()
        self._reporter = ReportService()
        self._about = AboutSettings(self._config.load_settings())
        self._latest: AboutInfo | None = None

        self._thread_pool = QThreadPool.globalInstance()
        self._req_id = 0
        self._active_workers: set[SnapshotWorker] = set()

        self._page = AboutPage()
        self.setCentralWidget(self._page)

        self.statusBar().showMessage("Ready")

        refresh_btn = QPushButton("Refresh")
        refresh_btn.clicked.connect(self.refresh)  # type: ignore[arg-type]
        self.statusBar().addPermanentWidget(refresh_btn)

        export_btn = QPushButton("Export Report")
        export_btn.clicked.connect(self._export_report)  # type: ignore[arg-type]
        self.statusBar().addPermanentWidget(export_btn)

        self.refresh()

    def refresh(self) -> None:
        self._req_id += 1
        w = SnapshotWorker(SnapshotJob(req_id=self._req_id, fn=self._about.snapshot))
        self._active_workers.add(w)
        w.signals.result.connect(self._on_result)  # type: ignore[arg-type]
        w.signals.error.connect(self._on_worker_error)  # type: ignore[arg-type]
        w.signals.finished.connect(lambda _w=w: self._active_workers.discard(_w))  # type: ignore[arg-type]
        self._thread_pool.start(w)

    def _on_result(self, res: Any) -> None:
        req_id, info = res
        if req_id != self._req_id or not isinstance(info, AboutInfo):
            return
        self._latest = info
        self._page.set_data(info)
        self.statusBar().showMessage(f"Updated: {info.ts:%F %T}")

    def _export_report(self) -> None:
        try:
            bundle = self._reporter.build_report(self._latest)
            out = self._reporter.default_report_path()
            written = self._reporter.write_html(out, bundle.html)
            self.statusBar().showMessage(f"Report exported: {written}")
        except OSError as e:
            self._on_worker_error(str(e))

    def _on_worker_error(self, msg: str) -> None:
        self.statusBar().showMessage(f"Error: {msg}")
