from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from aboutsettings.models.about import AboutInfo

logger = logging.getLogger(__name__)


class SnapshotSignals(QObject):
    result = Signal(object)
    error = Signal(str)
    finished = Signal()


@dataclass(frozen=True)
class SnapshotJob:
    req_id: int
    fn: Callable[[], AboutInfo]


class SnapshotWorker(QRunnable):
    """Runs one blocking snapshot read off the GUI thread."""

    def __init__(self, job: SnapshotJob) -> None:
        super().__init__()
        self.job = job
        self.signals = SnapshotSignals()
        self.setAutoDelete(False)

    @Slot()
    def run(self) -> None:
        try:
            info = self.job.fn()
            self.signals.result.emit((self.job.req_id, info))
        except Exception as e:  # noqa: BLE001
            logger.exception("Snapshot %d failed", self.job.req_id)
            self.signals.error.emit(str(e))
        finally:
            self.signals.finished.emit()
