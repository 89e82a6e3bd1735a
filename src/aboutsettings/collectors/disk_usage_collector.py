from __future__ import annotations

from typing import Iterable

from aboutsettings.collectors.mount_table import MountTableReader, mount_devices
from aboutsettings.collectors.storage_info import StorageInfoProvider
from aboutsettings.models.about import DiskUsageRow, StorageType

ROOT = "/"
DEFAULT_CANDIDATES: tuple[str, ...] = ("/home",)


class DiskUsageCollector:
    """Builds the disk-usage rows shown on the about page.

    The root filesystem is always reported. Each candidate mountpoint is
    reported separately only when it is mounted from a different device than
    root; a single remaining row is reported as mass storage.

    Candidates are emitted in mount-table order, which is only stable within
    one call.
    """

    def __init__(
        self,
        mounts: MountTableReader,
        storage: StorageInfoProvider,
        candidates: Iterable[str] = DEFAULT_CANDIDATES,
    ) -> None:
        self.mounts = mounts
        self.storage = storage
        self.candidates = frozenset(candidates)

    def disk_usage_model(self) -> list[DiskUsageRow]:
        paths = [ROOT]

        devices = mount_devices(self.mounts)
        root_device = devices.get(ROOT)
        for mountpoint, device in devices.items():
            if mountpoint == ROOT or mountpoint not in self.candidates:
                continue
            if device != root_device:
                paths.append(mountpoint)

        single = len(paths) == 1
        rows: list[DiskUsageRow] = []
        for path in paths:
            if single:
                storage_type = StorageType.MASS
            elif path == ROOT:
                storage_type = StorageType.SYSTEM
            else:
                storage_type = StorageType.USER
            rows.append(
                DiskUsageRow(
                    storage_type=storage_type,
                    path=path,
                    available=self.storage.available_bytes(path),
                    total=self.storage.total_bytes(path),
                )
            )
        return rows
