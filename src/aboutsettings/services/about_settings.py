from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from aboutsettings.collectors.device_info import DeviceInfo, NetworkInfo, NullDeviceInfo, read_serial
from aboutsettings.collectors.disk_usage_collector import ROOT, DiskUsageCollector
from aboutsettings.collectors.mount_table import MountTableReader, PsutilMountTableReader
from aboutsettings.collectors.release_file import parse_release_file
from aboutsettings.collectors.storage_info import PsutilStorageInfo, StorageInfoProvider
from aboutsettings.models.about import AboutInfo, DiskUsageRow
from aboutsettings.services.config_service import AboutConfig

logger = logging.getLogger(__name__)


class AboutSettings:
    """Device metadata for the about page.

    Nothing is cached: every accessor re-reads the release files, the mount
    table or the providers at call time.
    """

    def __init__(
        self,
        config: AboutConfig | None = None,
        *,
        mounts: MountTableReader | None = None,
        storage: StorageInfoProvider | None = None,
        network: NetworkInfo | None = None,
        device: DeviceInfo | None = None,
    ) -> None:
        self.config = config or AboutConfig()
        self.mounts = mounts or PsutilMountTableReader()
        self.storage = storage or PsutilStorageInfo()
        self.network = network or NetworkInfo()
        self.device = device or NullDeviceInfo()
        self._disk_usage = DiskUsageCollector(
            self.mounts,
            self.storage,
            candidates=self.config.candidate_mountpoints,
        )
        logger.debug("Drives: %s", [m.mountpoint for m in self.mounts.list_mounts()])

    def software_version(self) -> str:
        return parse_release_file(self.config.os_release_path).get("VERSION", "")

    def adaptation_version(self) -> str:
        return parse_release_file(self.config.hw_release_path).get("VERSION_ID", "")

    def serial(self) -> str:
        return read_serial(self.config.serial_path)

    def imei(self) -> str:
        return self.device.imei()

    def wlan_mac_address(self) -> str:
        return self.network.wlan_mac_address()

    def bluetooth_address(self) -> str:
        return self.network.bluetooth_address()

    def total_disk_space(self) -> int:
        return self.storage.total_bytes(ROOT)

    def available_disk_space(self) -> int:
        return self.storage.available_bytes(ROOT)

    def disk_usage_model(self) -> list[DiskUsageRow]:
        return self._disk_usage.disk_usage_model()

    def disk_usage_model_dicts(self) -> list[dict[str, Any]]:
        return [row.as_dict() for row in self.disk_usage_model()]

    def snapshot(self) -> AboutInfo:
        return AboutInfo(
            ts=datetime.now(),
            software_version=self.software_version(),
            adaptation_version=self.adaptation_version(),
            serial=self.serial(),
            imei=self.imei(),
            wlan_mac_address=self.wlan_mac_address(),
            bluetooth_address=self.bluetooth_address(),
            total_disk_space=self.total_disk_space(),
            available_disk_space=self.available_disk_space(),
            disk_usage=self.disk_usage_model(),
        )
