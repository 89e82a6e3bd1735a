from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class StorageType(str, Enum):
    SYSTEM = "system"
    USER = "user"
    MASS = "mass"


@dataclass(frozen=True)
class DiskUsageRow:
    storage_type: StorageType
    path: str
    available: int
    total: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "storageType": self.storage_type.value,
            "path": self.path,
            "available": self.available,
            "total": self.total,
        }


@dataclass(frozen=True)
class AboutInfo:
    ts: datetime
    software_version: str
    adaptation_version: str
    serial: str
    imei: str
    wlan_mac_address: str
    bluetooth_address: str
    total_disk_space: int
    available_disk_space: int
    disk_usage: list[DiskUsageRow] = field(default_factory=list)
