from __future__ import annotations

from typing import Protocol

import psutil


class StorageInfoProvider(Protocol):
    def available_bytes(self, path: str) -> int: ...

    def total_bytes(self, path: str) -> int: ...


class PsutilStorageInfo:
    def available_bytes(self, path: str) -> int:
        return int(psutil.disk_usage(path).free)

    def total_bytes(self, path: str) -> int:
        return int(psutil.disk_usage(path).total)
