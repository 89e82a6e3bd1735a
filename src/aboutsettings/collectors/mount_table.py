from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import psutil


@dataclass(frozen=True)
class MountEntry:
    mountpoint: str
    device: str


class MountTableReader(Protocol):
    def list_mounts(self) -> list[MountEntry]:
        """Currently mounted filesystems, in system enumeration order."""
        ...


class PsutilMountTableReader:
    """Reads the live mount table on every call (``/proc/self/mounts`` on Linux)."""

    def list_mounts(self) -> list[MountEntry]:
        return [
            MountEntry(mountpoint=str(p.mountpoint), device=str(p.device))
            for p in psutil.disk_partitions(all=True)
        ]


def mount_devices(reader: MountTableReader) -> dict[str, str]:
    """Map mountpoint -> device source.

    A mountpoint listed more than once maps to the device of its last entry,
    e.g. something mounted over ``/home`` later in the table.
    """
    devices: dict[str, str] = {}
    for entry in reader.list_mounts():
        devices[entry.mountpoint] = entry.device
    return devices


def mount_device_for(reader: MountTableReader, mountpoint: str) -> str | None:
    return mount_devices(reader).get(mountpoint)
