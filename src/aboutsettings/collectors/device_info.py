from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

import psutil

logger = logging.getLogger(__name__)

DEFAULT_SERIAL_PATH = "/config/serial/serial.txt"


class DeviceInfo(Protocol):
    def imei(self) -> str: ...


class NullDeviceInfo:
    """No modem backend available; reports no IMEI."""

    def imei(self) -> str:
        return ""


class NetworkInfo:
    def __init__(self, sys_root: str | os.PathLike[str] = "/sys") -> None:
        self.sys_root = Path(sys_root)

    def wlan_mac_address(self) -> str:
        addrs = psutil.net_if_addrs()
        for iface in sorted(addrs):
            if not self._is_wireless(iface):
                continue
            for addr in addrs[iface]:
                if addr.family == psutil.AF_LINK:
                    return str(addr.address)
        return ""

    def bluetooth_address(self) -> str:
        p = self.sys_root / "class" / "bluetooth" / "hci0" / "address"
        try:
            return p.read_text(encoding="utf-8").strip()
        except OSError:
            return ""

    def _is_wireless(self, iface: str) -> bool:
        if (self.sys_root / "class" / "net" / iface / "wireless").exists():
            return True
        return iface.startswith("wl")


def read_serial(path: str | os.PathLike[str] = DEFAULT_SERIAL_PATH) -> str:
    p = Path(path)
    if not p.exists():
        return ""
    try:
        return p.read_bytes().decode("utf-8", errors="replace").strip()
    except OSError as e:
        logger.warning("Serial file %s not readable: %s", p, e)
        return ""
