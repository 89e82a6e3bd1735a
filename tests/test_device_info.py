from types import SimpleNamespace

from aboutsettings.collectors import device_info
from aboutsettings.collectors.device_info import NetworkInfo, NullDeviceInfo, read_serial


def _addr(family, address):
    return SimpleNamespace(family=family, address=address, netmask=None, broadcast=None, ptp=None)


def test_read_serial_missing(tmp_path):
    assert read_serial(tmp_path / "serial.txt") == ""


def test_read_serial_trims(tmp_path):
    p = tmp_path / "serial.txt"
    p.write_text("\tABC123 \n", encoding="utf-8")
    assert read_serial(p) == "ABC123"


def test_read_serial_unreadable(tmp_path):
    assert read_serial(tmp_path) == ""


def test_null_device_has_no_imei():
    assert NullDeviceInfo().imei() == ""


def test_bluetooth_address(tmp_path):
    d = tmp_path / "class" / "bluetooth" / "hci0"
    d.mkdir(parents=True)
    (d / "address").write_text("00:1a:7d:da:71:13\n")
    assert NetworkInfo(sys_root=tmp_path).bluetooth_address() == "00:1a:7d:da:71:13"


def test_bluetooth_absent(tmp_path):
    assert NetworkInfo(sys_root=tmp_path).bluetooth_address() == ""


def test_wlan_mac_from_sysfs_wireless_flag(tmp_path, monkeypatch):
    (tmp_path / "class" / "net" / "eth1" / "wireless").mkdir(parents=True)
    addrs = {
        "eth0": [_addr(device_info.psutil.AF_LINK, "02:00:00:00:00:01")],
        "eth1": [_addr(2, "192.168.1.5"), _addr(device_info.psutil.AF_LINK, "02:00:00:00:00:02")],
    }
    monkeypatch.setattr(device_info.psutil, "net_if_addrs", lambda: addrs)
    assert NetworkInfo(sys_root=tmp_path).wlan_mac_address() == "02:00:00:00:00:02"


def test_wlan_mac_by_name(tmp_path, monkeypatch):
    addrs = {
        "lo": [_addr(device_info.psutil.AF_LINK, "00:00:00:00:00:00")],
        "wlan0": [_addr(device_info.psutil.AF_LINK, "02:00:00:00:00:03")],
    }
    monkeypatch.setattr(device_info.psutil, "net_if_addrs", lambda: addrs)
    assert NetworkInfo(sys_root=tmp_path).wlan_mac_address() == "02:00:00:00:00:03"


def test_no_wireless_interface(tmp_path, monkeypatch):
    addrs = {"eth0": [_addr(device_info.psutil.AF_LINK, "02:00:00:00:00:01")]}
    monkeypatch.setattr(device_info.psutil, "net_if_addrs", lambda: addrs)
    assert NetworkInfo(sys_root=tmp_path).wlan_mac_address() == ""
