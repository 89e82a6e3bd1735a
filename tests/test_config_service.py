import json

from aboutsettings.services.config_service import AboutConfig, ConfigPaths, ConfigService


def _service(tmp_path):
    return ConfigService(ConfigPaths(path=tmp_path / "aboutsettings" / "config.json"))


def test_default_path_honours_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert ConfigService.default_path() == tmp_path / "aboutsettings" / "config.json"


def test_missing_file_gives_defaults(tmp_path):
    cfg = _service(tmp_path).load_settings()
    assert cfg == AboutConfig()
    assert cfg.candidate_mountpoints == ["/home"]
    assert cfg.os_release_path == "/etc/os-release"
    assert cfg.hw_release_path == "/etc/hw-release"
    assert cfg.serial_path == "/config/serial/serial.txt"


def test_malformed_file_gives_defaults(tmp_path, caplog):
    svc = _service(tmp_path)
    svc.paths.path.parent.mkdir(parents=True)
    svc.paths.path.write_text("{not json", encoding="utf-8")
    assert svc.load() == {}
    assert svc.load_settings() == AboutConfig()
    assert "Ignoring unreadable config" in caplog.text


def test_overrides_and_bad_types(tmp_path):
    svc = _service(tmp_path)
    svc.paths.path.parent.mkdir(parents=True)
    svc.paths.path.write_text(
        json.dumps({"candidate_mountpoints": ["/home", "/media/sdcard"], "serial_path": 5, "unknown": 1}),
        encoding="utf-8",
    )
    cfg = svc.load_settings()
    assert cfg.candidate_mountpoints == ["/home", "/media/sdcard"]
    assert cfg.serial_path == "/config/serial/serial.txt"

