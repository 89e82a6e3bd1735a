from __future__ import annotations

import html
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from aboutsettings.models.about import AboutInfo


def human_bytes(n: int) -> str:
    v = float(n)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if v < 1024.0:
            return f"{v:.1f}{unit}" if unit != "B" else f"{int(v)}B"
        v /= 1024.0
    return f"{v:.1f}PB"


@dataclass(frozen=True)
class ReportBundle:
    text: str
    html: str


class ReportService:
    def build_report(self, info: AboutInfo | None) -> ReportBundle:
        lines: list[str] = [f"About This Device @ {datetime.now():%F %T}", ""]
        lines.append(self._section_versions(info))
        lines.append(self._section_identifiers(info))
        lines.append(self._section_storage(info))
        text_out = "\n".join(lines).strip() + "\n"
        return ReportBundle(text=text_out, html=self._wrap_html(text_out))

    def default_report_path(self) -> Path:
        base = Path.home() / "aboutsettings_reports"
        base.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d-%H%M%S")
        return base / f"about_{ts}.html"

    def write_html(self, path: str | os.PathLike[str], html_str: str) -> str:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(html_str, encoding="utf-8")
        return str(p)

    def _section_versions(self, info: AboutInfo | None) -> str:
        if info is None:
            return "[Versions]\n- no data\n"
        return (
            "[Versions]\n"
            f"- software: {info.software_version or '-'}\n"
            f"- adaptation: {info.adaptation_version or '-'}\n"
        )

    def _section_identifiers(self, info: AboutInfo | None) -> str:
        if info is None:
            return "[Identifiers]\n- no data\n"
        return (
            "[Identifiers]\n"
            f"- serial: {info.serial or '-'}\n"
            f"- imei: {info.imei or '-'}\n"
            f"- wlan_mac: {info.wlan_mac_address or '-'}\n"
            f"- bluetooth: {info.bluetooth_address or '-'}\n"
        )

    def _section_storage(self, info: AboutInfo | None) -> str:
        if info is None:
            return "[Storage]\n- no data\n"
        rows = "\n".join(
            f"  - {r.storage_type.value} {r.path}: {human_bytes(r.available)} free of {human_bytes(r.total)}"
            for r in info.disk_usage
        )
        return (
            "[Storage]\n"
            f"- ts: {info.ts:%F %T}\n"
            f"- rows:\n{rows}\n"
        )

    def _wrap_html(self, text_out: str) -> str:
        escaped = html.escape(text_out)
        return (
            "<!doctype html>"
            "<html><head><meta charset='utf-8'>"
            "<meta name='viewport' content='width=device-width, initial-scale=1'>"
            "<title>About This Device</title>"
            "<style>body{font-family:ui-monospace,Menlo,Consolas,monospace;margin:24px;}"
            "pre{white-space:pre-wrap;line-height:1.35;}"
            "</style></head><body>"
            "<h1>About This Device</h1>"
            f"<pre>{escaped}</pre>"
            "</body></html>"
        )
