from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from aboutsettings.collectors.mount_table import MountEntry


class FakeMounts:
    """Mount table fake; entries are (mountpoint, device) pairs in table order."""

    def __init__(self, entries):
        self.entries = [MountEntry(mountpoint=m, device=d) for m, d in entries]
        self.calls = 0

    def list_mounts(self):
        self.calls += 1
        return list(self.entries)


@dataclass
class FakeStorage:
    sizes: dict[str, tuple] = field(default_factory=dict)
    queried: list[str] = field(default_factory=list)

    def available_bytes(self, path):
        self.queried.append(path)
        return self.sizes.get(path, (0, 0))[0]

    def total_bytes(self, path):
        return self.sizes.get(path, (0, 0))[1]


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage(sizes={"/": (100, 1000), "/home": (20, 500), "/data": (7, 70)})
