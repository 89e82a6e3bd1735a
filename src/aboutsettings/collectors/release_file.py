from __future__ import annotations

import logging
import os
import re

logger = logging.getLogger(__name__)

# Bash variable names; POSIX only asks for uppercase, digits and underscores.
_KEY_RE = re.compile(r"[a-zA-Z_]+[a-zA-Z0-9_]*")
_ESCAPE_RE = re.compile(r"\\(.)")
_QUOTES = ("'", '"')


def parse_release_file(path: str | os.PathLike[str]) -> dict[str, str]:
    """Parse an os-release style file of shell ``KEY=value`` assignments.

    Format: https://www.freedesktop.org/software/systemd/man/os-release.html

    A file that cannot be opened yields an empty mapping. Lines with an
    invalid key or unbalanced quoting are logged and skipped. When a key is
    assigned more than once the last assignment wins.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            lines = [line.rstrip("\n") for line in f]
    except OSError as e:
        logger.debug("Release file %s not readable: %s", path, e)
        return {}

    result: dict[str, str] = {}
    for line in lines:
        parsed = parse_release_line(line)
        if parsed is None:
            continue
        key, value = parsed
        result[key] = value
    return result


def parse_release_line(line: str) -> tuple[str, str] | None:
    if line.startswith("#"):
        return None

    key, _sep, value = line.partition("=")
    value = value.strip()

    if not _KEY_RE.fullmatch(key):
        logger.warning("Invalid key in input line: '%s'", line)
        return None

    # An empty value is never treated as quoted.
    if value and value[0] in _QUOTES:
        if len(value) < 2 or value[-1] != value[0]:
            logger.warning("Quoting error in input line: '%s'", line)
            return None
        value = value[1:-1]

    value = _ESCAPE_RE.sub(r"\1", value)
    return key, value
