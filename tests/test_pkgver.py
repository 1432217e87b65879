from __future__ import annotations

from pathlib import Path

import libkstream
from libkstream.pkgver import progname, version, version_info


def test_version_matches_file():
    version_file = Path(libkstream.__file__).parent / "VERSION"
    assert version() == version_file.read_text(encoding="utf-8").strip()


def test_version_info():
    info = version_info()
    assert ".".join(str(_) for _ in info[:3]) == version().split("+")[0]
    assert info.major >= 0


def test_progname():
    assert progname() == "libkstream"
