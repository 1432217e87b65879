# -*- coding: utf-8 -*-
from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple

__all__ = ['version', 'version_info', 'progname']


class _VersionInfo(NamedTuple):
    major: int
    minor: int = 0
    micro: int = 0
    local_identifier: str | None = None


_VERSION_PATTERN = re.compile(
    r"""
    ^\s*v?
    (?P<release>[0-9]+(?:\.[0-9]+)*)                      # release segment
    (?:\+(?P<local>[a-z0-9]+(?:[-_\.][a-z0-9]+)*))?       # local version
    \s*$
    """,
    re.VERBOSE | re.IGNORECASE
)


@lru_cache
def version() -> str:
    with open(Path(__file__).parent / 'VERSION', encoding='utf-8') as version_file:
        return version_file.readline().strip()


@lru_cache
def version_info() -> _VersionInfo:
    result = _VERSION_PATTERN.search(version())
    if result is None:
        raise RuntimeError(f"invalid version string '{version()}'")

    rel = [int(_) for _ in result.group('release').split('.', maxsplit=3)[:3]]
    rel += [0] * (3 - len(rel))

    return _VersionInfo(*rel, local_identifier=result.group('local'))


def progname() -> str:
    last_parent_path: Path | None = None
    for parent in Path(__file__).parents:
        if last_parent_path is not None:
            if (last_parent_path / '__init__.py').exists() and (last_parent_path / 'VERSION').exists():
                return last_parent_path.name
        last_parent_path = parent
    else:
        raise RuntimeError('cannot get the program name')
