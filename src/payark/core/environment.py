"""
Layered environment lookup used to build :class:`payark.core.config.PayArkConfig`.

Sources are the process environment (or an explicit ``base`` mapping), an
optional ``.env`` file that only fills in missing keys, and ``overrides``
that always win.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

__all__ = ["PayArkEnvironment", "build_environment", "read_env_file"]


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def read_env_file(path: str) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` lines from ``path``; a missing file yields ``{}``."""
    values: Dict[str, str] = {}
    try:
        data = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = _strip_quotes(value.strip())
    return values


@dataclass(frozen=True)
class PayArkEnvironment:
    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> PayArkEnvironment:
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in read_env_file(env_file).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    return PayArkEnvironment(variables=merged)
