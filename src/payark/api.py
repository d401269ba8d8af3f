"""
Public, high-level helpers for building a PayArk client.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import PayArk
from .core.config import ConfigError, PayArkConfig, load_config

__all__ = [
    "ConfigError",
    "PayArk",
    "PayArkConfig",
    "create_client",
    "load_config",
]


def create_client(
    *,
    config: Optional[PayArkConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    sandbox: Optional[bool] = None,
    timeout_seconds: Optional[float] = None,
) -> PayArk:
    """
    Construct a :class:`PayArk` client.

    Callers can either supply a ready-made :class:`PayArkConfig` or let the
    helper assemble one from environment data and keyword arguments.
    """
    if config is not None:
        extras = (overrides, base, api_key, base_url, sandbox, timeout_seconds)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built PayArkConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            api_key=api_key,
            base_url=base_url,
            sandbox=sandbox,
            timeout_seconds=timeout_seconds,
        )
    return PayArk(cfg, session=session)
