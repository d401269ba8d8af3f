"""
Configuration objects and helpers for the PayArk client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment

__all__ = [
    "ConfigError",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "PayArkConfig",
    "load_config",
    "stringify",
]

DEFAULT_BASE_URL = "https://api.payark.com"
DEFAULT_TIMEOUT_SECONDS = 30.0

_PARAMETER_TO_ENV_KEY = {
    "api_key": "PAYARK_API_KEY",
    "base_url": "PAYARK_BASE_URL",
    "sandbox": "PAYARK_SANDBOX",
    "timeout_seconds": "PAYARK_TIMEOUT_SECONDS",
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _parse_bool(raw: str, field_name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{field_name} must be a boolean, got '{raw}'")


def _parse_timeout(raw: str, field_name: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be a number, got '{raw}'") from exc
    if timeout <= 0:
        raise ConfigError(f"{field_name} must be greater than zero")
    return timeout


@dataclass(frozen=True)
class PayArkConfig:
    """
    Immutable settings threaded into every request.

    ``base_url`` defaults to :data:`DEFAULT_BASE_URL` when left unset.
    """

    api_key: str
    base_url: Optional[str] = None
    sandbox: bool = False
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigError("api_key must be a non-empty string")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "PayArkConfig":
        api_key = values.get("PAYARK_API_KEY")
        if api_key is None:
            raise ConfigError("PAYARK_API_KEY must be provided")

        base_url = values.get("PAYARK_BASE_URL") or None
        sandbox = _parse_bool(values.get("PAYARK_SANDBOX", "false"), "PAYARK_SANDBOX")
        timeout_seconds = _parse_timeout(
            values.get("PAYARK_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)),
            "PAYARK_TIMEOUT_SECONDS",
        )

        return cls(
            api_key=api_key.strip(),
            base_url=base_url,
            sandbox=sandbox,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        sandbox: Optional[bool] = None,
        timeout_seconds: Optional[float] = None,
    ) -> "PayArkConfig":
        explicit = {
            "api_key": api_key,
            "base_url": base_url,
            "sandbox": sandbox,
            "timeout_seconds": timeout_seconds,
        }
        merged_overrides: Dict[str, str] = dict(overrides or {})
        for key, value in explicit.items():
            if value is not None:
                merged_overrides[_PARAMETER_TO_ENV_KEY[key]] = stringify(value)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    sandbox: Optional[bool] = None,
    timeout_seconds: Optional[float] = None,
) -> PayArkConfig:
    """
    Convenience wrapper that mirrors :meth:`PayArkConfig.from_env`.

    Values can come from the process environment, a ``.env`` file, an
    ``overrides`` mapping or keyword arguments; later sources win.
    """
    return PayArkConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        api_key=api_key,
        base_url=base_url,
        sandbox=sandbox,
        timeout_seconds=timeout_seconds,
    )
