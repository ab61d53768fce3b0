from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.logging import env_forces_debug

_ENV_KEYS: Dict[str, str] = {
    "IACC_API_BASE_URL": "api_base_url",
    "IACC_API_KEY": "api_key",
    "IACC_REQUEST_TIMEOUT_S": "request_timeout_s",
    "IACC_HTTP_RETRIES": "http_retries",
    "IACC_CACHE_DIR": "cache_dir",
    "IACC_USE_MOCK_API": "use_mock_api",
    "IACC_PREMIUM": "is_premium",
}


@dataclass
class SettingsConfig:
    """Typed runtime settings for the list client."""

    api_base_url: str = ""
    api_key: str = ""
    request_timeout_s: int = 10
    http_retries: int = 0
    cache_dir: str = "."
    use_mock_api: bool = True
    is_premium: bool = False
    debug_logging: bool = False


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig(debug_logging=env_forces_debug())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsVM":
        """Build settings from ``IACC_*`` environment variables."""
        env = os.environ if environ is None else environ
        vm = cls()
        payload = {field: env[var] for var, field in _ENV_KEYS.items() if env.get(var)}
        if payload:
            vm.apply_dict(payload)
        return vm

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def api_base_url(self) -> str:
        return self.config.api_base_url

    @property
    def use_mock_api(self) -> bool:
        return self.config.use_mock_api

    @property
    def is_premium(self) -> bool:
        return self.config.is_premium

    @property
    def cache_dir(self) -> str:
        return self.config.cache_dir

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    # ------------------------------------------------------------------
    def is_valid(self) -> bool:
        if not self.config.use_mock_api and not self.config.api_base_url:
            return False
        if self.config.request_timeout_s <= 0 or self.config.http_retries < 0:
            return False
        return True

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted or environment settings to the view-model."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        unknown = set(payload.keys()) - set(SettingsConfig.__annotations__.keys())
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {
            key: self._coerce_config_value(key, payload[key])
            for key in SettingsConfig.__annotations__.keys()
            if key in payload
        }
        if updates:
            self.config = replace(self.config, **updates)

    def to_dict(self) -> dict:
        return asdict(self.config)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key in {"api_base_url", "api_key"}:
            return self._coerce_optional_str(raw)
        if key == "cache_dir":
            return self._coerce_dir(raw)
        if key == "request_timeout_s":
            return self._coerce_int(key, raw, allow_negative=False)
        if key == "http_retries":
            return self._coerce_int(key, raw, allow_negative=False)
        if key in {"use_mock_api", "is_premium", "debug_logging"}:
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_dir(value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("cache_dir must be a string path.")
        return value.strip() or "."

    @staticmethod
    def _coerce_optional_str(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, allow_negative: bool = True) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if not allow_negative and coerced < 0:
            raise ValueError(f"{name} must be non-negative.")
        return coerced


__all__ = ["SettingsConfig", "SettingsVM"]
