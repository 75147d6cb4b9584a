from __future__ import annotations

import ipaddress
import os
import stat
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator

from orbit_core.models import RuleThresholds

DEFAULT_DATA_DIR = Path.home() / ".aiorbit"
DEFAULT_CONFIG_PATH = DEFAULT_DATA_DIR / "config.toml"
DEFAULT_DATA_PATH = DEFAULT_DATA_DIR / "db.json"


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)
    _config_dir: Path = PrivateAttr(default=DEFAULT_DATA_DIR)

    data_path: str = str(DEFAULT_DATA_PATH)
    web_host: str = "127.0.0.1"
    web_port: int = Field(default=8787, ge=1, le=65535)
    dashboard_insight_limit: int = Field(default=4, ge=1, le=50)
    dev_enable_docs: bool = False
    thresholds: RuleThresholds = Field(default_factory=RuleThresholds)

    @field_validator("web_host")
    @classmethod
    def validate_localhost_only(cls, value: str) -> str:
        host = value.strip()
        if host == "localhost":
            return host
        try:
            ip = ipaddress.ip_address(host)
        except ValueError as exc:
            raise ValueError("web_host must be localhost or a loopback IP") from exc
        if not ip.is_loopback:
            raise ValueError("web_host must be a loopback address")
        return host

    @field_validator("thresholds", mode="before")
    @classmethod
    def parse_thresholds(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return RuleThresholds.model_validate(value)
        return value

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def resolved_data_path(self) -> Path:
        path = Path(self.data_path).expanduser()
        if not path.is_absolute():
            path = self._config_dir / path
        return path.resolve(strict=False)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"invalid boolean: {raw}")


def _env_overrides() -> dict[str, Any]:
    mapping: dict[str, tuple[str, str]] = {
        "AIORBIT_DATA_PATH": ("data_path", "str"),
        "AIORBIT_HOST": ("web_host", "str"),
        "AIORBIT_PORT": ("web_port", "int"),
        "AIORBIT_INSIGHT_LIMIT": ("dashboard_insight_limit", "int"),
        "AIORBIT_DEV_ENABLE_DOCS": ("dev_enable_docs", "bool"),
    }
    out: dict[str, Any] = {}
    for env_name, (field_name, kind) in mapping.items():
        raw = os.getenv(env_name)
        if raw is None:
            continue
        if kind == "int":
            out[field_name] = int(raw)
        elif kind == "bool":
            out[field_name] = _parse_bool(raw)
        else:
            out[field_name] = raw
    return out


def _threshold_overrides(parsed: dict[str, Any]) -> None:
    raw = os.getenv("AIORBIT_HIGH_SPEND_THRESHOLD")
    if raw is None:
        return
    section = dict(parsed.get("thresholds") or {})
    section["high_spend"] = float(raw)
    parsed["thresholds"] = section


def secure_path(path: Path, mode: int) -> None:
    path.chmod(mode)
    actual = stat.S_IMODE(path.stat().st_mode)
    if actual != mode:
        raise PermissionError(f"failed to enforce permissions {oct(mode)} on {path}")


def default_config_toml() -> str:
    return """data_path = \"db.json\"
web_host = \"127.0.0.1\"
web_port = 8787
dashboard_insight_limit = 4
dev_enable_docs = false

[thresholds]
high_spend = 100.0
overlap_min_tools = 3
stuck_progress_below = 50
pending_min_decisions = 3
negative_min_decisions = 2
correlation_min_decisions = 3
"""


def ensure_app_paths(config_path: Path = DEFAULT_CONFIG_PATH) -> None:
    config_dir = config_path.expanduser().resolve(strict=False).parent
    if config_dir.exists() and config_dir.is_symlink():
        raise ValueError(f"refusing symlinked config directory: {config_dir}")
    config_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
    secure_path(config_dir, 0o700)

    if config_path.exists() and config_path.is_symlink():
        raise ValueError(f"refusing symlinked config file: {config_path}")
    if not config_path.exists():
        config_path.write_text(default_config_toml(), encoding="utf-8")
    secure_path(config_path, 0o600)


def load_config(config_path: Path | None = None) -> AppConfig:
    path = (config_path or DEFAULT_CONFIG_PATH).expanduser().resolve(strict=False)
    ensure_app_paths(path)
    parsed: dict[str, Any]
    try:
        with path.open("rb") as handle:
            parsed = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config at {path}: {exc}") from exc
    parsed.update(_env_overrides())
    try:
        _threshold_overrides(parsed)
        config = AppConfig.model_validate(parsed)
    except (ValidationError, ValueError) as exc:
        raise ValueError(f"invalid config at {path}: {exc}") from exc
    config._config_dir = path.parent
    return config
