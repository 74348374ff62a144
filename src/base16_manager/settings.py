"""Runtime settings for base16-manager."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from base16_manager import __version__
from base16_manager.errors import ConfigError

DEFAULT_REMOTE_URL = "https://github.com/{maintainer}/{name}.git"

_DISABLE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    config_home: Path
    data_dir: Path
    state_dir: Path
    log_dir: Path
    remote_url_template: str = DEFAULT_REMOTE_URL
    telemetry: bool = True
    cli_version: str = __version__

    def remote_url(self, maintainer: str, name: str) -> str:
        return self.remote_url_template.format(maintainer=maintainer, name=name)

    @property
    def telemetry_file(self) -> Path:
        return self.log_dir / "telemetry.jsonl"


def _env_path(env: Mapping[str, str], key: str) -> Path | None:
    value = env.get(key, "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def _default_home_dir(env: Mapping[str, str]) -> Path:
    return _env_path(env, "BASE16_MANAGER_HOME") or Path.home()


def config_file_path(env: Mapping[str, str] | None = None) -> Path:
    env = os.environ if env is None else env
    explicit = _env_path(env, "BASE16_MANAGER_CONFIG")
    if explicit is not None:
        return explicit
    config_home = _env_path(env, "XDG_CONFIG_HOME") or _default_home_dir(env) / ".config"
    return config_home / "base16-manager" / "config.yaml"


def load_config_file(path: Path) -> dict[str, Any]:
    import yaml  # lazy import to keep import cost low

    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text("utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid configuration file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid configuration file {path}: top level must be a mapping")
    remote_url = data.get("remote_url")
    if remote_url is not None and (not isinstance(remote_url, str) or "{maintainer}" not in remote_url or "{name}" not in remote_url):
        raise ConfigError("remote_url must contain {maintainer} and {name} placeholders")
    data_dir = data.get("data_dir")
    if data_dir is not None and not isinstance(data_dir, str):
        raise ConfigError("data_dir must be a string path")
    telemetry = data.get("telemetry")
    if telemetry is not None and not isinstance(telemetry, bool):
        raise ConfigError("telemetry must be true or false")
    return data


def load_settings(env: Mapping[str, str] | None = None) -> RuntimeSettings:
    env = os.environ if env is None else env
    home = _default_home_dir(env)
    config_home = _env_path(env, "XDG_CONFIG_HOME") or home / ".config"
    config = load_config_file(config_file_path(env))

    data_dir = _env_path(env, "BASE16_MANAGER_DATA")
    if data_dir is None and config.get("data_dir"):
        data_dir = Path(config["data_dir"]).expanduser()
    if data_dir is None:
        xdg_data = _env_path(env, "XDG_DATA_HOME") or home / ".local" / "share"
        data_dir = xdg_data / "base16-manager"

    xdg_state = _env_path(env, "XDG_STATE_HOME") or home / ".local" / "state"
    state_dir = xdg_state / "base16-manager"

    telemetry = config.get("telemetry", True)
    if env.get("BASE16_MANAGER_TELEMETRY", "").strip().lower() in _DISABLE_VALUES:
        telemetry = False

    return RuntimeSettings(
        home_dir=home,
        config_home=config_home,
        data_dir=data_dir,
        state_dir=state_dir,
        log_dir=state_dir / "logs",
        remote_url_template=config.get("remote_url") or DEFAULT_REMOTE_URL,
        telemetry=telemetry,
    )
