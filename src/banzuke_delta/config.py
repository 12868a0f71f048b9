from __future__ import annotations

from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from banzuke_delta.domain.errors import ConfigurationError
from banzuke_delta.ingest.sumo_api_source import DEFAULT_BASE_URL

_DEFAULTS: dict[str, object] = {
    "api": {
        "base_url": DEFAULT_BASE_URL,
        "timeout": 30,
    },
    "presentation": {
        "month_names": "",
    },
}


@dataclass(frozen=True)
class ApiSettings:
    base_url: str
    timeout: float


def create_config(
    yaml_path: str = "banzuke.yaml",
    env_prefix: str = "BANZUKE",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.
    Environment keys use ``__`` as the separator, e.g. ``BANZUKE__API__TIMEOUT``.
    """
    if defaults is None:
        defaults = _DEFAULTS
    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def load_api_settings(cfg: ConfigurationSet | None = None) -> ApiSettings:
    if cfg is None:
        cfg = create_config()
    raw = cfg["api.timeout"]
    try:
        timeout = float(str(raw))
    except ValueError as e:
        raise ConfigurationError(f"api.timeout must be a number, got {raw!r}") from e
    if timeout <= 0:
        raise ConfigurationError(f"api.timeout must be positive, got {timeout}")
    return ApiSettings(base_url=str(cfg["api.base_url"]), timeout=timeout)


def load_month_names(cfg: ConfigurationSet | None = None) -> tuple[str, ...] | None:
    """Twelve month names for titles, January first; None keeps English.

    Accepts a YAML list or a comma separated string (for env vars).
    """
    if cfg is None:
        cfg = create_config()
    raw = cfg.get("presentation.month_names") or ""
    names = [n.strip() for n in raw.split(",")] if isinstance(raw, str) else [str(n).strip() for n in raw]
    names = [n for n in names if n]
    if not names:
        return None
    if len(names) != 12:
        raise ConfigurationError(f"presentation.month_names needs 12 entries, got {len(names)}")
    return tuple(names)
