from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Dict, List, Tuple

from .errors import ConfigError


@dataclass(frozen=True)
class SetupConfig:
    """The five values the whole run is driven by.

    remote_path: directory on the SSH host where Paperless data is stored
    local_mount: mount point inside the container (written to /etc/fstab)
    ssh_key_path: private key inside the container (created if missing)
    """

    remote_user: str = "paperless"
    remote_host: str = "192.168.1.10"
    remote_path: str = "/srv/paperless_data"
    local_mount: str = "/mnt/paperless_data"
    ssh_key_path: str = "/root/.ssh/id_rsa_paperless_share"

    @property
    def public_key_path(self) -> str:
        return f"{self.ssh_key_path}.pub"

    @property
    def remote_login(self) -> str:
        return f"{self.remote_user}@{self.remote_host}"

    def items(self) -> List[Tuple[str, str]]:
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def with_overrides(self, values: Dict[str, str]) -> "SetupConfig":
        unknown = sorted(set(values) - set(field_names()))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        cleaned: Dict[str, str] = {}
        for k, v in values.items():
            if isinstance(v, (dict, list, tuple, set)):
                raise ConfigError(f"Configuration value for {k} must be a plain string")
            # YAML `key:` with no value loads as None; keep it empty so validate() rejects it.
            cleaned[k] = "" if v is None else str(v)
        return replace(self, **cleaned)

    def validate(self) -> "SetupConfig":
        empty = [name for name, value in self.items() if not str(value).strip()]
        if empty:
            raise ConfigError(f"Configuration values must not be empty: {', '.join(empty)}")
        return self


def field_names() -> List[str]:
    return [f.name for f in fields(SetupConfig)]


def load_defaults(path: str, base: SetupConfig | None = None) -> SetupConfig:
    """Read an answers file (YAML mapping of field name -> value).

    The result only replaces the defaults offered at the prompts.
    """

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError("defaults file must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read a defaults file") from e

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping/object")

    return (base or SetupConfig()).with_overrides(raw)
