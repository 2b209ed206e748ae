"""Runtime settings for the netconfig tool.

Settings come from an optional YAML file, overridden by environment:
- NETCONFIG_CONFIG: Path to YAML file (default: /etc/netconfig.yaml)
- NETCONFIG_DEFAULT_IFACE: Interface used when a command omits one (default: eth0)
- NETCONFIG_RETRIES: Bus connection attempts (default: 3)
- NETCONFIG_TIMEOUT: Seconds to wait for a service reply (default: 10)

Example file:

```yaml
default_interface: eth1
connect_retries: 5
timeout: 20
```
"""
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml

from ..errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("/etc/netconfig.yaml")

DEFAULT_INTERFACE = "eth0"
NETWORK_SERVICE = "xyz.openbmc_project.Network"
SYSLOG_SERVICE = "xyz.openbmc_project.Syslog.Config"


@dataclass
class Settings:
    """Tool settings; none of them affect argument validation."""
    default_interface: str = DEFAULT_INTERFACE
    network_service: str = NETWORK_SERVICE
    syslog_service: str = SYSLOG_SERVICE
    connect_retries: int = 3
    timeout: float = 10.0

    @classmethod
    def from_file(cls, path: Path) -> "Settings":
        """Load settings from a YAML file; missing file gives defaults."""
        if not path.exists():
            logger.debug(f"Settings file not found: {path}")
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse settings file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown settings in {path}: {sorted(unknown)}")

        values = {}
        for field in fields(cls):
            if field.name not in data:
                continue
            value = data[field.name]
            if field.type is float and type(value) is int:
                value = float(value)
            if type(value) is not field.type:
                raise ConfigError(
                    f"Invalid value for {field.name} in {path}: {value!r}, "
                    f"expected {field.type.__name__}"
                )
            values[field.name] = value

        return cls(**values)

    def with_env(self) -> "Settings":
        """Return a copy with environment overrides applied."""
        overrides: dict = {}

        iface = os.environ.get("NETCONFIG_DEFAULT_IFACE")
        if iface:
            overrides["default_interface"] = iface

        try:
            retries = os.environ.get("NETCONFIG_RETRIES")
            if retries:
                overrides["connect_retries"] = int(retries)

            timeout = os.environ.get("NETCONFIG_TIMEOUT")
            if timeout:
                overrides["timeout"] = float(timeout)
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting in environment: {e}") from e

        return replace(self, **overrides)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from file and environment."""
    if path is None:
        path = Path(os.environ.get("NETCONFIG_CONFIG", str(DEFAULT_CONFIG_PATH)))
    settings = Settings.from_file(path).with_env()
    logger.debug(f"Settings: {settings}")
    return settings
