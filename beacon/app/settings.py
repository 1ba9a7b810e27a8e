from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from ..domain.hostname import is_valid_server_name
from ..utils.logging import parse_level

_log = logging.getLogger(__name__)

STORAGE_ROOT_ENV = "BEACON_STORAGE_ROOT"
KNOWN_SERVERS_ENV = "BEACON_KNOWN_SERVERS"
LOG_LEVEL_ENV = "BEACON_LOG_LEVEL"
DEBUG_ENV = "BEACON_DEBUG"


@dataclass(frozen=True)
class AppSettings:
    """Typed runtime settings for the project type dialog."""

    storage_root: str = "."
    known_servers: Tuple[str, ...] = field(default_factory=tuple)
    debug_logging: bool = False
    log_level: Optional[int] = None
    """Explicit level; overrides ``debug_logging`` when set."""

    @property
    def effective_log_level(self) -> int:
        if self.log_level is not None:
            return self.log_level
        return logging.DEBUG if self.debug_logging else logging.INFO


def _truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _parse_servers(raw: Optional[str]) -> Tuple[str, ...]:
    servers = []
    for item in (raw or "").split(","):
        name = item.strip()
        if not name:
            continue
        if not is_valid_server_name(name):
            _log.warning("Ignoring invalid server name %r in %s", name, KNOWN_SERVERS_ENV)
            continue
        if name not in servers:
            servers.append(name)
    return tuple(servers)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    """Build settings from environment variables (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    raw_level = env.get(LOG_LEVEL_ENV)
    log_level = parse_level(raw_level)
    if raw_level and log_level is None:
        _log.warning("Ignoring unknown log level %r in %s", raw_level, LOG_LEVEL_ENV)
    return AppSettings(
        storage_root=env.get(STORAGE_ROOT_ENV) or ".",
        known_servers=_parse_servers(env.get(KNOWN_SERVERS_ENV)),
        debug_logging=_truthy(env.get(DEBUG_ENV)),
        log_level=log_level,
    )


__all__ = ["AppSettings", "load_settings"]
