from __future__ import annotations

"""Server-name validation for the server-assisted project type.

A server name is accepted when it is ``localhost`` or a ``host[:port]`` pair
whose host is a registrable domain (or a name beneath one) according to the
public suffix list. IP literals and bare public suffixes are rejected; local
network deployments have to use ``localhost`` or a public DNS name.
"""

import ipaddress
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from publicsuffixlist import PublicSuffixList

LOCALHOST = "localhost"

_MAX_DOMAIN_LENGTH = 253
_MAX_LABELS = 127
_MAX_LABEL_LENGTH = 63
_LABEL_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
_PORT_PATTERN = re.compile(r"[0-9]{1,5}")


@dataclass(frozen=True)
class HostAndPort:
    host: str
    port: Optional[int] = None


@lru_cache(maxsize=1)
def _suffix_list() -> PublicSuffixList:
    # Unknown TLDs are not treated as public suffixes.
    return PublicSuffixList(accept_unknown=False)


def parse_host_and_port(text: str) -> HostAndPort:
    """Split ``host[:port]`` into its parts.

    Bracketed IPv6 (``[::1]:80``) is accepted syntactically. A string with
    several colons and no brackets is taken as a bare host. A trailing colon
    without digits means no port.

    Raises:
        ValueError: On an empty host, unbalanced brackets, or a malformed port.
    """
    if text is None:
        raise ValueError("Host text is required.")
    port_text: Optional[str] = None
    if text.startswith("["):
        close = text.find("]")
        if close < 0:
            raise ValueError(f"Bracketed host is not closed: {text!r}")
        host = text[1:close]
        rest = text[close + 1 :]
        if rest:
            if not rest.startswith(":"):
                raise ValueError(f"Only a port may follow a bracketed host: {text!r}")
            port_text = rest[1:]
    elif text.count(":") == 1:
        host, port_text = text.split(":", 1)
    else:
        host = text

    if not host:
        raise ValueError(f"Host is empty: {text!r}")

    port: Optional[int] = None
    if port_text:
        if not _PORT_PATTERN.fullmatch(port_text):
            raise ValueError(f"Port must be numeric: {port_text!r}")
        port = int(port_text)
        if port > 65535:
            raise ValueError(f"Port out of range: {port}")
    return HostAndPort(host=host, port=port)


def _to_ascii(host: str) -> str:
    if host.isascii():
        return host
    return host.encode("idna").decode("ascii")


def is_valid_domain(host: str) -> bool:
    """Return True if ``host`` is syntactically a domain name (not an IP literal)."""
    try:
        name = _to_ascii(host)
    except UnicodeError:
        return False
    if name.endswith("."):
        name = name[:-1]
    if not name or len(name) > _MAX_DOMAIN_LENGTH:
        return False
    labels = name.split(".")
    if len(labels) > _MAX_LABELS:
        return False
    for index, label in enumerate(labels):
        if not label or len(label) > _MAX_LABEL_LENGTH:
            return False
        if not _LABEL_PATTERN.fullmatch(label):
            return False
        if label.startswith("-") or label.endswith("-"):
            return False
        if index == len(labels) - 1 and label[0].isdigit():
            return False
    return True


def is_under_public_suffix(host: str) -> bool:
    """Return True if ``host`` is a registrable domain or a subdomain of one."""
    name = _to_ascii(host).rstrip(".").lower()
    try:
        ipaddress.ip_address(name)
    except ValueError:
        pass
    else:
        return False
    return _suffix_list().privatesuffix(name) is not None


def is_valid_server_name(candidate: Optional[str]) -> bool:
    """Return True if ``candidate`` may be used as a coordination server name."""
    if candidate is None:
        return False
    if candidate == LOCALHOST:
        return True
    try:
        host = parse_host_and_port(candidate).host
        return is_valid_domain(host) and is_under_public_suffix(host)
    except ValueError:
        return False


__all__ = [
    "HostAndPort",
    "LOCALHOST",
    "is_under_public_suffix",
    "is_valid_domain",
    "is_valid_server_name",
    "parse_host_and_port",
]
