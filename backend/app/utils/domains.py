"""
Domain normalization helpers shared by discovery and pricing.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlsplit

from app.core.exceptions import InvalidDomainError

_WWW_PREFIX = "www."
_HOSTNAME_MAX_LENGTH = 253
_LABEL_RE = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")


def _with_scheme(value: str) -> str:
    if "://" in value:
        return value
    return f"https://{value}"


def _strip_www(host: str) -> str:
    if host.startswith(_WWW_PREFIX):
        return host[len(_WWW_PREFIX):]
    return host


def _is_valid_hostname(host: str) -> bool:
    if not host or len(host) > _HOSTNAME_MAX_LENGTH:
        return False
    labels = host.split(".")
    if len(labels) < 2:
        return False
    return all(_LABEL_RE.match(label) for label in labels)


def normalize_domain(value: str) -> str:
    """
    Reduce a URL or bare domain to its canonical form.

    The canonical form is the lower-cased hostname without scheme, path or a
    leading "www." (only one is stripped).

    Raises:
        InvalidDomainError: if no valid hostname can be parsed from ``value``.
    """
    if value is None or not str(value).strip():
        raise InvalidDomainError(str(value), "empty value")

    raw = str(value).strip()
    try:
        parsed = urlsplit(_with_scheme(raw))
        host = parsed.hostname
        # accessing port validates it
        parsed.port
    except ValueError as exc:
        raise InvalidDomainError(raw, str(exc)) from exc

    if not host:
        raise InvalidDomainError(raw, "missing host")

    host = _strip_www(host.rstrip("."))
    if not _is_valid_hostname(host):
        raise InvalidDomainError(raw, "not a valid hostname")
    return host


def extract_hostname(url: str) -> Optional[str]:
    """
    Lenient hostname extraction for links coming back from search results.

    No syntactic validation is applied; returns None when no host is present.
    """
    if not url or not url.strip():
        return None
    try:
        host = urlsplit(_with_scheme(url.strip())).hostname
    except ValueError:
        return None
    if not host:
        return None
    return _strip_www(host.lower()) or None


def is_same_business(candidate: str, domain: str) -> bool:
    """True when candidate and domain are equal or one is a subdomain of the other"""
    if not candidate or not domain:
        return False
    candidate = candidate.lower()
    domain = domain.lower()
    return (
        candidate == domain
        or candidate.endswith(f".{domain}")
        or domain.endswith(f".{candidate}")
    )
