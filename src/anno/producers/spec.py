"""
Producer Spec Parser
======================
Parses `-p` arguments of the form `scheme[:source][?key=value&...]`:

    lines:                               producer only
    debug-lines:/path/to/binary          producer with data source
    debug-lines:/path/to/binary?fn=main  ...and extra parameters
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
from urllib.parse import parse_qsl, urlsplit

from anno.errors import InvalidProducerSpec

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_CONTROL_RE = re.compile(r"[\t\r\n]")


@dataclass(frozen=True)
class ProducerSpec:
    """A parsed producer URI."""

    name: str
    source: str = ""
    params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    raw: str = ""

    def __str__(self) -> str:
        return self.raw or f"{self.name}:{self.source}"


def parse_producer_spec(value: str) -> ProducerSpec:
    """Parse a producer spec string, raising InvalidProducerSpec on bad input.

    The scheme names the producer and is lower-cased as URI schemes are.
    The path component is the producer's data source. Query parameters are
    kept for producers that want them; the last value wins on repeats.
    """
    scheme, sep, _ = value.partition(":")
    if not sep:
        raise InvalidProducerSpec(value, "missing `:` after the producer name")
    if _CONTROL_RE.search(value):
        raise InvalidProducerSpec(value, "tab, carriage return and newline are not allowed")
    if not _SCHEME_RE.match(scheme):
        raise InvalidProducerSpec(
            value, "producer name must start with a letter and use only letters, digits, `+`, `-` or `.`"
        )

    try:
        parts = urlsplit(value)
    except ValueError as e:
        raise InvalidProducerSpec(value, str(e)) from e

    if parts.scheme != scheme.lower():
        raise InvalidProducerSpec(value, "not a structured URI")

    params = dict(parse_qsl(parts.query, keep_blank_values=True))
    return ProducerSpec(
        name=parts.scheme,
        source=parts.path,
        params=MappingProxyType(params),
        raw=value,
    )
