"""
Optional `kind` / `schema_version` fields for CLI JSON payloads.

Every payload carries a schema tag of the form `snailfish-<kind>.v<major>`
(e.g. `snailfish-homework.v1`). When SNAILFISH_ADD_SCHEMA_FIELDS is set the
tag is unpacked into two flat fields:

  kind            "homework", "reduce", ...
  schema_version  "<major>.0.0", or SNAILFISH_SCHEMA_VERSION if set

Off by default, so the documented payloads stay unchanged. Keys already
present in the payload are never overwritten.
"""

from __future__ import annotations

import os
import re
from typing import Any, Dict, Mapping, Tuple

ENV_ENABLE = "SNAILFISH_ADD_SCHEMA_FIELDS"
ENV_VERSION = "SNAILFISH_SCHEMA_VERSION"

_TAG = re.compile(r"^snailfish-(?P<kind>[a-z]+)\.v(?P<major>[0-9]+)$")
_OFF = {"", "0", "false", "no", "off"}


def parse_schema_tag(tag: str) -> Tuple[str, int]:
    """`snailfish-reduce.v1` -> ("reduce", 1). ValueError on anything else."""
    m = _TAG.match(tag)
    if m is None:
        raise ValueError(f"not a snailfish schema tag: {tag!r}")
    return m.group("kind"), int(m.group("major"))


def _enabled() -> bool:
    return os.getenv(ENV_ENABLE, "").strip().lower() not in _OFF


def maybe_add_schema_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(payload)
    if not _enabled():
        return out
    kind, major = parse_schema_tag(out["schema"])
    version = os.getenv(ENV_VERSION, "").strip() or f"{major}.0.0"
    out.setdefault("kind", kind)
    out.setdefault("schema_version", version)
    return out
