from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None renders compact JSON
