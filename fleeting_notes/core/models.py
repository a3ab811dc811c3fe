from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Note:
    filename: str
    content: str
    created_at: int | None = None
    updated_at: int | None = None
