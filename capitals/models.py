from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


# === Domain objects used by the handler ===


@dataclass(frozen=True)
class CapitalQuery:
    state: Optional[str] = None

    @classmethod
    def from_params(cls, state: Optional[str]) -> CapitalQuery:
        # an empty ``?state=`` is treated the same as no parameter at all
        return cls(state=state or None)


class LookupKind(str, Enum):
    FOUND = "found"
    UNKNOWN = "unknown"
    ALL = "all"


@dataclass(frozen=True)
class LookupOutcome:
    kind: LookupKind
    state: Optional[str] = None
    payload: Optional[Any] = None


# === API Schemas ===


class CapitalOut(BaseModel):
    state: str
    capital: str


class Health(BaseModel):
    status: str = "ok"
