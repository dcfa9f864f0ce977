from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Pending:
    pass


@dataclass(frozen=True)
class Succeeded:
    value: float


@dataclass(frozen=True)
class Failed:
    message: str


PredictionOutcome = Union[Idle, Pending, Succeeded, Failed]
