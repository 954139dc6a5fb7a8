from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class Bounds:
    minimum: float
    maximum: float


@dataclass(frozen=True)
class LinearConfig:
    max_linear: float = 0.0
    linear_percent: float = 0.0  # 0-100 share of steps spent in the linear region


@dataclass(frozen=True)
class ResolvedConfig:
    """Boundaries derived once from steps, bounds and the linear config."""

    steps: float
    linear_absolute: float
    linear_percent: float  # normalised to 0-1
    minimum: float
    maximum: float
    value_range: float

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
