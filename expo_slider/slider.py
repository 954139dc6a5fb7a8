"""Public entry points: one-shot conversions and a pre-resolved calculator."""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .config import resolve_config
from .curves import model_to_step_internal, step_to_model_internal
from .models import Bounds, LinearConfig, ResolvedConfig


def step_to_model(
    step: float,
    steps: float,
    bounds: Bounds,
    linear: Optional[LinearConfig] = None,
) -> float:
    """Model value for ``step``, resolving the config on every call."""
    return step_to_model_internal(step, resolve_config(steps, bounds, linear))


def model_to_step(
    model: float,
    steps: float,
    bounds: Bounds,
    linear: Optional[LinearConfig] = None,
) -> Union[int, float]:
    """Nearest step for ``model``, resolving the config on every call."""
    return model_to_step_internal(model, resolve_config(steps, bounds, linear))


@dataclass(frozen=True)
class SliderCalculator:
    """Both transforms bound to a config that was resolved once."""

    config: ResolvedConfig

    def step_to_model(self, step: float) -> float:
        return step_to_model_internal(step, self.config)

    def model_to_step(self, model: float) -> Union[int, float]:
        return model_to_step_internal(model, self.config)

    def table(self) -> List[Tuple[int, float]]:
        """Model value for every whole step from 0 to ``steps``."""
        return [
            (step, self.step_to_model(step))
            for step in range(int(self.config.steps) + 1)
        ]


def use_exponential_slider(
    steps: float,
    bounds: Bounds,
    linear: Optional[LinearConfig] = None,
    *,
    strict: bool = False,
) -> SliderCalculator:
    return SliderCalculator(resolve_config(steps, bounds, linear, strict=strict))
