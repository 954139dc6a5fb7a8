"""Public package surface for the linear/exponential slider transforms."""

from .config import InvalidConfiguration, resolve_config
from .curves import limit_bounds
from .models import Bounds, LinearConfig, ResolvedConfig
from .slider import (
    SliderCalculator,
    model_to_step,
    step_to_model,
    use_exponential_slider,
)

__all__ = [
    "Bounds",
    "InvalidConfiguration",
    "LinearConfig",
    "ResolvedConfig",
    "SliderCalculator",
    "limit_bounds",
    "model_to_step",
    "resolve_config",
    "step_to_model",
    "use_exponential_slider",
]
