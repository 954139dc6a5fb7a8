"""Resolve raw slider parameters into the boundaries the curves work from."""

import logging
import math
from typing import Optional

from .curves import round_half_up
from .models import Bounds, LinearConfig, ResolvedConfig

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised by strict resolution when the slider parameters make no sense."""


def _validate(steps: float, bounds: Bounds, linear: LinearConfig) -> None:
    values = {
        "steps": steps,
        "bounds.minimum": bounds.minimum,
        "bounds.maximum": bounds.maximum,
        "max_linear": linear.max_linear,
        "linear_percent": linear.linear_percent,
    }
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidConfiguration(f"{name} must be finite, received {value!r}")

    if steps <= 0:
        raise InvalidConfiguration(f"steps must be positive, received {steps!r}")
    if bounds.maximum < bounds.minimum:
        raise InvalidConfiguration(
            f"bounds.maximum ({bounds.maximum!r}) is below bounds.minimum ({bounds.minimum!r})"
        )
    if not 0 <= linear.linear_percent <= 100:
        raise InvalidConfiguration(
            f"linear_percent must lie within 0-100, received {linear.linear_percent!r}"
        )
    if linear.max_linear < 0:
        raise InvalidConfiguration(
            f"max_linear cannot be negative, received {linear.max_linear!r}"
        )


def resolve_config(
    steps: float,
    bounds: Bounds,
    linear: Optional[LinearConfig] = None,
    *,
    strict: bool = False,
) -> ResolvedConfig:
    """Derive the linear boundary, effective maximum and range for a slider.

    The linear boundary is capped at the share of ``bounds.maximum`` implied by
    the linear percentage. A linear percentage of exactly 100 makes the linear
    cap the effective maximum, leaving no exponential region at all.

    With ``strict`` set, malformed parameters raise :class:`InvalidConfiguration`
    instead of producing a degenerate config.
    """
    if linear is None:
        linear = LinearConfig()
    if strict:
        _validate(steps, bounds, linear)

    linear_percent = linear.linear_percent / 100
    linear_absolute = min(
        linear.max_linear, round_half_up(bounds.maximum * linear_percent)
    )
    maximum = linear.max_linear if linear.linear_percent == 100 else bounds.maximum

    config = ResolvedConfig(
        steps=steps,
        linear_absolute=linear_absolute,
        linear_percent=linear_percent,
        minimum=bounds.minimum,
        maximum=maximum,
        value_range=maximum - bounds.minimum,
    )
    logger.debug("Resolved slider config: %s", config)
    if steps == 0 or config.value_range <= 0:
        logger.warning(
            "Degenerate slider config (steps=%s, range=%s); transforms collapse to the minimum",
            steps,
            config.value_range,
        )
    return config
