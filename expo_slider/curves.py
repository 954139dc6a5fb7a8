"""Piecewise linear / quadratic curves behind the slider transforms."""

import math
from typing import Protocol, Union

from .models import Bounds, ResolvedConfig


class SupportsBounds(Protocol):
    """Anything carrying an inclusive ``minimum``/``maximum`` pair."""

    minimum: float
    maximum: float


def _ratio(numerator: float, denominator: float) -> float:
    """Division that degrades to 0 when the span it measures against is empty."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _not_negative(value: float) -> float:
    # NaN passes through untouched
    return 0.0 if value < 0 else value


def round_half_up(value: float) -> Union[int, float]:
    """Nearest integer with ties going up, so 0.5 -> 1 and 2.5 -> 3.

    NaN and infinities come back unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def limit_bounds(value: float, bounds: SupportsBounds) -> float:
    """Clamp ``value`` into ``[bounds.minimum, bounds.maximum]``."""
    return min(max(value, bounds.minimum), bounds.maximum)


def exp_range(value: float, minimum: float, maximum: float) -> float:
    """Square-law easing of ``value`` across ``[minimum, maximum]``."""
    span = maximum - minimum
    ratio = _ratio(value, span)
    return ratio * ratio * span + minimum


def root_range(value: float, minimum: float, maximum: float) -> float:
    """Inverse of :func:`exp_range`; negative radicands from rounding count as 0."""
    span = maximum - minimum
    radicand = _ratio(_not_negative(value - minimum), span)
    return math.sqrt(_not_negative(radicand)) * span


def step_to_model_internal(step: float, config: ResolvedConfig) -> float:
    """Map a slider step onto the model range of an already resolved config."""
    steps = config.steps
    linear_percent = config.linear_percent
    linear_absolute = config.linear_absolute

    step = limit_bounds(step, Bounds(0, steps))
    percent = _ratio(step, steps)

    # Linear cap covers the whole range, nothing left for the exponential part.
    if linear_absolute >= config.maximum:
        return percent * config.value_range + config.minimum

    if percent <= linear_percent:
        return _ratio(percent, linear_percent) * linear_absolute + config.minimum

    linear = linear_absolute if linear_percent > 0 else 0.0
    range_exponential = config.value_range - linear_absolute

    remainder = step - steps * linear_percent
    percent_of_max = _ratio(remainder, steps * (1 - linear_percent))
    exp_value = percent_of_max * range_exponential

    return linear + exp_range(exp_value, 0.0, range_exponential) + config.minimum


def model_to_step_internal(model: float, config: ResolvedConfig) -> Union[int, float]:
    """Map a model value back onto the nearest slider step (NaN stays NaN)."""
    steps = config.steps
    linear_percent = config.linear_percent
    linear_absolute = config.linear_absolute

    model = limit_bounds(model, config)
    actual_value = max(model - config.minimum, 0)

    if linear_absolute >= config.maximum:
        return round_half_up(_ratio(actual_value, config.value_range) * steps)

    if linear_absolute > 0 and actual_value <= linear_absolute:
        return round_half_up(actual_value / linear_absolute * linear_percent * steps)

    remainder_value = actual_value - linear_absolute
    range_exponential = config.value_range - linear_absolute
    percent_of_max = _ratio(
        root_range(remainder_value, 0.0, range_exponential), range_exponential
    )

    return round_half_up(
        steps * linear_percent + percent_of_max * steps * (1 - linear_percent)
    )
