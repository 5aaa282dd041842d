"""
Stage-1 Burnout Simulation - Validation Checks

This module implements input and state validation:
- Numeric parsing of command-line arguments
- Positive mass check
- Finite state check

The state checks are only applied when strict mode is enabled in the
SimulationConfig; a default run lets IEEE special values propagate.
"""

import numpy as np

from .mass import compute_mass_after_step
from .state import VehicleState


class ValidationError(Exception):
    """Raised when a physics validation check fails."""
    pass


class InvalidArgumentError(ValueError):
    """Raised when a command-line argument is not a finite number."""
    pass


def parse_float(text: str, name: str) -> float:
    """
    Parse a numeric command-line argument.

    Args:
        text: Raw argument text
        name: Argument name, used in the error message

    Returns:
        Parsed value

    Raises:
        InvalidArgumentError: If the text is not a finite number
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{name}: expected a number, got {text!r}") from None
    if not np.isfinite(value):
        raise InvalidArgumentError(f"{name}: expected a finite number, got {text!r}")
    return value


def check_mass_valid(m: float) -> bool:
    """
    Check that mass is strictly positive.

    Args:
        m: Vehicle mass (kg)

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if not m > 0.0:
        raise ValidationError(f"Non-positive vehicle mass: m = {m:.3f} kg")
    return True


def check_state_finite(state: VehicleState) -> bool:
    """
    Check that every state component is finite.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    values = np.array([state.m, state.v, state.x, state.t])
    if not np.all(np.isfinite(values)):
        raise ValidationError(f"Non-finite state: {state}")
    return True


def validate_state(state: VehicleState, burn_rate: float = 0.0, dt: float = 0.0) -> bool:
    """
    Run all state checks before a step.

    The mass check is applied to the mass remaining after the coming step,
    since that mass is the divisor of the drag term.

    Raises:
        ValidationError: On the first failed check
    """
    check_state_finite(state)
    check_mass_valid(compute_mass_after_step(state.m, burn_rate, dt))
    return True
