"""
Stage-1 Burnout Simulation - Vehicle State

This module defines the state dataclass advanced by the integrator. Each run
builds its own state, so no simulation state lives at module level.
"""

from dataclasses import dataclass
from typing import Optional

from . import constants as C
from .config import VehicleParameters, SimulationConfig, create_default_config


@dataclass
class VehicleState:
    """
    Vertical-ascent state vector.

    Fields are held as numpy scalars of the working precision (C.REAL), so
    a division by a vanishing mass yields inf/NaN rather than a
    ZeroDivisionError.

    Attributes:
        m: Vehicle mass (kg)
        v: Vertical velocity, positive up (m/s)
        x: Altitude above sea level (m)
        t: Simulation time (s)
    """

    m: float = 0.0
    v: float = 0.0
    x: float = 0.0
    t: float = 0.0

    def __post_init__(self):
        """Ensure scalars are in the working precision."""
        for attr in ['m', 'v', 'x', 't']:
            setattr(self, attr, C.REAL(getattr(self, attr)))

    def copy(self) -> 'VehicleState':
        """Create a copy of the state."""
        return VehicleState(m=self.m, v=self.v, x=self.x, t=self.t)

    @property
    def altitude(self) -> float:
        """Altitude above sea level (m)."""
        return self.x

    @property
    def vertical_speed(self) -> float:
        """Signed vertical velocity (m/s)."""
        return self.v

    def __str__(self) -> str:
        """Human-readable state summary."""
        return (
            f"VehicleState(t={self.t:.3f}s, "
            f"alt={self.x:.1f}m, "
            f"v={self.v:.2f}m/s, "
            f"m={self.m:.1f}kg)"
        )


def create_initial_state(params: VehicleParameters,
                         config: Optional[SimulationConfig] = None) -> VehicleState:
    """
    Create the launch state for a run.

    Args:
        params: Vehicle parameters (start mass is taken from here)
        config: Simulation config (launch altitude is taken from here)

    Returns:
        Fresh VehicleState at rest on the pad at t=0.
    """
    if config is None:
        config = create_default_config()
    return VehicleState(
        m=params.start_mass,
        v=C.INITIAL_VELOCITY,
        x=config.launch_altitude,
        t=0.0
    )
