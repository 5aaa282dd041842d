"""
Stage-1 Burnout Simulation - Configuration

This module provides two immutable dataclasses for dependency injection:

- VehicleParameters: the static description of the vehicle being flown,
  in SI units.
- SimulationConfig: the fixed model constants of the integrator, so tests
  and callers can vary them without touching module globals.

Optional behaviour defaults to OFF so that a default run reproduces the
unguarded arithmetic of the simple model.
"""

from dataclasses import dataclass, fields

from . import constants as C
from .mass import compute_burn_rate


@dataclass(frozen=True)
class VehicleParameters:
    """
    Static vehicle description (SI units, held as C.REAL scalars).

    Attributes:
        start_mass: Liftoff mass (kg)
        thrust_asl: Sea-level thrust (N)
        thrust_vac: Vacuum thrust (N)
        burn_rate: Propellant mass flow (kg/s)
        drag_area: Frontal reference area (m^2)
        drag_coeff: Drag coefficient (unitless)
        burnout_time: Time until first-stage fuel is exhausted (s)
    """
    start_mass: float
    thrust_asl: float
    thrust_vac: float
    burn_rate: float
    drag_area: float
    drag_coeff: float
    burnout_time: float

    def __post_init__(self):
        """Hold every parameter in the working precision."""
        for f in fields(self):
            object.__setattr__(self, f.name, C.REAL(getattr(self, f.name)))


def create_vehicle_parameters(start_mass_tons: float, thrust_asl_kn: float,
                              thrust_vac_kn: float, solid_per_sec: float,
                              lfo_per_sec: float, burnout_time: float,
                              drag_area: float, drag_coeff: float) -> VehicleParameters:
    """
    Build VehicleParameters from command-line units.

    Args:
        start_mass_tons: Liftoff mass (metric tons)
        thrust_asl_kn: Sea-level thrust (kN)
        thrust_vac_kn: Vacuum thrust (kN)
        solid_per_sec: Solid fuel consumption (fuel units/s)
        lfo_per_sec: Liquid fuel consumption, LF component of LF+O (units/s)
        burnout_time: Time to first burnout (s)
        drag_area: Frontal area (m^2)
        drag_coeff: Drag coefficient (unitless)
    """
    return VehicleParameters(
        start_mass=C.REAL(start_mass_tons) * C.REAL(C.KG_PER_TONNE),
        thrust_asl=C.REAL(thrust_asl_kn) * C.REAL(C.N_PER_KN),
        thrust_vac=C.REAL(thrust_vac_kn) * C.REAL(C.N_PER_KN),
        burn_rate=compute_burn_rate(solid_per_sec, lfo_per_sec),
        drag_area=drag_area,
        drag_coeff=drag_coeff,
        burnout_time=burnout_time,
    )


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for the integrator.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.
    """

    # ── 1. Simulation timing ─────────────────────────────────────────────
    dt: float = C.DT

    # ── 2. Environment ───────────────────────────────────────────────────
    gravity: float = C.GRAVITY_ACCEL
    launch_altitude: float = C.LAUNCH_SITE_ALTITUDE

    # ── 3. Guards ────────────────────────────────────────────────────────
    # Stop with a validation failure instead of dividing by a mass <= 0
    enforce_positive_mass: bool = False

    # ── 4. Misc ──────────────────────────────────────────────────────────
    record_log: bool = True


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(**overrides) -> SimulationConfig:
    """Create a config for tests.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(record_log=True, enforce_positive_mass=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
