"""
Stage-1 Burnout Simulation - Propellant and mass computations.

All arithmetic is carried out in the working precision C.REAL.
"""

from . import constants as C


def compute_burn_rate(solid_units_per_sec: float, liquid_units_per_sec: float) -> float:
    """
    Convert fuel-unit consumption rates into a propellant mass flow (kg/s).

    Only the liquid-fuel component of LF+O is counted; its unit mass
    already includes the matching oxidizer.
    """
    return (C.REAL(solid_units_per_sec) * C.REAL(C.SOLID_FUEL_UNIT_MASS)
            + C.REAL(liquid_units_per_sec) * C.REAL(C.LIQUID_FUEL_UNIT_MASS))


def compute_mass_after_step(m, burn_rate: float, dt: float):
    """Mass remaining after burning propellant for one step. No floor is applied."""
    return C.REAL(m) - C.REAL(burn_rate) * C.REAL(dt)


def compute_average_mass(m, burn_rate: float, dt: float):
    """
    Trapezoidal mass over one step: mean of the start and end masses.
    """
    return (C.REAL(m) + compute_mass_after_step(m, burn_rate, dt)) / C.REAL(2.0)


def is_propellant_exhausted(m) -> bool:
    """True once the vehicle has no positive mass left to divide by."""
    return m <= 0.0
