"""
Stage-1 Burnout Simulation - Atmosphere and Force Computations

This module implements:
- Piecewise-linear temperature and exponential pressure atmosphere
- Thrust interpolated between sea-level and vacuum ratings
- Aerodynamic drag magnitude from ideal-gas density

Temperature, pressure and thrust are computed in the working precision
(C.REAL). The ideal-gas density and the drag product are evaluated in
double precision and rounded back to C.REAL when a force is returned.

All functions accept any real altitude. Nothing is clamped: extreme inputs
produce IEEE inf/NaN through numpy rather than raising.
"""

import numpy as np

from . import constants as C

# Model constants in the working precision
_H_TROPOPAUSE = C.REAL(C.TROPOPAUSE_ALTITUDE)
_H_STRATOPAUSE = C.REAL(C.STRATOPAUSE_ALTITUDE)
_T_SEA_LEVEL = C.REAL(C.T_SEA_LEVEL)
_T_TROPOPAUSE = C.REAL(C.T_TROPOPAUSE)
_T_STRATOPAUSE = C.REAL(C.T_STRATOPAUSE)
_MESOSPHERE_LAPSE = C.REAL(C.MESOSPHERE_COOLING) / C.REAL(C.MESOSPHERE_COOLING_DEPTH)
_P0 = C.REAL(C.ATM_P0)
_SCALE_HEIGHT = C.REAL(C.ATM_SCALE_HEIGHT)


# =============================================================================
# ATMOSPHERE MODEL
# =============================================================================

def temperature_at(altitude: float) -> float:
    """
    Air temperature (K) at the given altitude (m).

    Three linear segments: troposphere cooling 285 -> 205 K up to 11 km,
    stratosphere warming 205 -> 270 K up to 39 km, then mesosphere cooling
    at 50 K per 16 km. The segments meet exactly at the breakpoints.
    """
    h = C.REAL(altitude)
    if h <= _H_TROPOPAUSE:
        return _T_SEA_LEVEL - (h / _H_TROPOPAUSE) * (_T_SEA_LEVEL - _T_TROPOPAUSE)
    elif h <= _H_STRATOPAUSE:
        layer = _H_STRATOPAUSE - _H_TROPOPAUSE
        return _T_TROPOPAUSE + ((h - _H_TROPOPAUSE) / layer) * (_T_STRATOPAUSE - _T_TROPOPAUSE)
    else:
        return _T_STRATOPAUSE - (h - _H_STRATOPAUSE) * _MESOSPHERE_LAPSE


def _pressure_ratio(altitude: float) -> float:
    """exp(-altitude / scale height), exponent taken in double, result in C.REAL."""
    z = -C.REAL(altitude) / _SCALE_HEIGHT
    return C.REAL(np.exp(np.float64(z)))


def pressure_at(altitude: float) -> float:
    """Static pressure (Pa), exponential atmosphere with a 5600 m scale height."""
    return _P0 * _pressure_ratio(altitude)


def atm_fraction_at(altitude: float) -> float:
    """
    Pressure relative to sea level (1.0 at altitude 0).

    Only used to blend sea-level and vacuum thrust.
    """
    return _pressure_ratio(altitude)


def air_density_at(altitude: float) -> float:
    """
    Air density (kg/m^3) from the ideal gas law, rho = P / (R * T).

    Returned in double precision.
    """
    P = np.float64(pressure_at(altitude))
    T = np.float64(temperature_at(altitude))
    return P / (C.R_SPECIFIC_AIR * T)


def compute_atmosphere_properties(altitude: float) -> tuple:
    """
    Compute atmospheric properties at an altitude.

    Args:
        altitude: Altitude above sea level (m)

    Returns:
        (temperature, pressure, density) in K, Pa, kg/m^3
    """
    return temperature_at(altitude), pressure_at(altitude), air_density_at(altitude)


# =============================================================================
# FORCE MODELS
# =============================================================================

def compute_thrust(altitude: float, thrust_asl: float, thrust_vac: float) -> float:
    """
    Engine thrust (N) at altitude.

    Linear blend from the sea-level rating to the vacuum rating, weighted by
    (1 - atm_fraction). This is an approximation, not a nozzle expansion
    model.

    Args:
        altitude: Altitude above sea level (m)
        thrust_asl: Sea-level thrust rating (N)
        thrust_vac: Vacuum thrust rating (N)
    """
    asl = C.REAL(thrust_asl)
    vac = C.REAL(thrust_vac)
    return asl + (vac - asl) * (C.REAL(1.0) - atm_fraction_at(altitude))


def compute_drag_force(altitude: float, velocity: float,
                       reference_area: float, drag_coefficient: float) -> float:
    """
    Aerodynamic drag magnitude (N).

    F_drag = 0.5 * (P / (R * T)) * v^2 * A * Cd

    The result carries no direction; the integrator applies it against the
    current velocity.
    """
    v = np.float64(C.REAL(velocity))
    area = np.float64(C.REAL(reference_area))
    cd = np.float64(C.REAL(drag_coefficient))
    return C.REAL(0.5 * air_density_at(altitude) * v * v * area * cd)


def compute_dynamic_pressure(altitude: float, velocity: float) -> float:
    """Dynamic pressure q = 0.5 * rho * v^2 (Pa)."""
    v = np.float64(C.REAL(velocity))
    return C.REAL(0.5 * air_density_at(altitude) * v * v)
