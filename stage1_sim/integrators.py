"""
Stage-1 Burnout Simulation - Numerical Integration

This module implements the fixed-step forward-Euler update of the
vertical-ascent state. Within a step the order is fixed:

1. velocity gain from thrust over the trapezoidal mass, then mass decrement
2. altitude gain from the trapezoidal velocity
3. commit altitude and velocity
4. gravity
5. drag, evaluated on the state committed by 1-4

Every quantity is carried in the working precision C.REAL.
"""

import numpy as np

from . import constants as C
from .config import VehicleParameters
from .forces import compute_thrust, compute_drag_force
from .mass import compute_average_mass, compute_mass_after_step
from .state import VehicleState


def step_velocity(state: VehicleState, params: VehicleParameters, dt: float) -> tuple:
    """
    Velocity gained from thrust over one step.

    Acceleration is thrust at the current altitude divided by the mean of
    the start and end masses.

    Returns:
        (velocity_gain, mass_after_step)
    """
    avg_mass = compute_average_mass(state.m, params.burn_rate, dt)
    thrust = compute_thrust(state.x, params.thrust_asl, params.thrust_vac)
    v_gain = (thrust / avg_mass) * C.REAL(dt)
    return v_gain, compute_mass_after_step(state.m, params.burn_rate, dt)


def step_altitude(dt: float, v_0: float, v_1: float) -> float:
    """
    Altitude gained over one step.

    Pass in the velocity at the step's beginning and end.
    """
    avg_v = (C.REAL(v_0) + C.REAL(v_1)) / C.REAL(2.0)
    return avg_v * C.REAL(dt)


def apply_drag(velocity: float, altitude: float, m: float,
               params: VehicleParameters, dt: float) -> float:
    """
    Decelerate by drag over one step, against the direction of motion.

    compute_drag_force returns a magnitude, so the sign of the velocity
    selects the direction. For upward flight this is a plain subtraction.
    """
    velocity = C.REAL(velocity)
    drag = compute_drag_force(altitude, velocity, params.drag_area, params.drag_coeff)
    return velocity - np.sign(velocity) * (drag / C.REAL(m)) * C.REAL(dt)


def euler_step(state: VehicleState, params: VehicleParameters, dt: float = C.DT,
               gravity: float = C.GRAVITY_ACCEL) -> VehicleState:
    """
    Perform a single integration step.

    Args:
        state: Current state
        params: Vehicle parameters
        dt: Time step (s)
        gravity: Gravitational acceleration (m/s^2)

    Returns:
        New state after integration

    Raises:
        ValueError: If dt <= 0
    """
    if dt <= 0:
        raise ValueError(f"Time step dt must be positive, got {dt}")
    dt = C.REAL(dt)

    v_gain, m_new = step_velocity(state, params, dt)
    x_new = state.x + step_altitude(dt, state.v, state.v + v_gain)
    v_new = state.v + v_gain
    v_new -= C.REAL(gravity) * dt
    v_new = apply_drag(v_new, x_new, m_new, params, dt)

    return VehicleState(m=m_new, v=v_new, x=x_new, t=state.t + dt)
