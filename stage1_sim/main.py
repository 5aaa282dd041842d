"""
Stage-1 Burnout Simulation - Main Entry Point

This module implements the main simulation loop with:
- Fresh per-run state (no module-level simulation state)
- Pre-test termination at the burnout time
- Data logging
- Logging framework for diagnostics
"""

import csv
import logging
import os
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from . import constants as C
from .config import VehicleParameters, SimulationConfig, create_default_config
from .forces import (
    compute_thrust, compute_drag_force, compute_dynamic_pressure,
    compute_atmosphere_properties,
)
from .integrators import euler_step
from .mass import is_propellant_exhausted
from .state import VehicleState, create_initial_state
from .validation import validate_state, ValidationError

# Configure module logger
logger = logging.getLogger(__name__)

REASON_BURNOUT = "Burnout time reached"


class IntegratorPhase(Enum):
    RUNNING = auto()
    DONE = auto()


@dataclass
class SimulationLog:
    """Container for logged simulation data."""
    time: List[float] = field(default_factory=list)
    altitude: List[float] = field(default_factory=list)          # m
    velocity: List[float] = field(default_factory=list)          # m/s
    mass: List[float] = field(default_factory=list)              # kg
    thrust: List[float] = field(default_factory=list)            # N
    drag: List[float] = field(default_factory=list)              # N
    dynamic_pressure: List[float] = field(default_factory=list)  # Pa
    temperature: List[float] = field(default_factory=list)       # K
    pressure: List[float] = field(default_factory=list)          # Pa
    density: List[float] = field(default_factory=list)           # kg/m^3

    def append(self, state: VehicleState, params: VehicleParameters):
        """Log data for the given state."""
        self.time.append(float(state.t))
        self.altitude.append(float(state.x))
        self.velocity.append(float(state.v))
        self.mass.append(float(state.m))
        self.thrust.append(float(compute_thrust(state.x, params.thrust_asl, params.thrust_vac)))
        self.drag.append(float(compute_drag_force(state.x, state.v,
                                                  params.drag_area, params.drag_coeff)))
        self.dynamic_pressure.append(float(compute_dynamic_pressure(state.x, state.v)))
        T, P, rho = compute_atmosphere_properties(state.x)
        self.temperature.append(float(T))
        self.pressure.append(float(P))
        self.density.append(float(rho))

    def __len__(self) -> int:
        return len(self.time)

    def to_csv(self, filename: str):
        """Write logged data to CSV for offline analysis."""
        os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
        header = [
            'time', 'altitude_m', 'velocity_mps', 'mass_kg',
            'thrust_N', 'drag_N', 'dynamic_pressure_Pa',
            'temperature_K', 'pressure_Pa', 'density_kgm3',
        ]

        with open(filename, 'w', newline='') as fh:
            writer = csv.writer(fh)
            writer.writerow(header)
            for i in range(len(self.time)):
                writer.writerow([
                    self.time[i], self.altitude[i], self.velocity[i], self.mass[i],
                    self.thrust[i], self.drag[i], self.dynamic_pressure[i],
                    self.temperature[i], self.pressure[i], self.density[i],
                ])


def check_termination(state: VehicleState, burnout_time: float) -> tuple:
    """
    Check if the burn is over.

    Evaluated before every step, so a burnout time of zero performs no step
    and any positive burnout time performs at least one. The clock is
    accumulated in the working precision, so a whole-second burn can take
    one step more than burnout_time / dt.

    Returns:
        (phase, reason) tuple
    """
    if state.t < C.REAL(burnout_time):
        return IntegratorPhase.RUNNING, None
    return IntegratorPhase.DONE, REASON_BURNOUT


def run_simulation(params: VehicleParameters, config: Optional[SimulationConfig] = None,
                   initial_state: Optional[VehicleState] = None) -> tuple:
    """
    Fly the vehicle from liftoff to first-stage burnout.

    Args:
        params: Vehicle parameters
        config: Simulation config (defaults from constants)
        initial_state: Optional starting state (defaults to the launch pad)

    Returns:
        (final_state, log, reason) tuple
    """
    if config is None:
        config = create_default_config()

    if initial_state is not None:
        state = initial_state.copy()
    else:
        state = create_initial_state(params, config)

    log = SimulationLog()
    if config.record_log:
        log.append(state, params)

    logger.info(f"Starting simulation: dt={config.dt}s, burnout={params.burnout_time}s, "
                f"burn_rate={params.burn_rate:.3f}kg/s")
    logger.debug(f"Initial state: {state}")

    start_time = time.time()
    step_count = 0
    exhausted_warned = False

    while True:
        phase, reason = check_termination(state, params.burnout_time)
        if phase == IntegratorPhase.DONE:
            logger.info(f"Simulation terminated: {reason}")
            break

        if config.enforce_positive_mass:
            try:
                validate_state(state, params.burn_rate, config.dt)
            except ValidationError as e:
                logger.error(f"Validation failed: {e}")
                reason = f"Validation failure: {e}"
                break

        state = euler_step(state, params, config.dt, config.gravity)
        step_count += 1

        if not exhausted_warned and is_propellant_exhausted(state.m):
            logger.warning(f"Vehicle mass reached {state.m:.3f} kg at t={state.t:.3f}s "
                           f"before burnout; results past this point are not physical")
            exhausted_warned = True

        if config.record_log:
            log.append(state, params)

    elapsed = time.time() - start_time
    _log_completion(state, step_count, elapsed)

    return state, log, reason


def _log_completion(state: VehicleState, steps: int, elapsed: float):
    """Log final statistics."""
    logger.info(f"Simulation complete: {steps} steps in {elapsed:.3f}s")
    logger.info(f"Final state: {state}")
