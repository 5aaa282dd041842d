"""
Stage-1 Burnout Simulation Package

Fixed-step vertical ascent of a single-stage rocket from the pad to
first-stage burnout, with an exponential atmosphere, altitude-dependent
thrust and aerodynamic drag.

Modules:
    - constants: Physical constants and model parameters
    - config: Vehicle parameters and simulation config
    - state: Vehicle state dataclass
    - forces: Atmosphere, thrust and drag models
    - mass: Propellant flow and mass computations
    - integrators: Forward-Euler step
    - validation: Argument parsing and state checks
    - main: Simulation loop and log
    - plotting: Trajectory plots
    - cli: Command-line entry point
"""

from .state import VehicleState, create_initial_state
from .config import (
    VehicleParameters, SimulationConfig, create_vehicle_parameters,
    create_default_config, create_test_config,
)
from .main import run_simulation, SimulationLog, IntegratorPhase, REASON_BURNOUT

__version__ = "1.0.0"

__all__ = [
    'VehicleState',
    'create_initial_state',
    'VehicleParameters',
    'SimulationConfig',
    'create_vehicle_parameters',
    'create_default_config',
    'create_test_config',
    'run_simulation',
    'SimulationLog',
    'IntegratorPhase',
    'REASON_BURNOUT',
]
