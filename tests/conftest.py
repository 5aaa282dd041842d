import pytest

from stage1_sim.config import VehicleParameters, create_vehicle_parameters


@pytest.fixture
def reference_params():
    """10 t vehicle, 200/220 kN, 10 LF units/s, 5 s burn, 1 m^2, Cd 0.2."""
    return create_vehicle_parameters(10, 200, 220, 0, 10, 5, 1, 0.2)


@pytest.fixture
def constant_thrust_params():
    """1 t vehicle with 20 kN at all altitudes, no propellant flow, no drag."""
    return VehicleParameters(
        start_mass=1000.0,
        thrust_asl=20000.0,
        thrust_vac=20000.0,
        burn_rate=0.0,
        drag_area=1.0,
        drag_coeff=0.0,
        burnout_time=1.0,
    )
