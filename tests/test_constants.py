import pytest
import numpy as np
import stage1_sim.constants as C


def test_simulation_parameters():
    assert C.REAL is np.float32
    assert C.DT == 0.025
    assert C.GRAVITY_ACCEL == 10.0
    assert C.LAUNCH_SITE_ALTITUDE == 70.0
    assert C.INITIAL_VELOCITY == 0.0


def test_atmosphere_parameters():
    assert C.ATM_P0 == 101325.0
    assert C.ATM_SCALE_HEIGHT == 5600.0
    assert C.R_SPECIFIC_AIR == pytest.approx(287.053)
    assert C.TROPOPAUSE_ALTITUDE < C.STRATOPAUSE_ALTITUDE


def test_temperature_breakpoints_consistent():
    # Mesosphere rate is 50 K per 16 km
    assert C.MESOSPHERE_COOLING == 50.0
    assert C.MESOSPHERE_COOLING_DEPTH == 16000.0
    assert C.T_SEA_LEVEL - C.T_TROPOPAUSE == 80.0
    assert C.T_STRATOPAUSE - C.T_TROPOPAUSE == 65.0


def test_propellant_unit_masses():
    assert C.SOLID_FUEL_UNIT_MASS == 7.5
    assert C.LIQUID_FUEL_UNIT_MASS == pytest.approx(11.1111)
    # 1440 liquid units of LF+O weigh about 16 t
    assert 1440 * C.LIQUID_FUEL_UNIT_MASS == pytest.approx(16000.0, rel=1e-4)
