"""Tests for config module."""
import dataclasses

import pytest
from stage1_sim import config
from stage1_sim import constants as C


def test_simulation_config_defaults():
    """Test that default config uses constants values."""
    cfg = config.SimulationConfig()
    assert cfg.dt == C.DT
    assert cfg.gravity == C.GRAVITY_ACCEL
    assert cfg.launch_altitude == C.LAUNCH_SITE_ALTITUDE
    assert cfg.enforce_positive_mass is False
    assert cfg.record_log is True


def test_simulation_config_frozen():
    """Test that config is immutable (frozen)."""
    cfg = config.SimulationConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.dt = 0.5


def test_create_default_config():
    cfg = config.create_default_config()
    assert isinstance(cfg, config.SimulationConfig)
    assert cfg == config.SimulationConfig()


def test_create_test_config_overrides():
    cfg = config.create_test_config(dt=0.05, enforce_positive_mass=True)
    assert cfg.dt == 0.05
    assert cfg.enforce_positive_mass is True
    assert cfg.gravity == C.GRAVITY_ACCEL


def test_create_vehicle_parameters_unit_conversion():
    params = config.create_vehicle_parameters(10, 200, 220, 4, 10, 5, 1.5, 0.2)
    assert params.start_mass == pytest.approx(10000.0)
    assert params.thrust_asl == pytest.approx(200000.0)
    assert params.thrust_vac == pytest.approx(220000.0)
    assert params.burn_rate == pytest.approx(4 * 7.5 + 10 * 11.1111)
    assert params.burnout_time == 5
    assert params.drag_area == 1.5
    assert params.drag_coeff == pytest.approx(0.2)


def test_vehicle_parameters_working_precision():
    params = config.VehicleParameters(
        start_mass=1000.0, thrust_asl=1.0, thrust_vac=2.0, burn_rate=3,
        drag_area=1.0, drag_coeff=0.2, burnout_time=1.0,
    )
    for f in dataclasses.fields(params):
        assert isinstance(getattr(params, f.name), C.REAL)
    assert params.drag_coeff == C.REAL(0.2)
    assert isinstance(dataclasses.replace(params, burn_rate=0.5).burn_rate, C.REAL)


def test_vehicle_parameters_frozen(reference_params):
    with pytest.raises(dataclasses.FrozenInstanceError):
        reference_params.start_mass = 1.0
