import pytest
from stage1_sim import mass, constants as C


def test_compute_burn_rate_liquid_only():
    assert mass.compute_burn_rate(0, 10) == pytest.approx(111.111)


def test_compute_burn_rate_solid_only():
    assert mass.compute_burn_rate(4, 0) == pytest.approx(30.0)


def test_compute_burn_rate_combined():
    rate = mass.compute_burn_rate(2, 3)
    assert rate == pytest.approx(2 * C.SOLID_FUEL_UNIT_MASS + 3 * C.LIQUID_FUEL_UNIT_MASS)


def test_compute_mass_after_step():
    assert mass.compute_mass_after_step(1000.0, 40.0, 0.025) == pytest.approx(999.0)


def test_compute_mass_after_step_has_no_floor():
    assert mass.compute_mass_after_step(1.0, 100.0, 0.025) == pytest.approx(-1.5)


def test_compute_average_mass():
    assert mass.compute_average_mass(1000.0, 40.0, 0.025) == pytest.approx(999.5)
    assert mass.compute_average_mass(1000.0, 0.0, 0.025) == 1000.0


def test_is_propellant_exhausted():
    assert mass.is_propellant_exhausted(0.0)
    assert mass.is_propellant_exhausted(-1.0)
    assert not mass.is_propellant_exhausted(0.001)
