"""
Stage-1 Burnout Simulation - Physical Constants and Model Parameters

This module defines the fixed constants of the vertical-ascent model:
integration step, gravity, launch site, atmosphere profile, propellant
unit masses and unit conversions.
"""

import numpy as np

# =============================================================================
# SIMULATION PARAMETERS
# =============================================================================

# Working precision of the state, the vehicle parameters and the force models.
# The burnout pre-test counts steps on a single-precision clock, so published
# burnout figures are only reproduced at this precision.
REAL = np.float32

# Fixed integration step (s)
DT = 0.025

# Gravitational acceleration (m/s^2), deliberately rounded
GRAVITY_ACCEL = 10.0

# Launch site elevation above sea level (m)
LAUNCH_SITE_ALTITUDE = 70.0

# Initial vertical velocity (m/s)
INITIAL_VELOCITY = 0.0

# =============================================================================
# ATMOSPHERE PARAMETERS (exponential pressure, piecewise-linear temperature)
# =============================================================================

ATM_P0 = 101325.0           # Sea level pressure (Pa)
ATM_SCALE_HEIGHT = 5600.0   # Pressure scale height (m)
R_SPECIFIC_AIR = 287.053    # Specific gas constant for dry air (J/(kg·K))

# Temperature profile breakpoints (m)
TROPOPAUSE_ALTITUDE = 11000.0
STRATOPAUSE_ALTITUDE = 39000.0

# Temperatures at the breakpoints (K)
T_SEA_LEVEL = 285.0
T_TROPOPAUSE = 205.0
T_STRATOPAUSE = 270.0

# Mesosphere cooling above the stratopause: 50 K per 16 km
MESOSPHERE_COOLING = 50.0      # K
MESOSPHERE_COOLING_DEPTH = 16000.0  # m

# =============================================================================
# PROPELLANT PARAMETERS
# =============================================================================

SOLID_FUEL_UNIT_MASS = 7.5       # kg per solid fuel unit
LIQUID_FUEL_UNIT_MASS = 11.1111  # kg per liquid fuel unit of LF+O (1440 units == 16 t)

# =============================================================================
# UNIT CONVERSIONS
# =============================================================================

KG_PER_TONNE = 1000.0
N_PER_KN = 1000.0
