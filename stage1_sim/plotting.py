"""
Stage-1 Burnout Simulation - Trajectory Visualization

Plots of a simulation log (altitude, velocity, mass, forces, dynamic
pressure) and of the atmosphere model itself. Every plot function saves a
PNG into the output directory and returns its path.
"""

import os
from dataclasses import dataclass
from typing import List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

from . import constants as C
from .forces import compute_atmosphere_properties


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class TrajectoryData:
    """Container for processed trajectory data used in plotting.

    Attributes:
        time: Time array in seconds
        altitude: Altitude array in meters
        velocity: Vertical velocity in m/s
        mass: Vehicle mass in kg
        thrust: Thrust magnitude in N
        drag: Drag magnitude in N
        weight: Weight (m * g) in N
        dynamic_pressure: Dynamic pressure in Pa
    """
    time: np.ndarray
    altitude: np.ndarray
    velocity: np.ndarray
    mass: np.ndarray
    thrust: np.ndarray
    drag: np.ndarray
    weight: np.ndarray
    dynamic_pressure: np.ndarray


# =============================================================================
# Configuration
# =============================================================================

def configure_plot_style() -> None:
    """Configure matplotlib defaults for report plots."""
    plt.rcParams.update({
        'figure.figsize': (10, 6),
        'savefig.dpi': 150,
        'axes.grid': True,
        'axes.axisbelow': True,
        'grid.alpha': 0.3,
        'font.size': 11,
        'axes.titlesize': 13,
        'axes.labelsize': 12,
        'legend.fontsize': 10,
        'lines.linewidth': 1.8,
        'xtick.direction': 'in',
        'ytick.direction': 'in',
    })


# =============================================================================
# Data Processing
# =============================================================================

def extract_log_data(log) -> TrajectoryData:
    """Extract simulation log data for plotting.

    Args:
        log: SimulationLog (or any object with the same list attributes)

    Returns:
        TrajectoryData object with numpy arrays
    """
    mass = np.array(log.mass)
    return TrajectoryData(
        time=np.array(log.time),
        altitude=np.array(log.altitude),
        velocity=np.array(log.velocity),
        mass=mass,
        thrust=np.array(log.thrust),
        drag=np.array(log.drag),
        weight=mass * C.GRAVITY_ACCEL,
        dynamic_pressure=np.array(log.dynamic_pressure),
    )


def _save(fig, output_dir: str, name: str) -> str:
    plt.tight_layout()
    path = os.path.join(output_dir, name)
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    return path


# =============================================================================
# Individual Plot Functions
# =============================================================================

def plot_altitude_profile(data: TrajectoryData, output_dir: str) -> str:
    """Altitude vs time, with liftoff and burnout marked."""
    fig, ax = plt.subplots()

    ax.plot(data.time, data.altitude, 'b-', linewidth=2, label='Altitude')
    ax.scatter([data.time[0]], [data.altitude[0]],
               c='green', s=80, marker='o', zorder=5, label='Liftoff')
    ax.scatter([data.time[-1]], [data.altitude[-1]],
               c='red', s=80, marker='x', zorder=5,
               label=f'Burnout ({data.altitude[-1]:.1f} m)')

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Altitude (m)')
    ax.set_title('Altitude Profile', fontweight='bold')
    ax.legend(loc='lower right')

    return _save(fig, output_dir, '01_altitude_profile.png')


def plot_velocity_profile(data: TrajectoryData, output_dir: str) -> str:
    """Vertical velocity vs time."""
    fig, ax = plt.subplots()

    ax.plot(data.time, data.velocity, 'r-', linewidth=2, label='Vertical Velocity')
    ax.axhline(y=0.0, color='gray', linestyle=':', linewidth=1.0)

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Velocity (m/s)')
    ax.set_title('Vertical Velocity Profile', fontweight='bold')
    ax.legend(loc='lower right')

    return _save(fig, output_dir, '02_velocity_profile.png')


def plot_mass_profile(data: TrajectoryData, output_dir: str) -> str:
    """Vehicle mass vs time."""
    fig, ax = plt.subplots()

    mass_tonnes = data.mass / C.KG_PER_TONNE
    ax.fill_between(data.time, 0, mass_tonnes, alpha=0.25, color='#2ca02c')
    ax.plot(data.time, mass_tonnes, 'g-', linewidth=2, label='Vehicle Mass')

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Mass (tonnes)')
    ax.set_title('Vehicle Mass Profile', fontweight='bold')
    ax.legend(loc='upper right')
    ax.set_ylim(0, None)

    return _save(fig, output_dir, '03_mass_profile.png')


def plot_forces(data: TrajectoryData, output_dir: str) -> str:
    """Thrust, weight and drag vs time."""
    fig, ax = plt.subplots()

    ax.plot(data.time, data.thrust / 1e3, 'r-', label='Thrust')
    ax.plot(data.time, data.weight / 1e3, 'k--', label='Weight')
    ax.plot(data.time, data.drag / 1e3, 'b-', label='Drag')

    twr = data.thrust[-1] / data.weight[-1] if data.weight[-1] else np.nan
    ax.text(0.02, 0.98, f'T/W at burnout: {twr:.2f}',
            transform=ax.transAxes, fontsize=9, verticalalignment='top',
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.9))

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Force (kN)')
    ax.set_title('Thrust vs Weight vs Drag', fontweight='bold')
    ax.legend(loc='center right')

    return _save(fig, output_dir, '04_forces.png')


def plot_dynamic_pressure(data: TrajectoryData, output_dir: str) -> str:
    """Dynamic pressure vs time, with its peak marked."""
    fig, ax = plt.subplots()

    q_kpa = data.dynamic_pressure / 1e3
    ax.plot(data.time, q_kpa, 'm-', linewidth=2, label='Dynamic Pressure')
    idx = int(np.nanargmax(q_kpa)) if np.any(np.isfinite(q_kpa)) else 0
    ax.scatter([data.time[idx]], [q_kpa[idx]], c='black', s=60, marker='^', zorder=5,
               label=f'Max-Q ({q_kpa[idx]:.2f} kPa)')

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Dynamic Pressure (kPa)')
    ax.set_title('Dynamic Pressure', fontweight='bold')
    ax.legend(loc='upper left')

    return _save(fig, output_dir, '05_dynamic_pressure.png')


def plot_atmosphere_model(output_dir: str, max_altitude: float = 70000.0) -> str:
    """Temperature, pressure and density of the atmosphere model vs altitude."""
    h = np.linspace(0.0, max_altitude, 701)
    T, P, rho = (np.array(col, dtype=float)
                 for col in zip(*[compute_atmosphere_properties(x) for x in h]))

    fig, axes = plt.subplots(1, 3, figsize=(14, 6), sharey=True)
    axes[0].plot(T, h / 1e3, 'r-')
    axes[0].set_xlabel('Temperature (K)')
    axes[0].set_ylabel('Altitude (km)')
    for y in (C.TROPOPAUSE_ALTITUDE, C.STRATOPAUSE_ALTITUDE):
        axes[0].axhline(y=y / 1e3, color='gray', linestyle=':', linewidth=1.0)
    axes[1].semilogx(P, h / 1e3, 'b-')
    axes[1].set_xlabel('Pressure (Pa)')
    axes[2].semilogx(rho, h / 1e3, 'g-')
    axes[2].set_xlabel('Density (kg/m³)')
    fig.suptitle('Atmosphere Model', fontweight='bold')

    return _save(fig, output_dir, '06_atmosphere_model.png')


# =============================================================================
# Main Entry Point
# =============================================================================

def generate_all_plots(log, output_dir: str = "plots") -> List[str]:
    """Generate all trajectory plots.

    Args:
        log: Simulation log containing trajectory data
        output_dir: Directory to save plots (created if it doesn't exist)

    Returns:
        List of paths to saved plot files
    """
    os.makedirs(output_dir, exist_ok=True)
    configure_plot_style()
    data = extract_log_data(log)

    plot_functions = [
        plot_altitude_profile,
        plot_velocity_profile,
        plot_mass_profile,
        plot_forces,
        plot_dynamic_pressure,
    ]

    saved_files = [fn(data, output_dir) for fn in plot_functions]
    saved_files.append(plot_atmosphere_model(output_dir))
    return saved_files
