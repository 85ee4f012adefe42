"""
Basic Phys Tools Workflow Example

This script demonstrates the formulas provided by phys_tools on a small
synthetic set of vectors.

Workflow:
1. Decompose 2D vectors into components and back
2. Convert a field of 3D points to spherical coordinates
3. Compute harmonic motion parameters of a spring
4. Plot the results
"""

import numpy as np
import xarray as xr
import matplotlib.pyplot as plt
import phys_tools as pt

# =============================================================================
# Configuration
# =============================================================================

N_POINTS = 200  # Number of synthetic vectors
MAX_MAGNITUDE = 10.0  # Largest vector magnitude
SPRING_CONSTANT = 4.0  # Used as omega^2
INITIAL_DISPLACEMENT = -0.5  # Displacement at t = 0 (m)
SEED = 0

rng = np.random.default_rng(SEED)

# =============================================================================
# Step 1: 2D Vector Decomposition
# =============================================================================

print("Decomposing 2D vectors...")
magnitude = rng.uniform(0, MAX_MAGNITUDE, N_POINTS)
direction = rng.uniform(0, 360, N_POINTS)

x, y = pt.vector_components(magnitude, direction)
magnitude_back, direction_back = pt.vector_magnitude_direction(x, y)

print(f"Max magnitude round-trip error: {np.max(np.abs(magnitude_back - magnitude)):.2e}")

# =============================================================================
# Step 2: Spherical Coordinates of a 3D Field
# =============================================================================

print("Converting 3D points to spherical coordinates...")
ds = xr.Dataset(
    {
        'x': ('point', rng.normal(size=N_POINTS), {'units': 'm'}),
        'y': ('point', rng.normal(size=N_POINTS), {'units': 'm'}),
        'z': ('point', rng.normal(size=N_POINTS), {'units': 'm'}),
    }
)
ds_sph = pt.add_spherical_coordinates(ds)

print(f"Radius range: {float(ds_sph['radius'].min()):.2f} - {float(ds_sph['radius'].max()):.2f} m")

# =============================================================================
# Step 3: Spring Harmonic Motion
# =============================================================================

print("Computing spring harmonic motion...")
amplitude, period, equation = pt.spring_harmonic_motion(SPRING_CONSTANT, INITIAL_DISPLACEMENT)

print(f"  Amplitude: {amplitude:.2f} m")
print(f"  Period:    {period:.3f} s")
print(f"  Equation:  {equation}")

# =============================================================================
# Step 4: Visualization
# =============================================================================

print("\nCreating visualizations...")

fig, axes = plt.subplots(1, 2, figsize=(12, 5))

# Panel 1: 2D vectors as arrows from the origin
ax = axes[0]
ax.quiver(np.zeros(N_POINTS), np.zeros(N_POINTS), x, y,
          direction_back, angles='xy', scale_units='xy', scale=1, cmap='twilight')
ax.set_xlim(-MAX_MAGNITUDE, MAX_MAGNITUDE)
ax.set_ylim(-MAX_MAGNITUDE, MAX_MAGNITUDE)
ax.set_aspect('equal')
ax.set_xlabel('x')
ax.set_ylabel('y')
ax.set_title('Vectors colored by direction')
ax.grid(True, alpha=0.3)

# Panel 2: Angular distribution of the 3D points
ax = axes[1]
sc = ax.scatter(np.degrees(ds_sph['azimuthal_angle']), np.degrees(ds_sph['polar_angle']),
                c=ds_sph['radius'], cmap='viridis', s=12)
plt.colorbar(sc, ax=ax, label='Radius (m)')
ax.set_xlabel('Azimuthal angle (deg)')
ax.set_ylabel('Polar angle (deg)')
ax.set_title(f'Spherical coordinates ({equation})', fontsize=9)
ax.grid(True, alpha=0.3)

plt.tight_layout()
plt.savefig('phys_tools_overview.png', dpi=150, bbox_inches='tight')
print("Saved figure: phys_tools_overview.png")

plt.show()

print("\nDone!")
