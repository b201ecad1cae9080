"""Habitable-zone and orbit geometry. Pure functions, no state.

Units: distances in AU, angles in radians. The orbit is planar (x-z plane) and
the star sits at the origin, which is one focus of the ellipse.
"""

import math

from goldilocks.models import HabitableZone, HabitableZoneStatus, Vec3

# Sun/Earth-calibrated Goldilocks bounds (AU) for L = L_sun.
HZ_INNER_AU_SUN = 0.75
HZ_OUTER_AU_SUN = 1.77

MAX_ECCENTRICITY = 0.99
ORBIT_SEGMENTS = 64


def habitable_zone(log_luminosity: float | None) -> HabitableZone:
    """Habitable-zone bounds from stellar luminosity.

    Flux falls off as L / d^2, so the distance receiving a given flux scales
    with sqrt(L). Unknown luminosity gives the Sun-like defaults.

    Args:
        log_luminosity: log10(L / L_sun), as published in the archive's st_lum.

    Returns:
        HabitableZone with inner/outer bounds in AU.
    """
    if log_luminosity is None or not math.isfinite(log_luminosity):
        return HabitableZone(inner_au=HZ_INNER_AU_SUN, outer_au=HZ_OUTER_AU_SUN)
    try:
        luminosity = 10.0**log_luminosity
    except OverflowError:
        return HabitableZone(inner_au=HZ_INNER_AU_SUN, outer_au=HZ_OUTER_AU_SUN)
    scale = math.sqrt(luminosity)
    return HabitableZone(
        inner_au=HZ_INNER_AU_SUN * scale, outer_au=HZ_OUTER_AU_SUN * scale
    )


def classify_orbit(semi_major_axis_au: float, zone: HabitableZone) -> HabitableZoneStatus:
    """Place an orbit relative to the band. Both boundaries count as "in"."""
    if zone.inner_au <= semi_major_axis_au <= zone.outer_au:
        return "in"
    if semi_major_axis_au < zone.inner_au:
        return "too-close"
    return "too-far"


def radius_at_phase(a: float, e: float, t: float) -> float:
    """Polar form of the ellipse about its focus: r = a(1 - e^2) / (1 + e cos t)."""
    return a * (1 - e * e) / (1 + e * math.cos(t))


def position_at_phase(a: float, e: float, t: float) -> Vec3:
    """Orbital position with true anomaly taken directly as the phase t.

    Not Kepler-timed: angular speed is constant in t, which keeps the animation
    smooth. t = 0 is periapsis, on the +x axis.
    """
    r = radius_at_phase(a, e, t)
    return Vec3(x=r * math.cos(t), y=0.0, z=r * math.sin(t))


def orbit_points(a: float, e: float, segments: int = ORBIT_SEGMENTS) -> tuple[Vec3, ...]:
    """Closed orbit path: segments + 1 points from t = 0 to t = 2π inclusive."""
    return tuple(
        position_at_phase(a, e, (i / segments) * 2 * math.pi)
        for i in range(segments + 1)
    )
