"""Simulation state: raw catalog row → derived system parameters + phase clock.

Renderers only read the state and call advance(); no orbit or habitable-zone
math happens outside this module and physics.py.
"""

import logging
import math

from goldilocks.fields import RecordFields
from goldilocks.models import RawRecord, SystemParameters, Vec3
from goldilocks.physics import (
    MAX_ECCENTRICITY,
    classify_orbit,
    habitable_zone,
    orbit_points,
    position_at_phase,
)

logger = logging.getLogger(__name__)

# Fixed scale: 1 unit = 1 AU. Star/planet radii are exaggerated for visibility.
SUN_RADIUS_AU = 0.005
MIN_STAR_RADIUS = 0.012
MIN_PLANET_RADIUS = 0.008
PLANET_SCALE_FACTOR = 0.00004  # AU per Earth radius

DEFAULT_ORBITAL_PERIOD_DAYS = 365.0
DAYS_PER_YEAR = 365.25


def derive_system_parameters(record: RawRecord) -> SystemParameters:
    """Convert one catalog row into immutable system parameters.

    Total for any mapping: missing, null, or non-numeric fields fall back to
    Sun/Earth-like defaults instead of raising.

    Args:
        record: Catalog row (pl_name, hostname, st_rad, st_lum, pl_orbsmax,
            pl_orbeccen, pl_rade, pl_orbper), keys in either case.

    Returns:
        SystemParameters including the precomputed orbit path.
    """
    fields = RecordFields(record)

    pl_name = fields.text("pl_name", "Planet")
    host_name = fields.text("hostname", "Star")
    star_radius_solar = fields.number_or("st_rad", 1.0)
    log_luminosity = fields.number("st_lum")
    planet_radius_earth = fields.number_or("pl_rade", 1.0)

    semi_major_axis = fields.number_or("pl_orbsmax", 1.0)
    if semi_major_axis <= 0:
        semi_major_axis = 1.0

    eccentricity_known = fields.has_number("pl_orbeccen")
    eccentricity = min(MAX_ECCENTRICITY, max(0.0, fields.number_or("pl_orbeccen", 0.0)))

    period = fields.number_or("pl_orbper", DEFAULT_ORBITAL_PERIOD_DAYS)
    if period <= 0:
        period = DEFAULT_ORBITAL_PERIOD_DAYS

    missing = [
        key
        for key in ("st_rad", "st_lum", "pl_orbsmax", "pl_orbeccen", "pl_rade", "pl_orbper")
        if not fields.has_number(key)
    ]
    if missing:
        logger.debug("%s: defaulted fields %s", pl_name, ", ".join(missing))

    zone = habitable_zone(log_luminosity)

    return SystemParameters(
        pl_name=pl_name,
        host_name=host_name,
        star_radius_solar=star_radius_solar,
        star_radius_display=max(MIN_STAR_RADIUS, star_radius_solar * SUN_RADIUS_AU),
        stellar_log_luminosity=log_luminosity,
        orbit_semi_major_axis_au=semi_major_axis,
        planet_radius_earth=planet_radius_earth,
        planet_radius_display=max(
            MIN_PLANET_RADIUS, planet_radius_earth * PLANET_SCALE_FACTOR
        ),
        eccentricity=eccentricity,
        eccentricity_known=eccentricity_known,
        orbital_period_days=period,
        habitable_zone_inner_au=zone.inner_au,
        habitable_zone_outer_au=zone.outer_au,
        habitable_zone_status=classify_orbit(semi_major_axis, zone),
        orbit_points=orbit_points(semi_major_axis, eccentricity),
    )


class SimulationState:
    """Immutable system parameters plus one owned phase accumulator.

    The phase is in radians of true anomaly. It only changes through advance()
    and is never wrapped; position() relies on the periodicity of cos/sin.
    """

    def __init__(self, params: SystemParameters):
        self._params = params
        self._phase = 0.0

    def __repr__(self) -> str:
        return f"SimulationState({self._params.pl_name!r}, phase={self._phase:.4f})"

    @property
    def params(self) -> SystemParameters:
        return self._params

    @property
    def phase(self) -> float:
        return self._phase

    @property
    def orbit_points(self) -> tuple[Vec3, ...]:
        return self._params.orbit_points

    def advance(self, dt: float) -> None:
        """Move the clock forward by dt radians of phase."""
        if not math.isfinite(dt):
            raise ValueError(f"dt must be finite, got {dt!r}")
        self._phase += dt

    def position_at_phase(self, t: float) -> Vec3:
        return position_at_phase(
            self._params.orbit_semi_major_axis_au, self._params.eccentricity, t
        )

    def position(self) -> Vec3:
        """Planet position at the current phase."""
        return self.position_at_phase(self._phase)

    def elapsed_days(self) -> float:
        """Calendar days covered so far: one full turn of phase = one orbital period."""
        return (self._phase / (2 * math.pi)) * self._params.orbital_period_days

    def elapsed_years(self) -> float:
        return self.elapsed_days() / DAYS_PER_YEAR


def build_simulation_state(record: RawRecord) -> SimulationState:
    """Top-level entry point: takes a catalog row and returns a fresh SimulationState."""
    params = derive_system_parameters(record)
    logger.debug(
        "Built simulation for %s (%s): a=%.3f AU, e=%.2f, HZ %.2f-%.2f AU, %s",
        params.pl_name,
        params.host_name,
        params.orbit_semi_major_axis_au,
        params.eccentricity,
        params.habitable_zone_inner_au,
        params.habitable_zone_outer_au,
        params.habitable_zone_status,
    )
    return SimulationState(params)
