"""Data model definitions. Explicit boundaries between catalog, simulation, and render layers."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

# A single catalog row as it arrives from the archive or from storage.
# Keys may be lower- or upper-case; values are untyped.
RawRecord = Mapping[str, Any]

HabitableZoneStatus = Literal["in", "too-close", "too-far"]


@dataclass(frozen=True)
class PlanetQuery:
    """Raw search-form input. Bounds are strings; blank means unbounded."""

    st_rad_min: str = ""  # Stellar radius (solar radii)
    st_rad_max: str = ""
    st_teff_min: str = ""  # Stellar effective temperature (K)
    st_teff_max: str = ""
    pl_orbsmax_min: str = ""  # Semi-major axis (AU)
    pl_orbsmax_max: str = ""
    pl_rade_min: str = ""  # Planet radius (Earth radii)
    pl_rade_max: str = ""
    pl_masse_min: str = ""  # Planet mass (Earth masses)
    pl_masse_max: str = ""
    pl_orbper_min: str = ""  # Orbital period (days)
    pl_orbper_max: str = ""


@dataclass(frozen=True)
class Vec3:
    """A point in scene space. 1 unit = 1 AU; the orbit lies in the x-z plane."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class HabitableZone:
    """Goldilocks band bounds in AU."""

    inner_au: float
    outer_au: float


@dataclass(frozen=True)
class SystemParameters:
    """Everything derived from one catalog record. Computed once, never updated."""

    pl_name: str
    host_name: str
    star_radius_solar: float  # Stellar radius (solar radii)
    star_radius_display: float  # Exaggerated star size (AU)
    stellar_log_luminosity: float | None  # log10(L / L_sun); None if unknown
    orbit_semi_major_axis_au: float
    planet_radius_earth: float  # Planet radius (Earth radii)
    planet_radius_display: float  # Exaggerated planet size (AU)
    eccentricity: float  # Clamped to [0, 0.99]
    eccentricity_known: bool  # False when the record had no usable value
    orbital_period_days: float
    habitable_zone_inner_au: float
    habitable_zone_outer_au: float
    habitable_zone_status: HabitableZoneStatus
    orbit_points: tuple[Vec3, ...]  # Static orbit path for drawing

    @property
    def in_habitable_zone(self) -> bool:
        return self.habitable_zone_status == "in"
