"""Human-readable telemetry lines for the info panel and the chart title."""

from goldilocks.i18n import t
from goldilocks.models import SystemParameters
from goldilocks.simulation import SimulationState

_STATUS_KEYS = {
    "in": "hz_in",
    "too-close": "hz_too_close",
    "too-far": "hz_too_far",
}


def describe_system(params: SystemParameters, lang: str = "en") -> list[str]:
    """Info panel lines: name, orbit, planet size, eccentricity, Goldilocks band, verdict."""
    eccentricity = (
        f"{params.eccentricity:.2f}" if params.eccentricity_known else t("unknown", lang)
    )
    return [
        f"{params.pl_name} ({params.host_name})",
        t("info_orbit", lang, au=params.orbit_semi_major_axis_au),
        t("info_planet_radius", lang, re=params.planet_radius_earth),
        t("info_eccentricity", lang, e=eccentricity),
        t(
            "info_goldilocks",
            lang,
            inner=params.habitable_zone_inner_au,
            outer=params.habitable_zone_outer_au,
        ),
        t(_STATUS_KEYS[params.habitable_zone_status], lang),
    ]


def describe_clock(state: SimulationState, lang: str = "en") -> str:
    return t(
        "clock",
        lang,
        period=state.params.orbital_period_days,
        days=state.elapsed_days(),
        years=state.elapsed_years(),
    )
