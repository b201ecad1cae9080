"""Catalog layer: NASA Exoplanet Archive TAP queries for star/planet rows."""

import logging
from dataclasses import asdict

import httpx

from goldilocks.config import Settings
from goldilocks.fields import RecordFields, to_finite_float
from goldilocks.models import PlanetQuery, RawRecord

logger = logging.getLogger(__name__)

# Planetary Systems Composite Parameters: one row per planet.
CATALOG_TABLE = "pscomppars"

CATALOG_COLUMNS: tuple[str, ...] = (
    "pl_name",
    "hostname",
    "st_rad",
    "st_lum",
    "st_teff",
    "pl_orbsmax",
    "pl_orbeccen",
    "pl_rade",
    "pl_masse",
    "pl_orbper",
)

_FILTER_COLUMNS: tuple[str, ...] = (
    "st_rad",
    "st_teff",
    "pl_orbsmax",
    "pl_rade",
    "pl_masse",
    "pl_orbper",
)


class CatalogError(Exception):
    """Catalog query failure (bad filter input, transport, or response)."""


def _bound(query: PlanetQuery, name: str) -> float | None:
    raw = asdict(query)[name]
    if not raw or not raw.strip():
        return None
    value = to_finite_float(raw)
    if value is None:
        raise CatalogError(f"Invalid number for {name}: {raw!r}")
    return value


def build_adql(query: PlanetQuery, limit: int = 50) -> str:
    """Translate search-form bounds into an ADQL statement.

    Bounds are parsed to floats before being written into the query, so no
    form text reaches the archive verbatim.

    Args:
        query: Raw min/max strings; blank means unbounded.
        limit: Maximum number of rows (TOP n).

    Returns:
        ADQL SELECT statement over CATALOG_TABLE.

    Raises:
        CatalogError: On a non-numeric bound or a min greater than its max.
    """
    conditions: list[str] = []
    for column in _FILTER_COLUMNS:
        low = _bound(query, f"{column}_min")
        high = _bound(query, f"{column}_max")
        if low is not None and high is not None and low > high:
            raise CatalogError(f"{column}: min {low:g} is greater than max {high:g}")
        if low is not None:
            conditions.append(f"{column} >= {low!r}")
        if high is not None:
            conditions.append(f"{column} <= {high!r}")

    adql = f"SELECT TOP {int(limit)} {','.join(CATALOG_COLUMNS)} FROM {CATALOG_TABLE}"
    if conditions:
        adql += " WHERE " + " AND ".join(conditions)
    return adql + " ORDER BY pl_name"


def fetch_planets(
    query: PlanetQuery,
    settings: Settings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> list[dict]:
    """Run a catalog search and return raw rows.

    Args:
        query: Search-form bounds.
        settings: Endpoint, timeout and row limit. Defaults to Settings().
        transport: Optional httpx transport (used by tests).

    Returns:
        List of row dicts keyed by column name, in archive order.

    Raises:
        CatalogError: On invalid bounds, HTTP/transport errors, or a response
            that is not a JSON array of objects.
    """
    settings = settings or Settings()
    params = {"query": build_adql(query, settings.result_limit), "format": "json"}
    logger.info("Catalog query: %s", params["query"])

    try:
        with httpx.Client(timeout=settings.tap_timeout, transport=transport) as client:
            resp = client.get(settings.tap_url, params=params)
            resp.raise_for_status()
            rows = resp.json()
    except httpx.HTTPError as e:
        raise CatalogError(f"Catalog request failed: {e}") from e
    except ValueError as e:
        raise CatalogError("Catalog returned a non-JSON response") from e

    if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
        raise CatalogError("Catalog returned an unexpected payload")
    logger.info("Catalog returned %d row(s)", len(rows))
    return rows


def record_label(record: RawRecord) -> str:
    """List label for a row: "planet (host)"."""
    fields = RecordFields(record)
    return f"{fields.text('pl_name', '—')} ({fields.text('hostname', '—')})"
