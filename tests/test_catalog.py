import httpx
import pytest

from goldilocks.catalog import (
    CATALOG_COLUMNS,
    CatalogError,
    build_adql,
    fetch_planets,
    record_label,
)
from goldilocks.config import Settings
from goldilocks.models import PlanetQuery

_SETTINGS = Settings(tap_url="https://tap.example/TAP/sync", result_limit=5)


def test_build_adql_without_filters():
    adql = build_adql(PlanetQuery(), limit=20)
    assert adql == (
        f"SELECT TOP 20 {','.join(CATALOG_COLUMNS)} FROM pscomppars ORDER BY pl_name"
    )


def test_build_adql_with_bounds():
    adql = build_adql(
        PlanetQuery(pl_orbsmax_min="0.5", pl_orbsmax_max=" 2 ", st_teff_max="6000"),
        limit=10,
    )
    assert " WHERE st_teff <= 6000.0 AND pl_orbsmax >= 0.5 AND pl_orbsmax <= 2.0 ORDER BY" in adql


@pytest.mark.parametrize(
    "query",
    [
        PlanetQuery(pl_rade_min="big"),
        PlanetQuery(pl_rade_max="1; DROP TABLE"),
        PlanetQuery(pl_orbper_min="400", pl_orbper_max="10"),
    ],
)
def test_build_adql_rejects_bad_bounds(query):
    with pytest.raises(CatalogError):
        build_adql(query)


def test_fetch_planets_returns_rows():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200,
            json=[
                {"pl_name": "Kepler-22 b", "hostname": "Kepler-22", "pl_orbsmax": 0.812},
                {"pl_name": "TOI-700 d", "hostname": "TOI-700", "pl_orbsmax": 0.163},
            ],
        )

    rows = fetch_planets(
        PlanetQuery(pl_rade_max="3"), _SETTINGS, transport=httpx.MockTransport(handler)
    )

    assert [r["pl_name"] for r in rows] == ["Kepler-22 b", "TOI-700 d"]
    assert seen["url"] == "https://tap.example/TAP/sync"
    assert seen["params"]["format"] == "json"
    assert seen["params"]["query"].startswith("SELECT TOP 5 ")
    assert "pl_rade <= 3.0" in seen["params"]["query"]


def test_fetch_planets_http_error_is_catalog_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(CatalogError):
        fetch_planets(PlanetQuery(), _SETTINGS, transport=transport)


def test_fetch_planets_transport_error_is_catalog_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(CatalogError):
        fetch_planets(PlanetQuery(), _SETTINGS, transport=httpx.MockTransport(handler))


def test_fetch_planets_rejects_non_json():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<VOTABLE/>"))
    with pytest.raises(CatalogError):
        fetch_planets(PlanetQuery(), _SETTINGS, transport=transport)


def test_fetch_planets_rejects_non_list_payload():
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, json={"error": "bad query"})
    )
    with pytest.raises(CatalogError):
        fetch_planets(PlanetQuery(), _SETTINGS, transport=transport)


def test_record_label():
    assert record_label({"pl_name": "51 Peg b", "hostname": "51 Peg"}) == "51 Peg b (51 Peg)"
    assert record_label({"PL_NAME": "HD 209458 b"}) == "HD 209458 b (—)"
    assert record_label({}) == "— (—)"
