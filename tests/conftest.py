import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402


@pytest.fixture
def sun_like_record() -> dict:
    return {
        "pl_name": "X",
        "hostname": "Y",
        "st_rad": 1,
        "st_lum": 0,
        "pl_orbsmax": 1,
        "pl_orbeccen": 0,
        "pl_rade": 1,
        "pl_orbper": 365,
    }
