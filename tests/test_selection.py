import pytest

from goldilocks.selection import (
    SelectionError,
    clear_selection,
    load_selection,
    save_selection,
    session_selection_path,
)
from goldilocks.simulation import derive_system_parameters

_KEY_A = "0123456789abcdef0123456789abcdef"
_KEY_B = "fedcba9876543210fedcba9876543210"


def test_roundtrip_preserves_the_derived_system(tmp_path, sun_like_record):
    path = save_selection(sun_like_record, tmp_path / "nested" / "selection.json")
    loaded = load_selection(path)
    assert loaded == sun_like_record
    assert derive_system_parameters(loaded) == derive_system_parameters(sun_like_record)


def test_missing_file_is_no_selection(tmp_path):
    assert load_selection(tmp_path / "selection.json") is None


def test_corrupt_file_is_no_selection(tmp_path, caplog):
    path = tmp_path / "selection.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_selection(path) is None
    assert "Discarding" in caplog.text


def test_non_object_payload_is_no_selection(tmp_path):
    path = tmp_path / "selection.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_selection(path) is None


def test_clear_selection(tmp_path, sun_like_record):
    path = save_selection(sun_like_record, tmp_path / "selection.json")
    clear_selection(path)
    assert load_selection(path) is None
    clear_selection(path)


def test_unwritable_location_raises_selection_error(tmp_path, sun_like_record):
    blocker = tmp_path / "data"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(SelectionError, match="Could not save selection"):
        save_selection(sun_like_record, blocker / "selection.json")


def test_session_paths_are_separate(tmp_path, sun_like_record):
    base = tmp_path / "selection.json"
    path_a = session_selection_path(base, _KEY_A)
    path_b = session_selection_path(base, _KEY_B)
    assert path_a == tmp_path / f"selection-{_KEY_A}.json"

    save_selection(sun_like_record, path_a)
    save_selection({**sun_like_record, "pl_name": "Z"}, path_b)
    clear_selection(path_b)

    assert load_selection(path_a) == sun_like_record
    assert load_selection(path_b) is None


@pytest.mark.parametrize("key", ["", "abc", "../../etc/passwd", _KEY_A.upper(), _KEY_A + "0"])
def test_session_key_must_be_a_hex_token(tmp_path, key):
    with pytest.raises(SelectionError):
        session_selection_path(tmp_path / "selection.json", key)
