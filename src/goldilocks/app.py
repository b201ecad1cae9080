"""Goldilocks: Streamlit app to pick an exoplanet and watch it orbit its habitable zone."""

import html
import uuid

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from goldilocks.catalog import CatalogError, fetch_planets, record_label  # noqa: E402
from goldilocks.config import Settings, configure_logging  # noqa: E402
from goldilocks.i18n import t  # noqa: E402
from goldilocks.models import PlanetQuery  # noqa: E402
from goldilocks.renderers.plotly_orbit import render_plotly_chart  # noqa: E402
from goldilocks.selection import (  # noqa: E402
    SelectionError,
    clear_selection,
    load_selection,
    save_selection,
    session_selection_path,
)
from goldilocks.simulation import build_simulation_state  # noqa: E402
from goldilocks.summary import describe_clock, describe_system  # noqa: E402

_settings = Settings.from_env()
configure_logging(_settings.log_level)

# Ticks applied per redraw; the fragment reruns every _FRAME_SECONDS.
_TICKS_PER_FRAME = 10
_FRAME_SECONDS = 0.2

_STATUS_CLASS = {
    "in": "in-hz",
    "too-close": "out-too-close",
    "too-far": "out-too-far",
}

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
)

# --- Session state initialization ---

if "search_rows" not in st.session_state:
    st.session_state.search_rows = []
if "search_status" not in st.session_state:
    st.session_state.search_status = ""
if "sim_state" not in st.session_state:
    st.session_state.sim_state = None

# --- Per-tab selection file ---
# The key lives in the URL so a reload keeps the planet, like browser sessionStorage.
_session_key = st.query_params.get("session", "")
try:
    _selection_path = session_selection_path(_settings.selection_path, _session_key)
except SelectionError:
    _session_key = uuid.uuid4().hex
    st.query_params["session"] = _session_key
    _selection_path = session_selection_path(_settings.selection_path, _session_key)

st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #050a1a !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .info-line { color: #e8e8e8; line-height: 1.6; }
    .hz.in-hz { color: #33cc66; }
    .hz.out-too-close { color: #ff6666; }
    .hz.out-too-far { color: #6699ff; }
    .timer { color: #aaaaaa; font-size: 0.9rem; }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Search panel (sidebar) ---

with st.sidebar:
    st.subheader(t("search_title", _lang))
    with st.form("query_form"):
        bounds: dict[str, str] = {}
        for column in ("st_rad", "st_teff", "pl_orbsmax", "pl_rade", "pl_masse", "pl_orbper"):
            st.caption(t(f"label_{column}", _lang))
            col_min, col_max = st.columns(2)
            with col_min:
                bounds[f"{column}_min"] = st.text_input(
                    t("label_min", _lang), key=f"{column}_min"
                )
            with col_max:
                bounds[f"{column}_max"] = st.text_input(
                    t("label_max", _lang), key=f"{column}_max"
                )
        submitted = st.form_submit_button(t("btn_search", _lang))

    if submitted:
        st.session_state.search_rows = []
        try:
            with st.spinner(t("loading_search", _lang)):
                rows = fetch_planets(PlanetQuery(**bounds), _settings)
        except CatalogError as e:
            st.session_state.search_status = t("status_error", _lang, error=str(e))
        else:
            st.session_state.search_rows = rows
            st.session_state.search_status = (
                t("status_results", _lang, count=len(rows))
                if rows
                else t("status_empty", _lang)
            )

    if st.session_state.search_status:
        st.caption(st.session_state.search_status)

    for i, row in enumerate(st.session_state.search_rows):
        if st.button(record_label(row), key=f"row_{i}", use_container_width=True):
            try:
                save_selection(row, _selection_path)
            except SelectionError as e:
                st.session_state.search_status = t("select_error", _lang, error=str(e))
            else:
                st.session_state.sim_state = None
            st.rerun()

# --- Simulation area ---

if st.session_state.sim_state is None:
    _record = load_selection(_selection_path)
    if _record is not None:
        st.session_state.sim_state = build_simulation_state(_record)

if st.session_state.sim_state is None:
    st.markdown(
        f"<div style='height:60vh; display:flex; align-items:center; justify-content:center;"
        f" color:#334466; font-size:1.2rem;'>{t('no_selection', _lang)}</div>",
        unsafe_allow_html=True,
    )
    st.stop()

_state = st.session_state.sim_state
_lines = [html.escape(line) for line in describe_system(_state.params, _lang)]
_status_class = _STATUS_CLASS[_state.params.habitable_zone_status]
_lines[0] = f"<b>{_lines[0]}</b>"
_lines[-1] = f"<b class='hz {_status_class}'>{_lines[-1]}</b>"
st.markdown(
    "".join(f"<div class='info-line'>{line}</div>" for line in _lines),
    unsafe_allow_html=True,
)
if st.button(t("btn_change", _lang), key="change_planet"):
    try:
        clear_selection(_selection_path)
    except SelectionError as e:
        st.error(str(e))
    else:
        st.session_state.sim_state = None
        st.rerun()


@st.fragment(run_every=_FRAME_SECONDS)
def _animate() -> None:
    state = st.session_state.sim_state
    for _ in range(_TICKS_PER_FRAME):
        state.advance(_settings.tick)
    fig = render_plotly_chart(state)
    st.plotly_chart(fig, use_container_width=False, config={"displayModeBar": False})
    st.markdown(
        f"<div class='timer'>{html.escape(describe_clock(state, _lang))}</div>",
        unsafe_allow_html=True,
    )


_animate()
