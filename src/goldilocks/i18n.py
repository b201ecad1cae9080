"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "골디락스",
        "en": "Goldilocks",
    },
    "search_title": {
        "ko": "행성 검색",
        "en": "Search planets",
    },
    "label_st_rad": {
        "ko": "항성 반지름 (R☉)",
        "en": "Star radius (R☉)",
    },
    "label_st_teff": {
        "ko": "항성 온도 (K)",
        "en": "Star temperature (K)",
    },
    "label_pl_orbsmax": {
        "ko": "궤도 긴반지름 (AU)",
        "en": "Semi-major axis (AU)",
    },
    "label_pl_rade": {
        "ko": "행성 반지름 (R⊕)",
        "en": "Planet radius (R⊕)",
    },
    "label_pl_masse": {
        "ko": "행성 질량 (M⊕)",
        "en": "Planet mass (M⊕)",
    },
    "label_pl_orbper": {
        "ko": "공전 주기 (일)",
        "en": "Orbital period (days)",
    },
    "label_min": {
        "ko": "최소",
        "en": "min",
    },
    "label_max": {
        "ko": "최대",
        "en": "max",
    },
    "btn_search": {
        "ko": "검색",
        "en": "Search",
    },
    "btn_change": {
        "ko": "행성 바꾸기",
        "en": "Change planet",
    },
    "loading_search": {
        "ko": "불러오는 중…",
        "en": "Loading…",
    },
    "status_results": {
        "ko": "{count}개 결과. 행성을 선택하세요.",
        "en": "{count} result(s). Click a row to visualize.",
    },
    "status_empty": {
        "ko": "조건에 맞는 행성이 없어요. 범위를 넓혀보세요.",
        "en": "No planets match. Widen filters.",
    },
    "status_error": {
        "ko": "오류: {error}",
        "en": "Error: {error}",
    },
    "select_error": {
        "ko": "선택할 수 없어요: {error}",
        "en": "Could not select: {error}",
    },
    "no_selection": {
        "ko": "선택된 행성이 없어요.",
        "en": "No planet selected.",
    },
    "info_orbit": {
        "ko": "궤도: {au:.3f} AU",
        "en": "Orbit: {au:.3f} AU",
    },
    "info_planet_radius": {
        "ko": "행성 반지름: {re:.2f} R⊕",
        "en": "Planet radius: {re:.2f} R⊕",
    },
    "info_eccentricity": {
        "ko": "이심률: {e}",
        "en": "Eccentricity: {e}",
    },
    "unknown": {
        "ko": "알 수 없음",
        "en": "unknown",
    },
    "info_goldilocks": {
        "ko": "골디락스: {inner:.2f} – {outer:.2f} AU",
        "en": "Goldilocks: {inner:.2f} – {outer:.2f} AU",
    },
    "hz_in": {
        "ko": "생명가능지대 안",
        "en": "In habitable zone",
    },
    "hz_too_close": {
        "ko": "생명가능지대 밖 (너무 가까움)",
        "en": "Outside habitable zone (too close)",
    },
    "hz_too_far": {
        "ko": "생명가능지대 밖 (너무 멂)",
        "en": "Outside habitable zone (too far)",
    },
    "clock": {
        "ko": "주기: {period:.1f}일 · 경과: {days:.1f}일 ({years:.2f}년)",
        "en": "Period: {period:.1f} days · Time: {days:.1f} days ({years:.2f} years)",
    },
}


def t(key: str, lang: str, **fmt: object) -> str:
    """Return the translated string for key in lang, formatted with fmt.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    text = entry.get(lang) or entry.get("en") or key
    return text.format(**fmt) if fmt else text
