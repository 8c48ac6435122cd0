"""User-facing messages for upstream failures.

Raw upstream error text is never shown to the caller. Two categories the
image API reports (a key flagged as leaked, an exhausted quota) get a
"try again later" hint; everything else gets a generic message. Both are
rendered in the caller's language, negotiated from ``Accept-Language``.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple


DEFAULT_LOCALE = "ko"

GENERIC = "generic"
RETRY_LATER = "retry_later"

MESSAGES: Dict[str, Dict[str, str]] = {
    "ko": {
        GENERIC: "이미지 생성 서버 오류",
        RETRY_LATER: "API 오류: 일시적인 문제이거나 사용량이 초과되었습니다. 잠시 후 다시 시도해주세요.",
    },
    "en": {
        GENERIC: "Image generation server error.",
        RETRY_LATER: "API error: a temporary problem occurred or the usage quota has been exceeded. Please try again later.",
    },
}

# Substrings of upstream error messages that map to RETRY_LATER. Matched verbatim.
RETRY_LATER_MARKERS: Tuple[str, ...] = (
    "API key was reported as leaked",
    "exceeded your current quota",
)


def _parse_accept_language(header: str) -> List[Tuple[str, float]]:
    out: List[Tuple[str, float]] = []
    for item in header.split(","):
        item = item.strip()
        if not item:
            continue
        tag, _, params = item.partition(";")
        q = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                q = float(params[2:])
            except ValueError:
                continue
        if q <= 0:
            continue
        primary = tag.strip().lower().split("-", 1)[0]
        if primary:
            out.append((primary, q))
    # sorted() is stable, so equal q keeps header order.
    return sorted(out, key=lambda t: t[1], reverse=True)


def negotiate_locale(accept_language: Optional[str], default: str = DEFAULT_LOCALE) -> str:
    fallback = default if default in MESSAGES else DEFAULT_LOCALE
    if not accept_language:
        return fallback
    for tag, _q in _parse_accept_language(accept_language):
        if tag in MESSAGES:
            return tag
    return fallback


def message(key: str, locale: str) -> str:
    catalog = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    return catalog[key]


def sanitize_upstream_message(raw: Optional[str], locale: str) -> str:
    if isinstance(raw, str) and any(marker in raw for marker in RETRY_LATER_MARKERS):
        return message(RETRY_LATER, locale)
    return message(GENERIC, locale)
