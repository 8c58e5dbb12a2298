"""Prompt parser — free text in, structured prompts out.

Detection is plain lower-cased substring matching over the ordered catalogs
in :mod:`site_forge.domain.catalogs`.  The first matching entry wins, and a
prompt with no recognizable keyword resolves to the named defaults; parsing
never fails.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence, TypeVar

from site_forge.domain.catalogs import (
    COLOR_ORDER,
    DEFAULT_COLOR,
    DEFAULT_INDUSTRY,
    DEFAULT_STYLE,
    DEFAULT_VIBE,
    FEATURE_KEYWORDS,
    INDUSTRY_ORDER,
    STYLE_KEYWORDS,
    VIBE_KEYWORDS,
)
from site_forge.domain.entities import AppPrompt, ThemePrompt

_K = TypeVar("_K")

_QUOTED_NAME_RE = re.compile(r""""([^"]+)"|'([^']+)'""")
_DOMAIN_RE = re.compile(r"(?:domain|url|site):\s*([a-z0-9-]+\.[a-z]{2,})", re.IGNORECASE)


def _first_match(
    text: str,
    rules: Iterable[tuple[_K, Sequence[str]]],
    default: _K,
) -> _K:
    """Return the key of the first rule with a keyword contained in *text*."""
    for key, keywords in rules:
        if any(keyword in text for keyword in keywords):
            return key
    return default


def _industry_rules() -> Iterable[tuple[str, Sequence[str]]]:
    return ((slug, preset.keywords) for slug, preset in INDUSTRY_ORDER)


def _color_rules() -> Iterable[tuple[str, Sequence[str]]]:
    return ((name, (name,)) for name, _scheme in COLOR_ORDER)


# ── Public API ──────────────────────────────────────────────────────────────


def parse_theme_prompt(text: str) -> ThemePrompt:
    """Read industry, vibe, primary color and visual style out of *text*."""
    lower = text.lower()
    style = _first_match(lower, STYLE_KEYWORDS, DEFAULT_STYLE)
    return ThemePrompt(
        industry=_first_match(lower, _industry_rules(), DEFAULT_INDUSTRY),
        vibe=_first_match(lower, VIBE_KEYWORDS, DEFAULT_VIBE),
        primary_color=_first_match(lower, _color_rules(), DEFAULT_COLOR),
        visual_style=style.value,
    )


def parse_prompt(text: str) -> AppPrompt:
    """Extract explicit business name, domain and feature flags from *text*.

    The business name is the first quoted span (double or single quotes) and
    the domain must be introduced with ``domain:``, ``url:`` or ``site:``.
    """
    lower = text.lower()

    name_match = _QUOTED_NAME_RE.search(text)
    business_name = (name_match.group(1) or name_match.group(2)) if name_match else None

    domain_match = _DOMAIN_RE.search(text)
    domain = domain_match.group(1) if domain_match else None

    features = tuple(
        feature
        for feature, keywords in FEATURE_KEYWORDS
        if any(keyword in lower for keyword in keywords)
    )

    return AppPrompt(
        description=text,
        business_name=business_name,
        domain=domain,
        features=features,
    )


def suggest_industry(keywords: Sequence[str]) -> list[str]:
    """Return every industry whose keywords appear in *keywords*, in catalog order."""
    search_text = " ".join(keywords).lower()
    suggestions = [
        slug
        for slug, preset in INDUSTRY_ORDER
        if any(keyword in search_text for keyword in preset.keywords)
    ]
    return suggestions or [DEFAULT_INDUSTRY]
