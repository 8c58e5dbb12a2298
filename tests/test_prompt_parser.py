"""Prompt parser: ordered first-match detection, defaults, outer prompt fields."""

import pytest

from conftest import MTG_PROMPT, PROMPTS
from site_forge.domain.catalogs import COLOR_SCHEMES, INDUSTRY_PRESETS
from site_forge.domain.entities import ThemePrompt, VisualStyle
from site_forge.services.prompt_parser import parse_prompt, parse_theme_prompt, suggest_industry


def test_mtg_prompt_detection():
    prompt = parse_theme_prompt(MTG_PROMPT)
    assert prompt == ThemePrompt(
        industry="mtg-tournaments",
        vibe="epic warrior",
        primary_color="orange",
        visual_style="maximalist",
    )


def test_defaults_when_nothing_matches():
    prompt = parse_theme_prompt("a generic booking site")
    assert prompt.industry == "consulting"
    assert prompt.primary_color == "blue"
    assert prompt.visual_style == "modern"
    assert prompt.vibe == "professional"


def test_detection_is_case_insensitive():
    prompt = parse_theme_prompt("FITNESS Studio, PURPLE, Minimalist")
    assert prompt.industry == "fitness"
    assert prompt.primary_color == "purple"
    assert prompt.visual_style == "minimalist"


def test_industry_first_match_follows_catalog_order():
    # both "fitness" and "education" appear; fitness is earlier in the catalog
    assert parse_theme_prompt("education and fitness center").industry == "fitness"
    assert parse_theme_prompt("fitness and education center").industry == "fitness"


def test_color_first_match_follows_catalog_order():
    # orange precedes teal in the catalog regardless of position in the text
    assert parse_theme_prompt("teal and orange").primary_color == "orange"


def test_color_match_is_substring_based():
    # Known limitation: "red" inside "tailored" counts as a color keyword.
    assert parse_theme_prompt("tailored consulting").primary_color == "red"


@pytest.mark.parametrize(
    "text, style",
    [
        ("dramatic and minimalist", "maximalist"),
        ("clean corporate look", "minimalist"),
        ("professional firm", "corporate"),
        ("sleek", "modern"),
    ],
)
def test_style_rules_in_order(text, style):
    assert parse_theme_prompt(text).visual_style == style


@pytest.mark.parametrize(
    "text, vibe",
    [
        ("battle arena", "epic warrior"),
        ("sleek gym", "modern sleek"),
        ("peaceful spa", "calm peaceful"),
        ("accounting", "professional"),
    ],
)
def test_vibe_rules(text, vibe):
    assert parse_theme_prompt(text).vibe == vibe


@pytest.mark.parametrize("text", PROMPTS)
def test_parse_theme_prompt_always_resolves_to_catalog_entries(text):
    prompt = parse_theme_prompt(text)
    assert prompt.industry in INDUSTRY_PRESETS
    assert prompt.primary_color in COLOR_SCHEMES
    assert VisualStyle(prompt.visual_style) in VisualStyle
    assert prompt.vibe


def test_parse_prompt_quoted_name_and_domain():
    app_prompt = parse_prompt('Fitness studio called "Iron Temple" with stripe, domain: irontemple.fit')
    assert app_prompt.business_name == "Iron Temple"
    assert app_prompt.domain == "irontemple.fit"
    assert app_prompt.features == ("payments",)
    assert app_prompt.description.startswith("Fitness studio")


def test_parse_prompt_single_quotes():
    assert parse_prompt("yoga studio 'Still Water'").business_name == "Still Water"


def test_parse_prompt_lone_apostrophe_is_not_a_name():
    app_prompt = parse_prompt(MTG_PROMPT)
    assert app_prompt.business_name is None
    assert app_prompt.domain is None
    assert app_prompt.features == ()


def test_parse_prompt_features_in_catalog_order():
    app_prompt = parse_prompt(
        "multi-tenant analytics dashboard with email notifications, calendar and payments"
    )
    assert app_prompt.features == ("payments", "calendar", "email", "multi-tenant", "analytics")


def test_suggest_industry():
    assert suggest_industry(["Yoga", "and", "fitness"]) == ["fitness", "wellness"]
    assert suggest_industry(["bakery"]) == ["consulting"]
    assert suggest_industry([]) == ["consulting"]
