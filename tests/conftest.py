"""Shared fixtures: sample prompts, compiled themes and app configs."""

import pytest

from site_forge.domain.entities import SourceFile
from site_forge.services.generate_app import generate_app
from site_forge.services.prompt_parser import parse_theme_prompt
from site_forge.services.theme_compiler import generate_theme

MTG_PROMPT = (
    "MTG tournament platform called Bosca's Slingers with epic warrior theme "
    "and orange colors"
)

PROMPTS = [
    MTG_PROMPT,
    "fitness studio with modern blue theme and payment support",
    "consulting firm with professional purple branding",
    "calm wellness retreat offering yoga, clean green look",
    "education academy for tutoring with teal accents and analytics",
    "a generic booking site",
    "",
    "   ",
    "ÜNÏCÖDÉ ✨ prompt -- with :: odd; punctuation",
]


@pytest.fixture
def mtg_theme():
    return generate_theme(parse_theme_prompt(MTG_PROMPT))


@pytest.fixture
def mtg_config():
    return generate_app(MTG_PROMPT)


@pytest.fixture
def template_files():
    """Leftovers from the template the platform was forked from."""
    return [
        SourceFile(
            path="src/pages/About.tsx",
            content=(
                "export default function About() {\n"
                "  return (\n"
                "    <div>\n"
                "      <h1>About Claire Hamilton</h1>\n"
                "      <button>Book Your Service</button>\n"
                "    </div>\n"
                "  );\n"
                "}\n"
            ),
        ),
        SourceFile(
            path="index.html",
            content=(
                "<!DOCTYPE html>\n"
                "<html>\n"
                "  <head>\n"
                "    <title>[Your Business Name]</title>\n"
                "  </head>\n"
                "</html>\n"
            ),
        ),
        SourceFile(path="src/utils/math.ts", content="export const add = (a, b) => a + b;\n"),
    ]
