"""Read-only knowledge base: color schemes, industry and visual-style presets.

Detection in the prompt parser is first-match-wins, so iteration order is
part of the observable behavior.  Every ordered catalog is therefore declared
as a tuple of ``(key, value)`` pairs and exposed for lookups through a
``MappingProxyType`` built from that tuple.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from site_forge.domain.entities import (
    ColorScheme,
    IndustryPreset,
    Terminology,
    VisualStyle,
    VisualStylePreset,
)

# ── Colors ──────────────────────────────────────────────────────────────────

DEFAULT_COLOR = "blue"

COLOR_ORDER: tuple[tuple[str, ColorScheme], ...] = (
    ("orange", ColorScheme("#ea580c", "#f97316", "#fb923c", "#9a3412", "#7c2d12")),
    ("blue", ColorScheme("#2563eb", "#3b82f6", "#60a5fa", "#1e40af", "#1e3a8a")),
    ("purple", ColorScheme("#9333ea", "#a855f7", "#c084fc", "#6b21a8", "#581c87")),
    ("green", ColorScheme("#16a34a", "#22c55e", "#4ade80", "#166534", "#14532d")),
    ("red", ColorScheme("#dc2626", "#ef4444", "#f87171", "#991b1b", "#7f1d1d")),
    ("teal", ColorScheme("#0d9488", "#14b8a6", "#2dd4bf", "#115e59", "#134e4a")),
)

COLOR_SCHEMES: Mapping[str, ColorScheme] = MappingProxyType(dict(COLOR_ORDER))

# ── Industries ──────────────────────────────────────────────────────────────

DEFAULT_INDUSTRY = "consulting"

INDUSTRY_ORDER: tuple[tuple[str, IndustryPreset], ...] = (
    (
        "mtg-tournaments",
        IndustryPreset(
            slug="mtg-tournaments",
            keywords=("mtg tournaments", "mtg tournament", "magic the gathering", "mtg"),
            terminology=Terminology(
                book="register",
                service="format",
                client="warrior",
                booking="registration",
                schedule="battle schedule",
            ),
            suggested_colors=("orange", "red"),
            suggested_style=VisualStyle.MAXIMALIST,
            decorative_elements=(
                "crossed swords",
                "shields",
                "mana symbols",
                "ornamental dividers",
            ),
            business_name="The Gathering",
            tagline="Where Legends Are Forged",
            seo_description=(
                "Join {name} for epic Magic: The Gathering tournaments. Register for "
                "events, compete with fellow planeswalkers, and forge legendary battles."
            ),
            seo_keywords=(
                "magic the gathering",
                "mtg tournaments",
                "trading card game",
                "commander",
                "standard",
                "draft",
                "tournament registration",
            ),
        ),
    ),
    (
        "fitness",
        IndustryPreset(
            slug="fitness",
            keywords=("fitness", "gym", "personal training", "workout"),
            terminology=Terminology(
                book="schedule",
                service="class",
                client="member",
                booking="reservation",
                schedule="class schedule",
            ),
            suggested_colors=("blue", "green", "teal"),
            suggested_style=VisualStyle.MODERN,
            decorative_elements=("energy waves", "pulse lines", "strength icons"),
            business_name="FitLife Studio",
            tagline="Transform Your Life",
            seo_description=(
                "Transform your fitness journey at {name}. Book personal training "
                "sessions, join group classes, and achieve your health goals."
            ),
            seo_keywords=(
                "fitness",
                "personal training",
                "gym",
                "workout classes",
                "health",
                "wellness",
                "training sessions",
            ),
        ),
    ),
    (
        "consulting",
        IndustryPreset(
            slug="consulting",
            keywords=("consulting", "consultancy", "consultant"),
            terminology=Terminology(
                book="schedule",
                service="consultation",
                client="client",
                booking="appointment",
                schedule="calendar",
            ),
            suggested_colors=("blue", "purple"),
            suggested_style=VisualStyle.CORPORATE,
            decorative_elements=("clean lines", "subtle gradients", "professional icons"),
            business_name="Strategic Insights",
            tagline="Driving Business Success",
            seo_description=(
                "{name} provides expert consulting services. Schedule consultations "
                "with industry professionals and drive your business success."
            ),
            seo_keywords=(
                "consulting",
                "business consulting",
                "professional services",
                "expert advice",
                "strategy",
                "consultation",
            ),
        ),
    ),
    (
        "wellness",
        IndustryPreset(
            slug="wellness",
            keywords=("wellness", "massage", "yoga", "meditation"),
            terminology=Terminology(
                book="book",
                service="session",
                client="client",
                booking="appointment",
                schedule="schedule",
            ),
            suggested_colors=("green", "teal", "purple"),
            suggested_style=VisualStyle.MINIMALIST,
            decorative_elements=("nature elements", "soft curves", "calming patterns"),
            business_name="Serenity Wellness",
            tagline="Balance Mind, Body & Spirit",
            seo_description=(
                "Experience holistic wellness at {name}. Book massage therapy, yoga "
                "sessions, and wellness consultations for mind, body, and spirit."
            ),
            seo_keywords=(
                "wellness",
                "massage",
                "spa",
                "holistic health",
                "yoga",
                "meditation",
                "therapy",
            ),
        ),
    ),
    (
        "education",
        IndustryPreset(
            slug="education",
            keywords=("education", "tutoring", "courses", "academy"),
            terminology=Terminology(
                book="enroll",
                service="course",
                client="student",
                booking="enrollment",
                schedule="course schedule",
            ),
            suggested_colors=("blue", "purple", "teal"),
            suggested_style=VisualStyle.MODERN,
            decorative_elements=("books", "graduation caps", "learning icons"),
            business_name="LearnHub Academy",
            tagline="Unlock Your Potential",
            seo_description=(
                "Learn with {name}. Enroll in courses, schedule tutoring sessions, and "
                "unlock your full potential with expert instruction."
            ),
            seo_keywords=(
                "education",
                "tutoring",
                "courses",
                "learning",
                "teaching",
                "instruction",
                "training",
            ),
        ),
    ),
)

INDUSTRY_PRESETS: Mapping[str, IndustryPreset] = MappingProxyType(dict(INDUSTRY_ORDER))

GENERIC_BUSINESS_NAME = "Professional Services"
GENERIC_TAGLINE = "Excellence in Service"
GENERIC_SEO_DESCRIPTION = (
    "Book professional services with {name}. Expert quality, easy scheduling, "
    "and exceptional results."
)
GENERIC_SEO_KEYWORDS: tuple[str, ...] = (
    "booking",
    "appointments",
    "scheduling",
    "professional services",
)

# ── Visual styles ───────────────────────────────────────────────────────────

DEFAULT_STYLE = VisualStyle.MODERN

VISUAL_STYLES: Mapping[VisualStyle, VisualStylePreset] = MappingProxyType(
    {
        VisualStyle.MAXIMALIST: VisualStylePreset(
            animations=("particles", "glow-effects", "float", "shimmer", "pulse-glow"),
            effects=("multi-layer-backgrounds", "text-stroke", "drop-shadow-xl", "backdrop-blur"),
            particle_count=12,
            heading_size="text-8xl lg:text-9xl",
            spacing="loose",
        ),
        VisualStyle.MINIMALIST: VisualStylePreset(
            animations=("fade", "slide"),
            effects=("subtle-shadow", "clean-borders"),
            particle_count=0,
            heading_size="text-4xl lg:text-5xl",
            spacing="tight",
        ),
        VisualStyle.MODERN: VisualStylePreset(
            animations=("fade", "slide", "scale"),
            effects=("gradient-backgrounds", "shadow-lg", "backdrop-blur-sm"),
            particle_count=4,
            heading_size="text-5xl lg:text-6xl",
            spacing="normal",
        ),
        VisualStyle.CORPORATE: VisualStylePreset(
            animations=("fade",),
            effects=("subtle-shadow", "professional-borders"),
            particle_count=0,
            heading_size="text-4xl lg:text-5xl",
            spacing="normal",
        ),
    }
)

# ── Prompt keyword rules (ordered, first match wins) ────────────────────────

STYLE_KEYWORDS: tuple[tuple[VisualStyle, tuple[str, ...]], ...] = (
    (VisualStyle.MAXIMALIST, ("maximalist", "epic", "dramatic")),
    (VisualStyle.MINIMALIST, ("minimalist", "clean", "simple")),
    (VisualStyle.CORPORATE, ("corporate", "professional")),
)

DEFAULT_VIBE = "professional"

VIBE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("epic warrior", ("warrior", "epic", "battle")),
    ("modern sleek", ("modern", "sleek")),
    ("calm peaceful", ("calm", "peaceful")),
)

FEATURE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("payments", ("payment", "stripe")),
    ("calendar", ("calendar", "scheduling")),
    ("email", ("email", "notification")),
    ("multi-tenant", ("multi-tenant",)),
    ("analytics", ("analytics",)),
)
