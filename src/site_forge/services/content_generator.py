"""Content structure, business identity and deployment defaults.

Copy is produced by templating the theme's terminology into fixed page
skeletons, so an MTG site says "register your format" where the generic
template says "book your service".
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Sequence

from site_forge.domain.catalogs import (
    GENERIC_BUSINESS_NAME,
    GENERIC_TAGLINE,
    INDUSTRY_PRESETS,
)
from site_forge.domain.entities import (
    BuildSettings,
    ContentStructure,
    CopyTemplates,
    DeploymentConfig,
    FeatureItem,
    FeaturesCopy,
    FormConfig,
    FormField,
    FormStep,
    HeroCopy,
    PageConfig,
    PricingCopy,
    SectionConfig,
    SectionType,
    ThemeConfig,
)

_FEATURE_ENV_VARS: tuple[tuple[str, str, str], ...] = (
    ("payments", "STRIPE_PUBLIC_KEY", "pk_test_..."),
    ("analytics", "VITE_GA_MEASUREMENT_ID", "G-..."),
)


def generate_business_name(industry: str) -> str:
    preset = INDUSTRY_PRESETS.get(industry)
    return preset.business_name if preset else GENERIC_BUSINESS_NAME


def generate_tagline(industry: str) -> str:
    preset = INDUSTRY_PRESETS.get(industry)
    return preset.tagline if preset else GENERIC_TAGLINE


def _copy(theme: ThemeConfig, business_name: str) -> CopyTemplates:
    term = theme.terminology
    return CopyTemplates(
        hero=HeroCopy(
            headline=f"Welcome to {business_name}",
            subheadline=f"{term.book} your {term.service} today",
            cta=f"{term.book} Now",
        ),
        features=FeaturesCopy(
            title=f"Why Choose {business_name}",
            items=(
                FeatureItem("Expert Service", "Professional quality you can trust"),
                FeatureItem("Easy Booking", f"{term.book} online in minutes"),
                FeatureItem("Flexible Scheduling", "Times that work for you"),
            ),
        ),
        pricing=PricingCopy(title="Simple, Transparent Pricing"),
    )


def _frozen(content: dict[str, Any]) -> MappingProxyType[str, Any]:
    return MappingProxyType(content)


def _pages(theme: ThemeConfig, business_name: str, copy: CopyTemplates) -> tuple[PageConfig, ...]:
    term = theme.terminology
    hero_background = "particles" if theme.animations.particle_system is not None else "gradient"

    home = PageConfig(
        name="Home",
        route="/",
        title=business_name,
        sections=(
            SectionConfig(
                SectionType.HERO,
                _frozen(
                    {
                        "headline": copy.hero.headline,
                        "subheadline": copy.hero.subheadline,
                        "cta": copy.hero.cta,
                        "background_style": hero_background,
                    }
                ),
            ),
            SectionConfig(
                SectionType.FEATURES,
                _frozen(
                    {
                        "title": copy.features.title,
                        "items": tuple(
                            _frozen({"title": item.title, "description": item.description})
                            for item in copy.features.items
                        ),
                    }
                ),
            ),
            SectionConfig(
                SectionType.CTA,
                _frozen(
                    {
                        "title": "Ready to Get Started?",
                        "description": f"{term.book} your {term.service} today",
                        "button_text": f"{term.book} Now",
                    }
                ),
            ),
        ),
    )
    # Service items and pricing tiers are filled in from tenant data later.
    services = PageConfig(
        name="Services",
        route="/services",
        title=f"Our {term.service}s",
        sections=(
            SectionConfig(
                SectionType.FEATURES,
                _frozen({"title": f"Available {term.service}s", "items": ()}),
            ),
        ),
    )
    pricing = PageConfig(
        name="Pricing",
        route="/pricing",
        title="Pricing",
        sections=(
            SectionConfig(SectionType.PRICING, _frozen({"title": copy.pricing.title, "tiers": ()})),
        ),
    )
    about = PageConfig(
        name="About",
        route="/about",
        title=f"About {business_name}",
        sections=(
            SectionConfig(
                SectionType.ABOUT,
                _frozen(
                    {
                        "title": f"About {business_name}",
                        "story": "Learn more about our journey and values",
                    }
                ),
            ),
        ),
    )
    return (home, services, pricing, about)


def _booking_form(theme: ThemeConfig) -> FormConfig:
    term = theme.terminology
    return FormConfig(
        id="booking",
        title=f"{term.book} Your {term.service}",
        steps=(
            FormStep(
                "Select Date & Time",
                (
                    FormField("date", "Date", "date", True),
                    FormField("time", "Time", "time", True),
                ),
            ),
            FormStep(
                f"Choose {term.service}",
                (FormField("service", term.service, "select", True, options=()),),
            ),
            FormStep(
                "Your Information",
                (
                    FormField("name", "Full Name", "text", True),
                    FormField("email", "Email", "email", True),
                    FormField("phone", "Phone", "tel", True),
                ),
            ),
            FormStep(
                "Confirm & Pay",
                (FormField("notes", "Additional Notes", "textarea", False),),
            ),
        ),
    )


# ── Public API ──────────────────────────────────────────────────────────────


def generate_content_structure(theme: ThemeConfig, business_name: str) -> ContentStructure:
    """Pages, copy blocks and the booking form for *business_name*."""
    copy = _copy(theme, business_name)
    return ContentStructure(
        pages=_pages(theme, business_name, copy),
        copy=copy,
        forms=(_booking_form(theme),),
    )


def generate_deployment_config(features: Sequence[str]) -> DeploymentConfig:
    """Static platform defaults plus env vars for the requested features."""
    env_vars = {"VITE_API_BASE_URL": "https://your-api.azurewebsites.net/api"}
    for feature, key, value in _FEATURE_ENV_VARS:
        if feature in features:
            env_vars[key] = value

    return DeploymentConfig(
        platform="azure",
        region="eastus",
        env_vars=MappingProxyType(env_vars),
        build_settings=BuildSettings(
            build_command="npm run build",
            output_directory="dist",
            install_command="npm ci",
        ),
    )
