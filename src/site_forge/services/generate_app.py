"""Generate-app use case — the prompt → application configuration pipeline.

Prompt parsing → theme compilation → business identity → SEO → assets →
content → deployment.  Every step is a pure function of the prompt text, so
the same prompt always produces an identical :class:`AppConfig`.
"""

from __future__ import annotations

import logging

from site_forge.domain.entities import AppConfig, AppPrompt, SocialTagsInput
from site_forge.domain.value_objects import BusinessIdentity
from site_forge.services.asset_generator import suggest_assets
from site_forge.services.content_generator import (
    generate_business_name,
    generate_content_structure,
    generate_deployment_config,
    generate_tagline,
)
from site_forge.services.prompt_parser import parse_prompt, parse_theme_prompt
from site_forge.services.seo_generator import generate_social_tags
from site_forge.services.theme_compiler import generate_theme

logger = logging.getLogger(__name__)


def generate_app(prompt: str | AppPrompt) -> AppConfig:
    """Build the complete configuration of a themed booking app.

    *prompt* is either raw text or an already parsed :class:`AppPrompt`
    (useful when the caller supplies the business name or domain
    separately).  Unrecognized keywords fall back to the default presets.
    """
    app_prompt = parse_prompt(prompt) if isinstance(prompt, str) else prompt

    theme_prompt = parse_theme_prompt(app_prompt.description)
    theme = generate_theme(theme_prompt)

    identity = BusinessIdentity.from_name(
        app_prompt.business_name or generate_business_name(theme_prompt.industry),
        app_prompt.domain,
    )

    seo = generate_social_tags(
        SocialTagsInput(
            business_name=identity.name,
            tagline=generate_tagline(theme_prompt.industry),
            domain=identity.domain,
            industry=theme_prompt.industry,
        )
    )

    config = AppConfig(
        name=identity.name,
        domain=identity.domain,
        theme=theme,
        seo=seo,
        assets=suggest_assets(theme),
        content=generate_content_structure(theme, identity.name),
        deployment=generate_deployment_config(app_prompt.features),
    )

    logger.info(
        "Generated app %r (%s): industry=%s color=%s style=%s features=%s",
        config.name,
        config.domain,
        theme_prompt.industry,
        theme_prompt.primary_color,
        theme_prompt.visual_style,
        ",".join(app_prompt.features) or "-",
    )
    return config
