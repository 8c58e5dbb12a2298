"""SEO and social-media tag generation."""

from __future__ import annotations

import json
from dataclasses import replace
from typing import Sequence

from site_forge.domain.catalogs import (
    GENERIC_SEO_DESCRIPTION,
    GENERIC_SEO_KEYWORDS,
    INDUSTRY_PRESETS,
)
from site_forge.domain.entities import SEOConfig, SocialTagsInput


def _description(industry: str, business_name: str) -> str:
    preset = INDUSTRY_PRESETS.get(industry)
    template = preset.seo_description if preset else GENERIC_SEO_DESCRIPTION
    return template.format(name=business_name)


def _keywords(industry: str, business_name: str) -> tuple[str, ...]:
    preset = INDUSTRY_PRESETS.get(industry)
    base = preset.seo_keywords if preset else GENERIC_SEO_KEYWORDS
    return (*base, business_name.lower())


def generate_social_tags(data: SocialTagsInput) -> SEOConfig:
    """Build page, Open Graph and Twitter tags for a business.

    Description and keywords come from the industry tables unless given
    explicitly; unknown industries get the generic booking copy.
    """
    description = data.description or _description(data.industry, data.business_name)
    keywords = data.keywords or _keywords(data.industry, data.business_name)
    image = f"https://{data.domain}/og-image.jpg"

    return SEOConfig(
        title=f"{data.business_name} - {data.tagline}",
        description=description,
        keywords=tuple(keywords),
        og_title=f"{data.business_name} | {data.tagline}",
        og_description=description,
        og_image=image,
        twitter_title=data.business_name,
        twitter_description=description,
        twitter_image=image,
        twitter_card="summary_large_image",
        canonical=f"https://{data.domain}",
    )


def generate_structured_data(
    config: SEOConfig,
    name: str,
    business_type: str = "LocalBusiness",
    *,
    address: str | None = None,
    phone: str | None = None,
    email: str | None = None,
) -> str:
    """Return a schema.org JSON-LD block for rich search snippets."""
    data: dict[str, str | None] = {
        "@context": "https://schema.org",
        "@type": business_type or "LocalBusiness",
        "name": name,
        "description": config.description,
        "url": config.canonical,
        "image": config.og_image,
    }
    if address:
        data["address"] = address
    if phone:
        data["telephone"] = phone
    if email:
        data["email"] = email
    return json.dumps(data, indent=2)


def generate_robots_txt(domain: str) -> str:
    return f"""# https://{domain}/robots.txt
User-agent: *
Allow: /

Sitemap: https://{domain}/sitemap.xml
"""


def generate_sitemap(domain: str, pages: Sequence[str]) -> str:
    """Return a sitemap with weekly change frequency; the home page gets priority 1.0."""
    urls = "\n".join(
        f"""  <url>
    <loc>https://{domain}{page}</loc>
    <changefreq>weekly</changefreq>
    <priority>{"1.0" if page == "/" else "0.8"}</priority>
  </url>"""
        for page in pages
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{urls}
</urlset>
"""


def generate_page_meta(
    base: SEOConfig,
    page_title: str,
    page_description: str | None = None,
    page_path: str | None = None,
) -> SEOConfig:
    """Derive the tags of a single page from the site-wide configuration."""
    domain = (base.canonical or "").replace("https://", "")
    url = f"https://{domain}{page_path}" if page_path else base.canonical
    description = page_description or base.description
    site_name = base.title.split(" - ")[0]

    return replace(
        base,
        title=f"{page_title} | {site_name}",
        description=description,
        og_title=page_title,
        og_description=description,
        twitter_title=page_title,
        twitter_description=description,
        canonical=url,
    )
