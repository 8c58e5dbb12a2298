"""File structure emitter — renders an :class:`AppConfig` into file contents.

Output is a mapping of relative path → text.  Nothing is written to disk
here; persisting the files is the caller's job.
"""

from __future__ import annotations

import html
import json

from site_forge.domain.entities import AppConfig, DeploymentConfig
from site_forge.domain.exceptions import InvalidAppConfigError
from site_forge.services.seo_generator import generate_robots_txt, generate_sitemap
from site_forge.services.theme_compiler import generate_tailwind_config


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _index_html(config: AppConfig) -> str:
    seo = config.seo
    domain = _attr(config.domain)
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <link rel="icon" type="image/svg+xml" href="/favicon.svg" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />

    <!-- Primary Meta Tags -->
    <title>{_attr(seo.title)}</title>
    <meta name="title" content="{_attr(seo.title)}" />
    <meta name="description" content="{_attr(seo.description)}" />

    <!-- Open Graph / Facebook -->
    <meta property="og:type" content="website" />
    <meta property="og:url" content="https://{domain}/" />
    <meta property="og:title" content="{_attr(seo.og_title)}" />
    <meta property="og:description" content="{_attr(seo.og_description)}" />
    <meta property="og:image" content="{_attr(seo.og_image)}" />

    <!-- Twitter -->
    <meta property="twitter:card" content="{_attr(seo.twitter_card)}" />
    <meta property="twitter:url" content="https://{domain}/" />
    <meta property="twitter:title" content="{_attr(seo.twitter_title)}" />
    <meta property="twitter:description" content="{_attr(seo.twitter_description)}" />
    <meta property="twitter:image" content="{_attr(seo.twitter_image)}" />

    <!-- Theme Color -->
    <meta name="theme-color" content="{_attr(config.theme.colors.primary)}" />
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="/src/main.tsx"></script>
  </body>
</html>
"""


def _content_config(config: AppConfig) -> str:
    seo = config.seo
    return f"""import type {{ TenantContent }} from "../../core/types/tenant.types";

export const content: TenantContent = {{
  name: {json.dumps(config.name)},
  tagline: {json.dumps(seo.description)},
  email: "contact@{config.domain}",
  location: "Your City",
  website: "https://{config.domain}",

  services: [],

  seo: {{
    title: {json.dumps(seo.title)},
    description: {json.dumps(seo.description)},
    keywords: {json.dumps(list(seo.keywords))},
  }},
}};
"""


def _home_page(config: AppConfig) -> str:
    theme = config.theme
    colors = theme.colors
    typography = theme.typography
    hero = config.content.copy.hero
    return f"""import {{ useState }} from 'react';
import BookingModal from '../components/BookingModal';

export default function Home() {{
  const [isBookingOpen, setIsBookingOpen] = useState(false);

  return (
    <div className="min-h-screen bg-gradient-to-b from-[{colors.background.from_}] via-[{colors.background.via}] to-[{colors.background.to}]">
      {{/* Hero Section */}}
      <section className="relative min-h-screen flex items-center justify-center px-4 overflow-hidden">
        <div className="max-w-7xl mx-auto text-center relative z-10">
          <h1 className="font-heading {typography.heading_style} font-{typography.heading_weight} tracking-{typography.letter_spacing} text-6xl lg:text-8xl mb-6 text-transparent bg-clip-text bg-gradient-to-r from-[{colors.primary}] to-[{colors.secondary}]">
            {{{json.dumps(hero.headline)}}}
          </h1>
          <p className="text-xl lg:text-2xl text-[{colors.text.secondary}] mb-12 max-w-3xl mx-auto">
            {{{json.dumps(hero.subheadline)}}}
          </p>
          <button
            onClick={{() => setIsBookingOpen(true)}}
            className="{theme.components.buttons.primary} px-10 py-5 rounded-xl text-lg transform hover:scale-105 transition-all duration-300"
          >
            {{{json.dumps(hero.cta)}}}
          </button>
        </div>
      </section>

      <BookingModal
        isOpen={{isBookingOpen}}
        onClose={{() => setIsBookingOpen(false)}}
      />
    </div>
  );
}}
"""


def _env_file(deployment: DeploymentConfig) -> str:
    return "\n".join(f"{key}={value}" for key, value in deployment.env_vars.items())


# ── Public API ──────────────────────────────────────────────────────────────


def generate_file_structure(config: AppConfig) -> dict[str, str]:
    """Render every file of the generated app.

    Raises :class:`InvalidAppConfigError` when *config* is not an
    :class:`AppConfig`; the result is built completely before it is
    returned, so callers never see a partial file set.
    """
    if not isinstance(config, AppConfig):
        raise InvalidAppConfigError(
            f"generate_file_structure() expects an AppConfig, got {type(config).__name__}"
        )

    routes = [page.route for page in config.content.pages]
    files = {
        "index.html": _index_html(config),
        "tailwind.config.js": generate_tailwind_config(config.theme),
        "src/tenants/custom/content.config.ts": _content_config(config),
        "src/pages/Home.tsx": _home_page(config),
        ".env": _env_file(config.deployment),
        "public/robots.txt": generate_robots_txt(config.domain),
        "public/sitemap.xml": generate_sitemap(config.domain, routes),
    }
    return files
