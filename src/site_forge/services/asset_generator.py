"""Asset suggestions — image specs, logo and favicon guidance for a theme.

Every suggestion branches on a single signal: whether the theme carries a particle
system.  Themes with particles get the bold "epic" art direction, all other
themes the clean one.
"""

from __future__ import annotations

from site_forge.domain.entities import (
    AdditionalAsset,
    AssetSuggestions,
    DesignSuggestion,
    FaviconFormat,
    FaviconSpec,
    HeroImageSpec,
    LogoSpec,
    LogoVariation,
    OGImageSpec,
    ThemeConfig,
    TypographySuggestion,
)


def _is_epic(theme: ThemeConfig) -> bool:
    return theme.animations.particle_system is not None


def _lead_decoration(theme: ThemeConfig) -> str:
    return theme.typography.decorative_elements[0]


def _og_image(theme: ThemeConfig) -> OGImageSpec:
    epic = _is_epic(theme)
    colors = theme.colors
    typography = theme.typography

    if epic:
        design = DesignSuggestion(
            layout="Dramatic hero composition with layered elements",
            composition=(
                "Multi-layered background, large title text, decorative elements, "
                "particle effects"
            ),
            mood="Epic, dramatic, bold",
            elements=(
                "Large title text",
                "Logo/icon",
                _lead_decoration(theme),
                "Gradient overlays",
                "Glow effects",
            ),
        )
        extra_elements: tuple[str, ...] = ("Decorative elements", "Particle effects visual")
        third_example = f"Decorative: {_lead_decoration(theme)} in corners"
    else:
        design = DesignSuggestion(
            layout="Clean centered design with subtle gradients",
            composition=(
                "Gradient background, centered logo, clear typography, minimalist borders"
            ),
            mood="Professional, clean, modern",
            elements=("Logo", "Business name", "Tagline", "Subtle gradient", "Clean borders"),
        )
        extra_elements = ("Clean borders", "Subtle shadows")
        third_example = f"Border: 1px solid {colors.border}"

    return OGImageSpec(
        dimensions="1200x630px",
        aspect_ratio="1.91:1",
        file_size="<1MB (ideally 200-300KB)",
        format=("JPG (recommended)", "PNG", "WebP"),
        design=design,
        colors=(
            colors.primary,
            colors.secondary,
            colors.accent,
            colors.background.from_,
            colors.background.via,
        ),
        typography=TypographySuggestion(
            title_font=typography.heading_font,
            title_size="72-96px" if epic else "48-64px",
            subtitle_font=typography.body_font,
            subtitle_size="24-32px",
            style=typography.heading_style,
        ),
        elements=(
            "Business name/logo",
            "Tagline or key message",
            "Brand colors and gradients",
            *extra_elements,
        ),
        examples=(
            f'Center: "{theme.terminology.book} Your {theme.terminology.service}" '
            f"in large {typography.heading_font} font",
            f"Background: Gradient from {colors.primary} to {colors.secondary}",
            third_example,
        ),
    )


def _favicon(theme: ThemeConfig) -> FaviconSpec:
    epic = _is_epic(theme)
    if epic:
        symbol = _lead_decoration(theme).split(" ")[0]
        style = f"Iconic symbol (e.g., {symbol}) on gradient background"
    else:
        style = "Simple letter monogram or geometric icon on solid background"

    return FaviconSpec(
        formats=(
            FaviconFormat("16x16", "PNG", "Browser tab"),
            FaviconFormat("32x32", "PNG", "Browser tab (retina)"),
            FaviconFormat("48x48", "PNG", "Windows tiles"),
            FaviconFormat("180x180", "PNG", "Apple Touch Icon"),
            FaviconFormat("Scalable", "SVG", "Modern browsers"),
        ),
        design=DesignSuggestion(
            layout="Centered icon or initials",
            composition=(
                "Bold symbolic icon with decorative touches"
                if epic
                else "Simple geometric icon or letter monogram"
            ),
            mood="Bold, recognizable, iconic" if epic else "Clean, professional, minimal",
            elements=(
                ("Main icon/symbol", "Border/frame", "Accent details")
                if epic
                else ("Letter monogram or simple icon", "Clean background")
            ),
        ),
        colors=(theme.colors.primary, theme.colors.secondary, theme.colors.background.from_),
        style=style,
    )


def _hero_images(theme: ThemeConfig) -> tuple[HeroImageSpec, ...]:
    epic = _is_epic(theme)
    colors = theme.colors

    if epic:
        background = HeroImageSpec(
            name="Hero Background",
            dimensions="1920x1080px (Full HD) or 3840x2160px (4K)",
            style="Epic dramatic scene",
            description=(
                f"Atmospheric scene matching {_lead_decoration(theme)} theme, with depth "
                f"and drama. Dark tones with {colors.primary} accents."
            ),
            suggested_sources=(
                "Unsplash.com (search: epic landscape, dramatic sky, fantasy scene)",
                "Pexels.com (search: dramatic scene, atmospheric)",
                "Midjourney/DALL-E (generate custom)",
            ),
        )
        overlay = HeroImageSpec(
            name="Particle/Overlay Texture",
            dimensions="512x512px (tileable)",
            style="Subtle particle or texture overlay",
            description=(
                "Semi-transparent particles, embers, or atmospheric effects to overlay "
                "on hero section"
            ),
            suggested_sources=(
                "Generate with CSS animations",
                "Particle.js configurations",
                "Custom SVG animations",
            ),
        )
        return (background, overlay)

    return (
        HeroImageSpec(
            name="Hero Background",
            dimensions="1920x1080px (Full HD) or 3840x2160px (4K)",
            style="Clean modern gradient",
            description=(
                f"Clean gradient background from {colors.background.from_} to "
                f"{colors.background.via} with subtle patterns."
            ),
            suggested_sources=(
                "Unsplash.com (search: gradient, abstract, minimal background)",
                "Pexels.com (search: clean background, modern)",
                "Midjourney/DALL-E (generate custom)",
            ),
        ),
    )


def _logo(theme: ThemeConfig) -> LogoSpec:
    epic = _is_epic(theme)
    return LogoSpec(
        style=(
            "Bold iconic design with decorative elements"
            if epic
            else "Clean modern typography or simple icon"
        ),
        elements=(
            (
                "Primary symbol/icon",
                "Business name in display font",
                "Decorative accents",
                "Tagline (optional)",
            )
            if epic
            else (
                "Clean wordmark or icon",
                "Business name in modern font",
                "Simple geometric shapes",
            )
        ),
        colors=(theme.colors.primary, theme.colors.secondary, theme.colors.text.heading),
        variations=(
            LogoVariation(
                "Full Logo",
                "Complete logo with icon and text",
                "Website header, marketing materials, full-size displays",
            ),
            LogoVariation(
                "Icon Only",
                "Just the symbol/icon without text",
                "Favicon, app icon, social media profile",
            ),
            LogoVariation("Wordmark", "Text-only version", "Narrow spaces, mobile header"),
            LogoVariation(
                "Monochrome",
                "Single-color version",
                "Print, watermarks, limited-color contexts",
            ),
        ),
    )


def _additional_assets(theme: ThemeConfig) -> tuple[AdditionalAsset, ...]:
    return (
        AdditionalAsset(
            name="Loading Spinner",
            type="SVG animation",
            purpose="Show during async operations",
            specs=f"Circular spinner in {theme.colors.primary} color, 40x40px",
        ),
        AdditionalAsset(
            name="Default Avatar",
            type="PNG/SVG",
            purpose="Placeholder for user profiles",
            specs=f"Simple icon on {theme.colors.background.via} background, 200x200px",
        ),
        AdditionalAsset(
            name="Email Template Header",
            type="PNG",
            purpose="Branding for email notifications",
            specs="600px wide, logo + brand colors, ~150px height",
        ),
        AdditionalAsset(
            name="404 Illustration",
            type="SVG/PNG",
            purpose="Error page visual",
            specs="Thematic illustration matching brand style, 400x300px",
        ),
    )


# ── Public API ──────────────────────────────────────────────────────────────


def suggest_assets(theme: ThemeConfig) -> AssetSuggestions:
    """Return the full set of asset specifications for *theme*."""
    return AssetSuggestions(
        og_image=_og_image(theme),
        favicon=_favicon(theme),
        hero_images=_hero_images(theme),
        logo=_logo(theme),
        additional_assets=_additional_assets(theme),
    )


def generate_asset_checklist(assets: AssetSuggestions) -> str:
    """Render the suggestions as a markdown checklist."""
    og = assets.og_image
    favicons = "\n".join(f"- [ ] {f.size} {f.format} - {f.purpose}" for f in assets.favicon.formats)
    logos = "\n".join(f"- [ ] {v.name} - {v.description}" for v in assets.logo.variations)
    heroes = "\n".join(
        f"- [ ] {h.name} ({h.dimensions}) - {h.description}" for h in assets.hero_images
    )
    extras = "\n".join(f"- [ ] {a.name} - {a.purpose}" for a in assets.additional_assets)

    return f"""# Asset Creation Checklist

## Required Assets

### 1. Open Graph Image (og-image.jpg)
- [ ] Dimensions: {og.dimensions}
- [ ] Format: {", ".join(og.format)}
- [ ] File size: {og.file_size}
- [ ] Design elements: {", ".join(og.elements)}
- [ ] Colors: {", ".join(og.colors)}
- [ ] Typography: {og.typography.title_font}

### 2. Favicon (Multiple Formats)
{favicons}

### 3. Logo Variations
{logos}

### 4. Hero Images
{heroes}

### 5. Additional Assets
{extras}

## Design Guidelines
- Primary color: {og.colors[0]}
- Secondary color: {og.colors[1]}
- Font family: {og.typography.title_font}
- Style: {assets.favicon.design.mood}

## Recommended Tools
- Figma/Canva: For og-image and graphics
- Favicon.io: For generating favicon sets
- Midjourney/DALL-E: For custom illustrations
- Unsplash/Pexels: For stock photography
- SVG editors: For scalable icons"""


def generate_asset_css(assets: AssetSuggestions) -> str:
    """CSS snippet wiring the hero background and logo, plus favicon link tags."""
    favicon_links = "\n".join(
        f'<link rel="icon" type="image/png" sizes="{f.size}" href="/favicon-{f.size}.png" />'
        for f in assets.favicon.formats
        if f.format == "PNG" and f.size in ("16x16", "32x32")
    )
    return f"""/* Hero Background */
.hero-background {{
  background-image: url('/images/hero-bg.jpg');
  background-size: cover;
  background-position: center;
  background-attachment: fixed;
}}

/* Logo Container */
.logo {{
  width: auto;
  height: 48px;
}}

/* Favicon Links (add to <head>) */
<link rel="icon" type="image/svg+xml" href="/favicon.svg" />
{favicon_links}
<link rel="apple-touch-icon" sizes="180x180" href="/apple-touch-icon.png" />"""
