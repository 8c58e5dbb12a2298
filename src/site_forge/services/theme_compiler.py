"""Theme compiler — combines the color, industry and visual-style presets.

The three lookups are independent and each falls back to a named default,
so compilation always yields a fully populated :class:`ThemeConfig`.
Typography is a binary switch on the maximalist style; there is no
in-between.
"""

from __future__ import annotations

import logging

from site_forge.domain.catalogs import (
    COLOR_SCHEMES,
    DEFAULT_COLOR,
    DEFAULT_INDUSTRY,
    INDUSTRY_ORDER,
    INDUSTRY_PRESETS,
    VISUAL_STYLES,
)
from site_forge.domain.entities import (
    Animations,
    BackgroundColors,
    ButtonClasses,
    CardClasses,
    ColorScheme,
    ComponentClasses,
    IndustryPreset,
    ModalClasses,
    ParticleSystem,
    TextColors,
    ThemeColors,
    ThemeConfig,
    ThemePrompt,
    Typography,
    VisualStyle,
)

logger = logging.getLogger(__name__)

_GRAY_900 = "#111827"
_GRAY_300 = "#d1d5db"
_WHITE = "#ffffff"


def _normalize(text: str) -> str:
    return text.lower().replace("-", " ")


def resolve_color(name: str) -> tuple[str, ColorScheme]:
    """Exact, case-insensitive color lookup falling back to blue."""
    key = name.strip().lower()
    if key in COLOR_SCHEMES:
        return key, COLOR_SCHEMES[key]
    return DEFAULT_COLOR, COLOR_SCHEMES[DEFAULT_COLOR]


def resolve_industry(industry: str) -> IndustryPreset:
    """Match a slug or free-text industry against the presets, defaulting to consulting."""
    normalized = _normalize(industry)
    for slug, preset in INDUSTRY_ORDER:
        if _normalize(slug) in normalized:
            return preset
    return INDUSTRY_PRESETS[DEFAULT_INDUSTRY]


def _typography(style: VisualStyle, preset: IndustryPreset) -> Typography:
    if style.is_maximalist:
        return Typography(
            heading_font="Cinzel",
            body_font="Inter",
            heading_style="uppercase",
            heading_weight="black",
            letter_spacing="wider",
            decorative_elements=preset.decorative_elements,
        )
    return Typography(
        heading_font="Inter",
        body_font="Inter",
        heading_style="capitalize",
        heading_weight="bold",
        letter_spacing="normal",
        decorative_elements=preset.decorative_elements,
    )


def _components(color: str, style: VisualStyle) -> ComponentClasses:
    return ComponentClasses(
        buttons=ButtonClasses(
            primary=(
                f"bg-gradient-to-r from-{color}-600 to-{color}-700 "
                f"hover:from-{color}-500 hover:to-{color}-600 text-white font-semibold"
            ),
            secondary=f"bg-gray-800 hover:bg-gray-700 text-{color}-400 border border-{color}-600",
            effects=("shimmer", "glow-on-hover") if style.is_maximalist else ("subtle-shadow",),
        ),
        cards=CardClasses(
            background=f"bg-gradient-to-br from-gray-900 to-{color}-950/30",
            border=f"border border-{color}-800/50",
            hover=f"hover:border-{color}-600 hover:shadow-lg hover:shadow-{color}-900/50",
        ),
        modals=ModalClasses(
            background=f"bg-gradient-to-br from-gray-900 via-{color}-950 to-gray-900",
            overlay="bg-black/80 backdrop-blur-sm",
            border=f"border-2 border-{color}-600",
        ),
    )


# ── Public API ──────────────────────────────────────────────────────────────


def generate_theme(prompt: ThemePrompt) -> ThemeConfig:
    """Compile *prompt* into a complete theme."""
    color, scheme = resolve_color(prompt.primary_color)
    industry = resolve_industry(prompt.industry)
    style = VisualStyle.resolve(prompt.visual_style)
    preset = VISUAL_STYLES[style]

    logger.debug(
        "Theme presets resolved: color=%s industry=%s style=%s", color, industry.slug, style.value
    )

    particle_system = None
    if preset.particle_count > 0:
        particle_system = ParticleSystem(
            type="floating-particles",
            count=preset.particle_count,
            animations=("float", "drift", "glow"),
        )

    return ThemeConfig(
        colors=ThemeColors(
            primary=scheme.primary,
            secondary=scheme.secondary,
            accent=scheme.accent,
            background=BackgroundColors(from_=_GRAY_900, via=scheme.darker, to=_GRAY_900),
            text=TextColors(primary=_WHITE, secondary=_GRAY_300, heading=_WHITE),
            border=scheme.dark,
            gradients=(
                f"from-{color}-600 to-{color}-800",
                f"from-gray-900 via-{color}-950 to-gray-900",
                f"from-{color}-500 via-{color}-600 to-{color}-700",
            ),
        ),
        typography=_typography(style, industry),
        animations=Animations(
            transitions=("transition-all", "duration-300", "ease-in-out"),
            effects=preset.animations,
            particle_system=particle_system,
        ),
        components=_components(color, style),
        terminology=industry.terminology,
    )


def generate_tailwind_config(theme: ThemeConfig) -> str:
    """Render a ``tailwind.config.js`` extending the theme colors and fonts.

    The float/drift/glow animations are only emitted for themes with a
    particle system.
    """
    animation = ""
    keyframes = ""
    if theme.animations.particle_system is not None:
        animation = """
        'float': 'float 20s ease-in-out infinite',
        'drift': 'drift 15s ease-in-out infinite',
        'glow': 'glow 2s ease-in-out infinite alternate',"""
        keyframes = """
        float: {
          '0%, 100%': { transform: 'translateY(0px)' },
          '50%': { transform: 'translateY(-20px)' },
        },
        drift: {
          '0%, 100%': { transform: 'translateX(0px)' },
          '50%': { transform: 'translateX(30px)' },
        },
        glow: {
          '0%': { opacity: '0.3' },
          '100%': { opacity: '1' },
        },"""

    return f"""/** @type {{import('tailwindcss').Config}} */
export default {{
  content: [
    "./index.html",
    "./src/**/*.{{js,ts,jsx,tsx}}",
  ],
  theme: {{
    extend: {{
      colors: {{
        primary: '{theme.colors.primary}',
        secondary: '{theme.colors.secondary}',
        accent: '{theme.colors.accent}',
      }},
      fontFamily: {{
        heading: ['{theme.typography.heading_font}', 'sans-serif'],
        body: ['{theme.typography.body_font}', 'sans-serif'],
      }},
      animation: {{{animation}
      }},
      keyframes: {{{keyframes}
      }},
    }},
  }},
  plugins: [],
}}
"""


def generate_themed_button(theme: ThemeConfig) -> str:
    """Sample call-to-action button markup using the theme's primary classes."""
    return (
        "<button\n"
        f'  className="{theme.components.buttons.primary} px-8 py-4 rounded-lg '
        'transform hover:scale-105 transition-all duration-300"\n'
        ">\n"
        f"  {theme.terminology.book} Now\n"
        "</button>"
    )
