"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class VisualStyle(str, Enum):
    """Visual style presets; maximalist is the only one with a distinct typography."""

    MAXIMALIST = "maximalist"
    MINIMALIST = "minimalist"
    MODERN = "modern"
    CORPORATE = "corporate"

    @property
    def is_maximalist(self) -> bool:
        return self is VisualStyle.MAXIMALIST

    @classmethod
    def resolve(cls, name: str) -> VisualStyle:
        """Exact, case-insensitive lookup falling back to ``MODERN``."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.MODERN


# ── Prompts ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ThemePrompt:
    """Structured reading of a free-text theme prompt."""

    industry: str
    vibe: str
    primary_color: str
    visual_style: str


@dataclass(frozen=True, slots=True)
class AppPrompt:
    """Outer prompt: description plus optional explicit identity and features."""

    description: str
    business_name: str | None = None
    domain: str | None = None
    features: tuple[str, ...] = ()


# ── Catalog records ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ColorScheme:
    primary: str
    secondary: str
    accent: str
    dark: str
    darker: str


@dataclass(frozen=True, slots=True)
class Terminology:
    """Industry words substituted for the generic booking vocabulary."""

    book: str
    service: str
    client: str
    booking: str
    schedule: str


@dataclass(frozen=True, slots=True)
class IndustryPreset:
    slug: str
    keywords: tuple[str, ...]
    terminology: Terminology
    suggested_colors: tuple[str, ...]
    suggested_style: VisualStyle
    decorative_elements: tuple[str, ...]
    business_name: str
    tagline: str
    seo_description: str  # ``{name}`` is replaced with the business name
    seo_keywords: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class VisualStylePreset:
    animations: tuple[str, ...]
    effects: tuple[str, ...]
    particle_count: int
    heading_size: str
    spacing: str


# ── Theme ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class BackgroundColors:
    from_: str
    via: str
    to: str


@dataclass(frozen=True, slots=True)
class TextColors:
    primary: str
    secondary: str
    heading: str


@dataclass(frozen=True, slots=True)
class ThemeColors:
    primary: str
    secondary: str
    accent: str
    background: BackgroundColors
    text: TextColors
    border: str
    gradients: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Typography:
    heading_font: str
    body_font: str
    heading_style: str  # "uppercase" | "capitalize"
    heading_weight: str  # "black" | "bold"
    letter_spacing: str  # "wider" | "normal"
    decorative_elements: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ParticleSystem:
    type: str
    count: int
    animations: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Animations:
    transitions: tuple[str, ...]
    effects: tuple[str, ...]
    particle_system: ParticleSystem | None = None


@dataclass(frozen=True, slots=True)
class ButtonClasses:
    primary: str
    secondary: str
    effects: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CardClasses:
    background: str
    border: str
    hover: str


@dataclass(frozen=True, slots=True)
class ModalClasses:
    background: str
    overlay: str
    border: str


@dataclass(frozen=True, slots=True)
class ComponentClasses:
    buttons: ButtonClasses
    cards: CardClasses
    modals: ModalClasses


@dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Compiled theme.  Every field is populated; only ``particle_system`` may be absent."""

    colors: ThemeColors
    typography: Typography
    animations: Animations
    components: ComponentClasses
    terminology: Terminology


# ── SEO ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SocialTagsInput:
    business_name: str
    tagline: str
    domain: str
    industry: str
    description: str | None = None
    keywords: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class SEOConfig:
    title: str
    description: str
    keywords: tuple[str, ...]
    og_title: str
    og_description: str
    og_image: str
    twitter_title: str
    twitter_description: str
    twitter_image: str
    twitter_card: str = "summary_large_image"
    canonical: str | None = None


# ── Assets ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class DesignSuggestion:
    layout: str
    composition: str
    mood: str
    elements: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TypographySuggestion:
    title_font: str
    title_size: str
    subtitle_font: str
    subtitle_size: str
    style: str


@dataclass(frozen=True, slots=True)
class OGImageSpec:
    dimensions: str
    aspect_ratio: str
    file_size: str
    format: tuple[str, ...]
    design: DesignSuggestion
    colors: tuple[str, ...]
    typography: TypographySuggestion
    elements: tuple[str, ...]
    examples: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FaviconFormat:
    size: str
    format: str
    purpose: str


@dataclass(frozen=True, slots=True)
class FaviconSpec:
    formats: tuple[FaviconFormat, ...]
    design: DesignSuggestion
    colors: tuple[str, ...]
    style: str


@dataclass(frozen=True, slots=True)
class HeroImageSpec:
    name: str
    dimensions: str
    style: str
    description: str
    suggested_sources: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class LogoVariation:
    name: str
    description: str
    usage: str


@dataclass(frozen=True, slots=True)
class LogoSpec:
    style: str
    elements: tuple[str, ...]
    colors: tuple[str, ...]
    variations: tuple[LogoVariation, ...]


@dataclass(frozen=True, slots=True)
class AdditionalAsset:
    name: str
    type: str
    purpose: str
    specs: str


@dataclass(frozen=True, slots=True)
class AssetSuggestions:
    og_image: OGImageSpec
    favicon: FaviconSpec
    hero_images: tuple[HeroImageSpec, ...]
    logo: LogoSpec
    additional_assets: tuple[AdditionalAsset, ...]


# ── Content ─────────────────────────────────────────────────────────────────


class SectionType(str, Enum):
    HERO = "hero"
    FEATURES = "features"
    PRICING = "pricing"
    CTA = "cta"
    TESTIMONIALS = "testimonials"
    ABOUT = "about"


@dataclass(frozen=True, slots=True)
class SectionConfig:
    """One page section; ``content`` is a read-only ``MappingProxyType``."""

    type: SectionType
    content: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class PageConfig:
    name: str
    route: str
    title: str
    sections: tuple[SectionConfig, ...]


@dataclass(frozen=True, slots=True)
class FeatureItem:
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class PricingTier:
    name: str
    price: str
    features: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class HeroCopy:
    headline: str
    subheadline: str
    cta: str


@dataclass(frozen=True, slots=True)
class FeaturesCopy:
    title: str
    items: tuple[FeatureItem, ...]


@dataclass(frozen=True, slots=True)
class PricingCopy:
    title: str
    tiers: tuple[PricingTier, ...] = ()


@dataclass(frozen=True, slots=True)
class CopyTemplates:
    hero: HeroCopy
    features: FeaturesCopy
    pricing: PricingCopy


@dataclass(frozen=True, slots=True)
class FormField:
    name: str
    label: str
    type: str
    required: bool
    options: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class FormStep:
    title: str
    fields: tuple[FormField, ...]


@dataclass(frozen=True, slots=True)
class FormConfig:
    id: str
    title: str
    steps: tuple[FormStep, ...]


@dataclass(frozen=True, slots=True)
class ContentStructure:
    pages: tuple[PageConfig, ...]
    copy: CopyTemplates
    forms: tuple[FormConfig, ...]


# ── Deployment / app ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class BuildSettings:
    build_command: str
    output_directory: str
    install_command: str


@dataclass(frozen=True, slots=True)
class DeploymentConfig:
    platform: str  # "azure" | "vercel" | "netlify"
    region: str
    env_vars: Mapping[str, str]
    build_settings: BuildSettings


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Everything needed to render one generated application."""

    name: str
    domain: str
    theme: ThemeConfig
    seo: SEOConfig
    assets: AssetSuggestions
    content: ContentStructure
    deployment: DeploymentConfig


# ── Audit ───────────────────────────────────────────────────────────────────


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class IssueType(str, Enum):
    OUTDATED_TERMINOLOGY = "outdated-terminology"
    TEMPLATE_CONTENT = "template-content"
    MISSING_SEO = "missing-seo"
    BROKEN_LINK = "broken-link"
    PLACEHOLDER_TEXT = "placeholder-text"


class AuditStatus(str, Enum):
    CLEAN = "clean"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A file handed to the auditor: relative or absolute path plus text."""

    path: str
    content: str


@dataclass(frozen=True, slots=True)
class AuditIssue:
    type: IssueType
    severity: Severity
    found: str
    suggestion: str
    line: int | None = None
    column: int | None = None
    context: str | None = None


@dataclass(frozen=True, slots=True)
class AuditResult:
    file: str
    issues: tuple[AuditIssue, ...]
    score: int
    status: AuditStatus

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity is severity)

    def has_issue_type(self, issue_type: IssueType) -> bool:
        return any(issue.type is issue_type for issue in self.issues)


@dataclass(frozen=True, slots=True)
class AuditSummary:
    total_files: int
    files_with_issues: int
    total_issues: int
    critical_issues: int
    average_score: int


@dataclass(frozen=True, slots=True)
class AuditReport:
    summary: AuditSummary
    results: tuple[AuditResult, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)
