"""
Token configuration IR types.

Defines the structure of tokencraft.yaml: the themed color namespaces,
typography, spacing, effects, responsive breakpoints, output settings and
the component style library. A TokenConfig is loaded once per compilation
run and treated as an immutable snapshot.

On disk the document uses camelCase keys (fontSize, borderRadius, ...);
Python code uses the snake_case attribute names.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..errors import UnknownModeError
from .styles import ComponentStyleDefinition

# Scalar leaf values allowed in typography, spacing and effects maps
TokenValue = str | int | float

# Color scale steps, lightest to darkest
COLOR_SCALE_STEPS: tuple[str, ...] = (
    "50",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
    "950",
)

# Namespaces resolved inside theme.themes[mode]
THEME_NAMESPACES: tuple[str, ...] = ("colors", "semantic")


def _model_config() -> ConfigDict:
    return ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )


# =============================================================================
# Theme
# =============================================================================


class ThemeDefinition(BaseModel):
    """Colors and semantic roles for one theme mode.

    ``colors`` maps a scale name to an 11-step ColorScale, or to a single
    literal for flat colors such as ``white``. ``semantic`` maps a category
    to roles whose values are color literals or ``colors.<scale>.<step>``
    references.
    """

    model_config = _model_config()

    colors: dict[str, str | dict[str, str]] = Field(default_factory=dict)
    semantic: dict[str, dict[str, str]] = Field(default_factory=dict)


class ThemeSection(BaseModel):
    """Theme mode catalog for the config."""

    model_config = _model_config()

    default: str = Field(default="light", description="Mode used when none is requested")
    auto_detect: bool = Field(default=True, description="Follow the system color scheme")
    storage: bool = Field(default=True, description="Persist the chosen mode")
    themes: dict[str, ThemeDefinition] = Field(default_factory=dict)


# =============================================================================
# Typography / Spacing / Effects
# =============================================================================


class TypographyScaleEntry(BaseModel):
    """A named composite text style (e.g. heading.h1)."""

    model_config = _model_config()

    font_size: str
    line_height: TokenValue | None = None
    letter_spacing: str | None = None
    font_weight: TokenValue | None = None


class TypographySpec(BaseModel):
    """Font families, sizes, weights and line heights."""

    model_config = _model_config()

    font_family: dict[str, list[str] | str] = Field(default_factory=dict)
    font_size: dict[str, str] = Field(default_factory=dict)
    font_weight: dict[str, TokenValue] = Field(default_factory=dict)
    line_height: dict[str, TokenValue] = Field(default_factory=dict)
    letter_spacing: dict[str, str] = Field(default_factory=dict)
    scales: dict[str, dict[str, TypographyScaleEntry]] = Field(default_factory=dict)


class SpacingSpec(BaseModel):
    """Spacing scale plus optional semantic spacing groups."""

    model_config = _model_config()

    scale: dict[str, str] = Field(default_factory=dict)
    semantic: dict[str, dict[str, str]] = Field(default_factory=dict)


class EffectsSpec(BaseModel):
    """Shadows, radii, gradients, blur and opacity tokens."""

    model_config = _model_config()

    shadows: dict[str, str] = Field(default_factory=dict)
    border_radius: dict[str, str] = Field(default_factory=dict)
    gradients: dict[str, str | dict[str, str]] = Field(default_factory=dict)
    blur: dict[str, str] = Field(default_factory=dict)
    opacity: dict[str, TokenValue] = Field(default_factory=dict)


# =============================================================================
# Responsive
# =============================================================================


class Breakpoint(BaseModel):
    """A viewport range."""

    model_config = _model_config()

    min: str
    max: str | None = None


class ResponsiveSpec(BaseModel):
    """Breakpoints and container sizes."""

    model_config = _model_config()

    auto_detect: bool = True
    breakpoints: dict[str, Breakpoint] = Field(default_factory=dict)
    container_sizes: dict[str, str] = Field(default_factory=dict)


# =============================================================================
# Output / Components
# =============================================================================


class TokensSpec(BaseModel):
    """Artifact output settings."""

    model_config = _model_config()

    prefix: str = Field(default="tc", description="Custom property / variable prefix")
    output: str = Field(default="./tokens", description="Output directory for artifacts")
    formats: list[str] = Field(default_factory=lambda: ["css"])
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)


class ComponentsSpec(BaseModel):
    """Component style library."""

    model_config = _model_config()

    output: str = "./components"
    typescript: bool = True
    library: dict[str, ComponentStyleDefinition] = Field(default_factory=dict)


# =============================================================================
# Root Model
# =============================================================================


class TokenConfig(BaseModel):
    """Root token configuration.

    Every entry of ``theme.themes`` exposes the same namespace shape so that
    per-mode artifacts differ only in values, never in keys.
    """

    model_config = _model_config()

    version: str | int | float = "1.0"
    name: str | None = None
    description: str | None = None
    theme: ThemeSection = Field(default_factory=ThemeSection)
    typography: TypographySpec = Field(default_factory=TypographySpec)
    spacing: SpacingSpec = Field(default_factory=SpacingSpec)
    effects: EffectsSpec = Field(default_factory=EffectsSpec)
    responsive: ResponsiveSpec = Field(default_factory=ResponsiveSpec)
    tokens: TokensSpec = Field(default_factory=TokensSpec)
    components: ComponentsSpec = Field(default_factory=ComponentsSpec)

    @property
    def mode_names(self) -> list[str]:
        """Theme names in declaration order."""
        return list(self.theme.themes)

    @property
    def default_mode(self) -> str:
        return self.theme.default

    @property
    def prefix(self) -> str:
        return self.tokens.prefix

    def theme_for(self, mode: str) -> ThemeDefinition:
        """Get the theme definition for a mode.

        Raises:
            UnknownModeError: If the config declares no such theme.
        """
        theme = self.theme.themes.get(mode)
        if theme is None:
            raise UnknownModeError(mode, self.mode_names)
        return theme

    def to_document(self) -> dict[str, Any]:
        """Dump to the on-disk (camelCase) document shape."""
        return self.model_dump(mode="json", by_alias=True)
