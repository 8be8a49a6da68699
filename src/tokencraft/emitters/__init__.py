"""
Artifact emitters.

Usage:
    from tokencraft.emitters import get_emitter

    emitter = get_emitter("css")
    text = emitter.emit([resolve_theme(config, "light")], config)
"""

from tokencraft.core.errors import UnsupportedFormatError

from .base import CANONICAL_NAMESPACES, Emitter, token_entries
from .components import ComponentCssEmitter, ThemeModesEmitter
from .css import CssEmitter, ScssEmitter
from .data import JsEmitter, JsonEmitter, TsEmitter, token_document
from .tailwind import TailwindEmitter, build_theme_extension

_EMITTERS: dict[str, Emitter] = {
    emitter.format: emitter
    for emitter in (
        CssEmitter(),
        ScssEmitter(),
        JsonEmitter(),
        JsEmitter(),
        TsEmitter(),
        TailwindEmitter(),
        ComponentCssEmitter(),
        ThemeModesEmitter(),
    )
}

SUPPORTED_FORMATS: tuple[str, ...] = tuple(_EMITTERS)


def get_emitter(format_name: str) -> Emitter:
    """Look up the emitter for a format name (case-insensitive).

    Raises:
        UnsupportedFormatError: If no emitter handles the format.
    """
    emitter = _EMITTERS.get(format_name.lower())
    if emitter is None:
        raise UnsupportedFormatError(format_name, SUPPORTED_FORMATS)
    return emitter


__all__ = [
    "CANONICAL_NAMESPACES",
    "ComponentCssEmitter",
    "CssEmitter",
    "Emitter",
    "JsEmitter",
    "JsonEmitter",
    "SUPPORTED_FORMATS",
    "ScssEmitter",
    "TailwindEmitter",
    "ThemeModesEmitter",
    "TsEmitter",
    "build_theme_extension",
    "get_emitter",
    "token_document",
    "token_entries",
]
