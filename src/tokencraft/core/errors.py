"""
Error types for tokencraft validation, resolution, and export.
"""

from dataclasses import dataclass


class TokenCraftError(Exception):
    """Base exception for all tokencraft errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            location = self.context.format()
            if location:
                return f"{location}: {self.message}"
        return self.message


@dataclass(frozen=True)
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        path: Dotted token path that triggered the error
        namespace: Namespace the path was resolved against
        mode: Theme mode being compiled
        format_name: Output format being compiled
    """

    path: str | None = None
    namespace: str | None = None
    mode: str | None = None
    format_name: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "semantic.text.primary [mode=dark, format=css]"
        """
        details = []
        if self.namespace:
            details.append(f"namespace={self.namespace}")
        if self.mode:
            details.append(f"mode={self.mode}")
        if self.format_name:
            details.append(f"format={self.format_name}")

        location = self.path or ""
        if details:
            location = f"{location} [{', '.join(details)}]".strip()
        return location


class ConfigValidationError(TokenCraftError):
    """
    Raised when a token configuration fails structural validation.

    Carries every issue found in a single pass rather than the first one.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        summary = "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(f"Configuration validation failed:\n{summary}")


class ResolutionError(TokenCraftError):
    """
    Raised when a token reference cannot be resolved (strict policy only).

    Examples:
    - Unknown namespace (``borders.sm``)
    - Missing segment (``colors.doesNotExist``)
    - Value that is not a literal (a list of font names)
    """

    def __init__(
        self,
        path: str,
        message: str | None = None,
        *,
        namespace: str | None = None,
        mode: str | None = None,
    ):
        self.path = path
        self.namespace = namespace
        self.mode = mode
        super().__init__(
            message or f'Token reference "{path}" not found',
            ErrorContext(path=path, namespace=namespace, mode=mode),
        )


class NonTerminalReferenceError(ResolutionError):
    """
    Raised when a reference resolves to an object instead of a literal.

    Usually means the path was under-qualified, e.g. ``colors.gray``
    instead of ``colors.gray.500``.
    """

    def __init__(
        self,
        path: str,
        *,
        namespace: str | None = None,
        mode: str | None = None,
    ):
        super().__init__(
            path,
            f'Token reference "{path}" resolves to an object, not a literal value',
            namespace=namespace,
            mode=mode,
        )


class UnknownModeError(TokenCraftError):
    """Raised when a theme mode name is not known."""

    def __init__(self, mode: str, available: list[str] | tuple[str, ...] = (), hint: str = ""):
        self.mode = mode
        self.available = list(available)
        message = f'Unknown theme mode "{mode}"'
        if self.available:
            message += f". Available modes: {', '.join(self.available)}"
        if hint:
            message += f" ({hint})"
        super().__init__(message)


class UnsupportedFormatError(TokenCraftError):
    """Raised when an export format has no emitter."""

    def __init__(self, format_name: str, supported: list[str] | tuple[str, ...] = ()):
        self.format_name = format_name
        self.supported = list(supported)
        message = f"Unsupported format: {format_name}"
        if self.supported:
            message += f". Supported formats: {', '.join(self.supported)}"
        super().__init__(message)
