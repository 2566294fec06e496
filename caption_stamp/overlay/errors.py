"""Errors raised while parsing overlay descriptors and rendering overlays."""


class OverlayError(Exception):
    """Base class for overlay errors.

    Args:
        message: Human readable reason
        token: Offending ``key=value`` piece, if known
        descriptor: Full descriptor string the token came from, if known
    """

    def __init__(
        self, message: str, token: str | None = None, descriptor: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.descriptor = descriptor

    def attach(self, token: str | None = None, descriptor: str | None = None) -> None:
        """Fill in token/descriptor context without overwriting what is already set."""
        if self.token is None:
            self.token = token
        if self.descriptor is None:
            self.descriptor = descriptor

    def __str__(self) -> str:
        parts = []
        if self.token is not None:
            parts.append(f"parse {self.token!r} failed: {self.message}")
        else:
            parts.append(self.message)
        if self.descriptor is not None:
            parts.append(f"(overlay {self.descriptor!r})")
        return " ".join(parts)


class ParseError(OverlayError):
    """Descriptor could not be turned into an overlay."""


class MalformedTokenError(ParseError):
    """A comma-separated piece has no ``=``."""


class UnknownKeyError(ParseError):
    """Key is not one of the recognized overlay keys."""


class InvalidIntegerError(ParseError):
    """Coordinate value is not an integer (or integer percentage)."""


class InvalidColorError(ParseError):
    """Color token is outside the palette, or foreground is transparent."""


class FontSpecError(OverlayError):
    """Font spec has a bad size, or the font file cannot be read or parsed."""


class ImmutableImageError(OverlayError):
    """Render target does not support in-place pixel mutation."""


class UnsupportedModeError(OverlayError):
    """Render target uses a pixel mode the palette cannot be painted on."""
