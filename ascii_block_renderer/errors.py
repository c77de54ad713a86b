"""Exceptions raised by the block ASCII renderer."""


class AsciiRendererError(Exception):
    """Base class for all renderer failures."""


class DecodeError(AsciiRendererError):
    """The source image could not be read, decoded or processed."""


class EmptyPaletteError(AsciiRendererError):
    """Color quantization produced no palette entries."""


class ConfigurationError(AsciiRendererError, ValueError):
    """Render parameters are missing or out of range."""


class OutputWriteError(AsciiRendererError):
    """The rendered art could not be written to its destination."""
