class BanzukeDeltaError(Exception):
    """Base class for errors raised by banzuke_delta."""


class TextRenderError(BanzukeDeltaError):
    """Raised when the injected text shaper cannot produce a usable text run."""


class RasterizeError(BanzukeDeltaError):
    """Raised when a document cannot be converted to image bytes."""


class InvalidTournamentIdError(BanzukeDeltaError, ValueError):
    """Raised when a basho id is not a valid YYYYMM string."""


class RosterFormatError(BanzukeDeltaError, ValueError):
    """Raised when a raw banzuke row is missing required fields."""


class ConfigurationError(BanzukeDeltaError):
    """Raised when required configuration is missing or malformed."""
