"""Error types raised by the pixel pipeline."""


class ChromaLabError(ValueError):
    """Base class for pipeline precondition violations."""


class InvalidChannel(ChromaLabError):
    """Isolation requested for a channel outside the buffer's component set."""


class ModeMismatch(ChromaLabError):
    """Operation requires a buffer in a different color mode."""


class DimensionMismatch(ChromaLabError):
    """Pixel sequence does not cover a width x height raster."""


class InvalidScheme(ChromaLabError):
    """Unknown chroma subsampling scheme."""


class InvalidTarget(ChromaLabError):
    """Unknown transformation target."""
