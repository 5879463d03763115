"""Letterbag error types."""


class LetterbagError(Exception):
    """Base error for all letterbag failures."""


class LetterbagVersionError(LetterbagError):
    """Manifest version mismatch."""


class LetterbagChecksumError(LetterbagError):
    """Corpus file checksum verification failed."""
