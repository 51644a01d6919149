"""Exceptions raised by the genome model and the combination engine."""


class GeneticsError(Exception):
    """Base exception for genetic combination failures."""

    pass


class MalformedGenomeError(GeneticsError, ValueError):
    """Raised when a genome's allele lists do not match its locus count."""

    pass


class SizeMismatchError(GeneticsError, ValueError):
    """Raised when a genome's locus count differs from the engine's."""

    pass


class LocusOutOfRangeError(GeneticsError, IndexError):
    """Raised when a locus index falls outside [0, locus_count)."""

    pass


class InvalidChanceError(GeneticsError, ValueError):
    """Raised when a mutation chance falls outside [0.0, 1.0]."""

    pass
