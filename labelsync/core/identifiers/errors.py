"""Exceptions and warnings raised by identifier handling."""


class LabelSyncError(Exception):
    """Base class for identifier resolution and installation failures."""

    pass


class InvalidAxisError(LabelSyncError, ValueError):
    """Raised when an axis token is not a recognized row or column alias."""

    pass


class UnknownAnnotationColumnError(LabelSyncError, KeyError):
    """Raised when a named annotation column does not exist on the axis."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class MissingIdentifiersError(LabelSyncError, ValueError):
    """Raised when an axis has no live identifiers to search."""

    pass


class LengthMismatchError(LabelSyncError, ValueError):
    """Raised when a label sequence does not match the axis extent."""

    pass


class TypeMismatchError(LabelSyncError, TypeError):
    """Raised when labels are not strings or a column name is not usable."""

    pass


class NotATableLikeEntityError(LabelSyncError, TypeError):
    """Raised when an operation needs AnnData but got something else."""

    pass


class ResolutionWarning(UserWarning):
    """Advisory diagnostic emitted by index resolution."""

    pass


class NoMatchWarning(ResolutionWarning):
    """None of the queried identifiers matched the reference labels."""

    pass
