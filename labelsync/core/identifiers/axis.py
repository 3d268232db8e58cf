"""Axis tokens for feature (row-like) and cell (column-like) identifiers."""

from enum import Enum
from typing import Union

from .errors import InvalidAxisError


class Axis(str, Enum):
    """Identifier axis of an entity.

    ``ROW`` is the feature axis (genes), ``COL`` is the cell axis. For
    AnnData this maps to ``var`` and ``obs`` respectively; for a plain
    DataFrame to ``index`` and ``columns``.
    """

    ROW = "row"
    COL = "col"

    @property
    def default_names_token(self) -> str:
        """Token that refers to the live identifiers in ``by`` arguments."""
        return "rownames" if self is Axis.ROW else "colnames"


ROW_ALIASES = ("row", "feature", "gene")
COL_ALIASES = ("col", "cell")


def parse_axis(axis: Union[str, Axis]) -> Axis:
    """Normalize an axis token.

    Parameters
    ----------
    axis : str or Axis
        One of ``"row"``, ``"feature"``, ``"gene"`` (features) or
        ``"col"``, ``"cell"`` (cells).

    Returns
    -------
    Axis
        Parsed axis.

    Raises
    ------
    InvalidAxisError
        If the token is not recognized.
    """
    if isinstance(axis, Axis):
        return axis
    if isinstance(axis, str):
        if axis in ROW_ALIASES:
            return Axis.ROW
        if axis in COL_ALIASES:
            return Axis.COL
    raise InvalidAxisError(
        f"Invalid axis specification: {axis!r}. "
        f"Use one of {list(ROW_ALIASES + COL_ALIASES)}."
    )
