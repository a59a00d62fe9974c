"""Raw cell and row types produced by the decoders.

A RawCell is the library-neutral view of one cell as stored in the
container: its kind, the underlying content, and the display format used
to tell dates, integer-looking text, and plain numbers apart.
"""

from __future__ import annotations

from typing import Literal, TypedDict

CellKind = Literal["blank", "boolean", "error", "formula", "numeric", "text"]

# Underlying content. Numeric cells always carry the serial number, even
# when formatted as a date; formula cells carry their last cached result.
RawContent = str | int | float | bool | None


class RawCell(TypedDict):
    """One cell as decoded from the container.

    Attributes:
        kind: Cell type.
        value: Underlying content (see RawContent).
        number_format: Applied display format ("General" when unstyled).
        date1904: True when the workbook uses the 1904 date system.
    """

    kind: CellKind
    value: RawContent
    number_format: str
    date1904: bool


# Cells of one row keyed by zero-based column index. Gaps are absent keys.
SheetRow = dict[int, RawCell]


def make_cell(
    kind: CellKind,
    value: RawContent,
    number_format: str = "General",
    date1904: bool = False,
) -> RawCell:
    """Create a RawCell."""
    return RawCell(kind=kind, value=value, number_format=number_format, date1904=date1904)


__all__ = [
    "CellKind",
    "RawCell",
    "RawContent",
    "SheetRow",
    "make_cell",
]
