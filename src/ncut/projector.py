"""Split a line, keep the masked fields and join them back together."""

from __future__ import annotations

from collections.abc import Sequence

from ncut.errors import FieldCountMismatch


def split_fields(line: str, delimiter: str) -> list[str]:
    # An empty delimiter means character mode: every character is a field.
    if delimiter == "":
        return list(line)
    return line.split(delimiter)


def project_line(
    line: str,
    delimiter: str,
    mask: Sequence[bool],
    line_number: int | None = None,
) -> str:
    """Keep the fields whose mask entry is true, in their original order.

    Fields beyond the end of the mask are dropped. A line with fewer fields
    than the mask raises :class:`FieldCountMismatch`.
    """
    fields = split_fields(line, delimiter)
    if len(fields) < len(mask):
        raise FieldCountMismatch(line_number, expected=len(mask), actual=len(fields))
    return delimiter.join(field for field, keep in zip(fields, mask) if keep)
