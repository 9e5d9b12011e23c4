"""Selection modes: which fields to keep, and how they are addressed."""

from __future__ import annotations

from dataclasses import dataclass

from ncut.errors import SelectionError

DEFAULT_DELIMITER = "\t"


@dataclass(frozen=True)
class ByFieldNumber:
    spec: str


@dataclass(frozen=True)
class ByFieldName:
    spec: str


@dataclass(frozen=True)
class ByCharacterCount:
    spec: str


FieldSpecification = ByFieldNumber | ByFieldName | ByCharacterCount


def from_options(
    fields: str | None = None,
    titles: str | None = None,
    characters: str | None = None,
) -> FieldSpecification:
    """Pick the single selection mode given on the command line."""
    given = [
        kind(value)
        for kind, value in (
            (ByFieldNumber, fields),
            (ByFieldName, titles),
            (ByCharacterCount, characters),
        )
        if value is not None
    ]
    if len(given) != 1:
        raise SelectionError(
            "exactly one of --field, --field-by-title or --characters is required"
        )
    return given[0]


def effective_delimiter(selection: FieldSpecification, delimiter: str | None) -> str:
    # Character mode splits every character apart; -d is ignored there.
    if isinstance(selection, ByCharacterCount):
        return ""
    return DEFAULT_DELIMITER if delimiter is None else delimiter
