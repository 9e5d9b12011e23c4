"""Turn a field list such as ``1,3-4,7-`` into a per-field inclusion mask."""

from __future__ import annotations

import logging
import re

from ncut.errors import InvalidFieldSpec

logger = logging.getLogger(__name__)

UNSIGNED_RE = re.compile(r"[0-9]+")


def _parse_unsigned(text: str) -> int | None:
    if not UNSIGNED_RE.fullmatch(text):
        return None
    return int(text)


def _parse_position(text: str, token: str) -> int:
    value = _parse_unsigned(text)
    if value is None:
        raise InvalidFieldSpec(token)
    if value == 0:
        raise InvalidFieldSpec(token, "fields are numbered from 1")
    return value


def build_mask(field_count: int, spec: str, whole_line: bool = True) -> list[bool]:
    """Return one boolean per field; ``True`` keeps field ``i + 1``.

    A line that was not split at all (one field) is always kept whole,
    unless ``whole_line`` is false (character mode, where every line splits).
    Numbers past the last field are ignored and ranges are clamped to it.
    ``N-`` runs to the last field, as does any range whose end is not a number.
    """
    if whole_line and field_count <= 1:
        return [True] * field_count

    mask = [False] * field_count
    for token in spec.split(","):
        if not token:
            continue
        if "-" in token:
            start_str, _, end_str = token.partition("-")
            start = _parse_position(start_str, token)
            end = _parse_unsigned(end_str)
            if end is None:
                end = field_count
            start = min(start, field_count)
            end = min(end, field_count)
            # reversed ranges select nothing
            for index in range(max(start, 1) - 1, end):
                mask[index] = True
        else:
            n = _parse_position(token, token)
            if n <= field_count:
                mask[n - 1] = True
            else:
                logger.debug("Field %d is past the last field (%d); ignored", n, field_count)

    logger.debug("Mask for %d fields from %r: %s", field_count, spec, mask)
    return mask
