"""Header-name lookup for selection by title."""

from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def resolve_names(header_fields: Sequence[str], name_spec: str) -> str:
    """Map comma-separated header names to a numeric field list.

    Names resolve to the first matching header, in the order requested.
    Names missing from the header are dropped.
    """
    fields = list(header_fields)
    numbers: list[str] = []
    for name in name_spec.split(","):
        try:
            index = fields.index(name)
        except ValueError:
            logger.debug("Header %r not found; skipped", name)
            continue
        numbers.append(str(index + 1))
    return ",".join(numbers)
