"""Line-at-a-time driver tying header lookup, masking and projection together."""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from ncut.errors import FileOpenError, LineReadError
from ncut.header import resolve_names
from ncut.mask import build_mask
from ncut.projector import project_line, split_fields
from ncut.selection import ByCharacterCount, ByFieldName, FieldSpecification

logger = logging.getLogger(__name__)


def strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


@contextmanager
def open_input(path: str | Path | None, encoding: str = "utf-8") -> Iterator[TextIO]:
    """Yield the named file (or stdin for ``None`` / ``-``) opened for reading."""
    if path is None or str(path) == "-":
        stdin = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding, newline="\n")
        try:
            yield stdin
        finally:
            # leave sys.stdin usable
            stdin.detach()
        return
    try:
        handle = open(path, encoding=encoding, newline="\n")
    except OSError as exc:
        raise FileOpenError(str(path), exc) from exc
    with handle:
        yield handle


def _read_lines(source: Iterable[str]) -> Iterator[tuple[int, str]]:
    iterator = iter(source)
    line_number = 0
    while True:
        line_number += 1
        try:
            raw = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise LineReadError(line_number, exc) from exc
        yield line_number, strip_line_ending(raw)


def cut_stream(
    source: Iterable[str],
    selection: FieldSpecification,
    delimiter: str,
    out: TextIO,
) -> int:
    """Project every line of ``source`` onto ``out``; return the lines written.

    The first line fixes the field count (and, for selection by name, the
    header) and is emitted like any other line. Character mode rebuilds the
    mask for each line since lines differ in length. Only one trailing newline
    and then one carriage return are stripped, so trailing empty fields survive.
    """
    lines = _read_lines(source)
    written = 0

    if isinstance(selection, ByCharacterCount):
        for line_number, line in lines:
            mask = build_mask(
                len(split_fields(line, delimiter)), selection.spec, whole_line=False
            )
            out.write(project_line(line, delimiter, mask, line_number) + "\n")
            written += 1
        return written

    first = next(lines, None)
    if first is None:
        logger.debug("Empty input; nothing to write")
        return written

    line_number, line = first
    header_fields = split_fields(line, delimiter)
    spec = selection.spec
    if isinstance(selection, ByFieldName):
        spec = resolve_names(header_fields, selection.spec)
        logger.debug("Resolved names %r to fields %r", selection.spec, spec)
    mask = build_mask(len(header_fields), spec)

    out.write(project_line(line, delimiter, mask, line_number) + "\n")
    written += 1
    for line_number, line in lines:
        out.write(project_line(line, delimiter, mask, line_number) + "\n")
        written += 1

    logger.debug("Wrote %d lines", written)
    return written
