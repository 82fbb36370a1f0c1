"""Read and validate tree inputs: whitespace-separated integers ``1..n``."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable, List


class InputValidationError(ValueError):
    """Input parsed but is not a permutation of ``1..n``."""


def parse(source: str | Path | Iterable[str], *, strict_validation: bool = True) -> List[int]:
    """Return the tree values from a file path or an iterable of lines.

    Raises:
        FileNotFoundError / OSError: when the file cannot be read.
        InputValidationError: on a non-integer token and, with
            ``strict_validation``, on empty input, duplicates or gaps.
    """
    lines = _read_lines(source) if isinstance(source, (str, Path)) else source
    values = tokenize(lines)
    if strict_validation:
        validate_values(values)
    return values


def tokenize(lines: Iterable[str]) -> List[int]:
    values: List[int] = []
    for line_no, line in enumerate(lines, start=1):
        for token in line.split():
            try:
                values.append(int(token))
            except ValueError:
                msg = f"Line {line_no}: non-integer value {token!r}."
                raise InputValidationError(msg) from None
    return values


def validate_values(values: List[int]) -> None:
    """Check ``values`` is exactly ``1..n`` in some order."""
    if not values:
        raise InputValidationError("Input is empty.")
    n = len(values)
    if len(set(values)) != n:
        dupes = sorted(v for v, seen in Counter(values).items() if seen > 1)
        msg = f"Duplicate values found: {dupes}."
        raise InputValidationError(msg)
    missing = sorted(set(range(1, n + 1)) - set(values))
    if missing:
        extra = sorted(v for v in values if v < 1 or v > n)
        msg = f"Values are not a complete sequence 1..{n}: missing {missing}, out of range {extra}."
        raise InputValidationError(msg)


def _read_lines(path: str | Path) -> List[str]:
    file_path = Path(path).expanduser()
    if not file_path.exists():
        msg = f"Input file not found: {file_path}"
        raise FileNotFoundError(msg)
    try:
        return file_path.read_text().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Error reading input file: {file_path}"
        raise OSError(msg) from exc


__all__ = ["InputValidationError", "parse", "tokenize", "validate_values"]
