"""Reading whitespace-separated integers from text files and searching them."""

from __future__ import annotations

import io
import re
from collections.abc import Iterator, Sequence
from typing import Optional, TextIO

_NUMBER = re.compile(r"\s*([+-]?\d+)")


class BadFileError(ValueError):
    """The file holds something other than whitespace-separated integers."""


class EmptyFileError(ValueError):
    """The file is empty."""


def _scan(text: str) -> Iterator[tuple[int, int]]:
    """Yield (value, end position) for each leading integer until one fails to parse."""
    pos = 0
    while (match := _NUMBER.match(text, pos)) is not None:
        pos = match.end()
        yield int(match.group(1)), pos


def file_size(stream: TextIO) -> int:
    """Size of the stream's contents; the stream is left at its start."""
    stream.seek(0, io.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def read_numbers(stream: TextIO) -> list[int]:
    """Read every integer in the stream.

    Raises EmptyFileError for an empty stream and BadFileError when anything
    other than integers and whitespace is found.
    """
    if file_size(stream) == 0:
        raise EmptyFileError("the file is empty")
    text = stream.read()
    values: list[int] = []
    end = 0
    for value, end in _scan(text):
        values.append(value)
    if text[end:].strip():
        raise BadFileError("the file must hold only integers")
    return values


def linear_search(values: Sequence[int], key: int) -> Optional[int]:
    """Index of the first occurrence of the key, or None."""
    return next((index for index, value in enumerate(values) if value == key), None)


def find_in_file(stream: TextIO, key: int) -> Optional[int]:
    """Read the stream from its start and return the 1-based position of the key.

    Returns None if the key is absent. The stream is rewound afterwards.
    """
    stream.seek(0)
    text = stream.read()
    stream.seek(0)
    for position, (value, _) in enumerate(_scan(text), start=1):
        if value == key:
            return position
    return None