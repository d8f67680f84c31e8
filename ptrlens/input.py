"""
Address list readers

Files hold one address per line; blank lines and lines starting with '#'
are ignored. Gzip and zip archives are read transparently.
"""

import gzip
import io
import logging
import sys
import zipfile
from enum import Enum
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Union

from .errors import InvalidInput


logger = logging.getLogger(__name__)

STDIN = '-'


class InputType(Enum):
    """Supported input formats"""
    PLAIN = "plain"
    GZIP = "gzip"
    ZIP = "zip"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> 'InputType':
        """Guess the format from the file extension"""
        suffix = Path(path).suffix.lower()
        if suffix == '.gz':
            return cls.GZIP
        if suffix == '.zip':
            return cls.ZIP
        return cls.PLAIN


def parse_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield address literals, skipping blanks and comments"""
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        yield line


def read_stream(fh: IO[str]) -> list[str]:
    """Read addresses from an open text stream"""
    return list(parse_lines(fh))


def _read_zip(path: Path) -> list[str]:
    addresses = []
    try:
        with zipfile.ZipFile(path) as archive:
            for member in archive.infolist():
                if member.is_dir():
                    continue
                logger.debug("Reading %s from %s", member.filename, path)
                with archive.open(member) as raw:
                    addresses.extend(read_stream(io.TextIOWrapper(raw, encoding='utf-8')))
    except zipfile.BadZipFile as e:
        raise InvalidInput(f"{path}: {e}") from e
    return addresses


def read_addresses(path: Union[str, Path],
                   input_type: Optional[InputType] = None) -> list[str]:
    """
    Read address literals from a file.

    Args:
        path: File path, or '-' for stdin
        input_type: Force the format instead of guessing from the extension

    Returns:
        List of address strings, in file order

    Raises:
        InvalidInput: if a zip archive is corrupt
        OSError: if the file cannot be read
    """
    if str(path) == STDIN:
        return read_stream(sys.stdin)

    path = Path(path)
    input_type = input_type or InputType.from_path(path)
    logger.info("Processing %s (%s)", path, input_type.value)

    if input_type == InputType.ZIP:
        return _read_zip(path)

    if input_type == InputType.GZIP:
        with gzip.open(path, 'rt', encoding='utf-8') as f:
            return read_stream(f)

    with open(path, 'r', encoding='utf-8') as f:
        return read_stream(f)


def read_all(paths: Iterable[Union[str, Path]],
             input_type: Optional[InputType] = None) -> list[str]:
    """Read and concatenate the addresses of several files"""
    addresses: list[str] = []
    for path in paths:
        addresses.extend(read_addresses(path, input_type))
    return addresses
