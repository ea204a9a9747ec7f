"""Read SGF data from files and buffers.

The parser works on strings; this module turns bytes into strings.

Unless an encoding is given explicitly, the data is assumed to be in the
encoding named by the first CA property found in it, defaulting to
"ISO-8859-1" as FF[4] specifies. Only ascii-compatible encodings can be
detected this way.

Errors reading or decoding the data (OSError, LookupError for an unknown codec,
UnicodeDecodeError) are passed on to the caller unchanged.

"""

import logging
import os
import re
from typing import Iterator, Optional, Tuple, Union

from sgftree.sgf_grammar import parse_collection
from sgftree.sgf_tree import Collection

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "ISO-8859-1"
SGF_EXTENSIONS = (".sgf", ".sgfs")

# CA must start a property: at the start of the data or after ';' or ']'.
_charset_re = re.compile(
    rb"(?: \A | [;\]] ) [ \t\n\r]* CA [ \t\n\r]* \[ [ \t\n\r]* ( [^\]\\ \t\n\r]+ ) [ \t\n\r]* \]",
    re.VERBOSE,
)

Source = Union[str, os.PathLike]


def find_charset(bb: bytes) -> Optional[str]:
    """Return the value of the first CA property in 'bb', or None."""
    m = _charset_re.search(bb)
    if m is None:
        return None
    return m.group(1).decode("ascii", "replace")


def decode_sgf_bytes(bb, encoding: Optional[str] = None) -> str:
    """Convert raw SGF data to a string.

    bb       -- bytes-like object (a string is returned unchanged)
    encoding -- codec name (optional)

    """
    if isinstance(bb, str):
        return bb
    bb = bytes(bb)
    if encoding is None:
        encoding = find_charset(bb) or DEFAULT_ENCODING
    return bb.decode(encoding)


def read_sgf_text(path: Source, encoding: Optional[str] = None) -> str:
    """Read an SGF file, returning its contents as a string."""
    with open(path, "rb") as f:
        bb = f.read()
    logger.debug("read %d bytes from %s", len(bb), path)
    return decode_sgf_bytes(bb, encoding)


def iter_sgfs_lines(path: Source, encoding: Optional[str] = None) -> Iterator[Tuple[int, str]]:
    """Yield the text of each game in an .sgfs file (one game per line).

    Yields pairs (line number, text); line numbers start at 1. Blank lines are
    skipped. Each line's encoding is detected separately.

    """
    with open(path, "rb") as f:
        for line_number, line in enumerate(f, 1):
            if line.strip():
                yield line_number, decode_sgf_bytes(line, encoding)


def load_collection_from_bytes(bb, encoding: Optional[str] = None) -> Collection:
    """Parse SGF data held in memory. See decode_sgf_bytes()."""
    return parse_collection(decode_sgf_bytes(bb, encoding))


def load_collection(path: Source, encoding: Optional[str] = None) -> Collection:
    """Read and parse an SGF file.

    Raises ValueError if the file contains no games.

    """
    return parse_collection(read_sgf_text(path, encoding))


def is_sgf_file(path: Source) -> bool:
    return os.fspath(path).lower().endswith(SGF_EXTENSIONS)
