from dataclasses import dataclass
from typing import BinaryIO, Iterator, TextIO
import re

from wktgeom.core.errors import ParseErrorKind, WKTParseError


# Signs are never part of a number, "-" comes out as its own token
_TOKEN_PATTERN = re.compile(r"""
    (?P<number>(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)
  | (?P<word>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<symbol>\S)
""", re.VERBOSE)


@dataclass(frozen=True)
class Lexeme:
    text: str
    offset: int


def tokenize(text: str) -> Iterator[Lexeme]:
    for match in _TOKEN_PATTERN.finditer(text):
        yield Lexeme(match.group(), match.start())


class Tokenizer:
    def __init__(self, source: str | bytes | TextIO | BinaryIO):
        if not isinstance(source, (str, bytes)):
            source = source.read()
        if isinstance(source, bytes):
            source = _decode(source)
        self.text = source

    def __iter__(self) -> Iterator[Lexeme]:
        return tokenize(self.text)


def _decode(source: bytes) -> str:
    try:
        return source.decode('utf-8')
    except UnicodeDecodeError as e:
        # Offset counted in characters, like lexeme offsets
        offset = len(source[:e.start].decode('utf-8'))
        token = source[e.start:e.end].decode('utf-8', errors='backslashreplace')
        raise WKTParseError(ParseErrorKind.UNEXPECTED_TOKEN, token, offset) from e
