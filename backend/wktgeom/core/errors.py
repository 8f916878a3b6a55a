from enum import Enum, auto


class ParseErrorKind(Enum):
    UNEXPECTED_GEOMETRY_TYPE = auto()
    UNEXPECTED_COORDINATE_TYPE = auto()
    UNEXPECTED_TOKEN = auto()
    UNEXPECTED_EOF = auto()
    INVALID_NUMBER = auto()


_DESCRIPTIONS = {
    ParseErrorKind.UNEXPECTED_GEOMETRY_TYPE: 'unexpected geometry type',
    ParseErrorKind.UNEXPECTED_COORDINATE_TYPE: 'unexpected coordinate type',
    ParseErrorKind.UNEXPECTED_TOKEN: 'unexpected token',
    ParseErrorKind.UNEXPECTED_EOF: 'unexpected EOF',
    ParseErrorKind.INVALID_NUMBER: 'invalid number',
}


class WKTParseError(ValueError):
    """Raised on the first grammar violation met while parsing WKT.

    `kind` identifies the failure, `token` and `offset` point at the offending
    lexeme (both None at end of input) and `context` lists the parsing
    routines the error went through, innermost first.
    """

    def __init__(self, kind: ParseErrorKind, token: str | None = None, offset: int | None = None):
        self.kind = kind
        self.token = token
        self.offset = offset
        self.context: list[str] = []
        super().__init__(kind, token, offset)

    def __str__(self) -> str:
        message = _DESCRIPTIONS[self.kind]
        if self.token is not None:
            message += f': {self.token!r}'
        if self.offset is not None:
            message += f' at offset {self.offset}'
        if self.context:
            message += f" (in {' > '.join(reversed(self.context))})"
        return message

    def to_dict(self) -> dict[str, str | int | None]:
        return {
            'kind': self.kind.name,
            'token': self.token,
            'offset': self.offset,
            'message': str(self),
        }
