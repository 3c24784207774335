from enum import Enum


class ErrorKind(Enum):
    """Every way a decode can fail."""
    INPUT_TOO_SHORT = "InputTooShort"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNTERMINATED_INTEGER = "UnterminatedInteger"
    INTEGER_PARSE_ERROR = "IntegerParseError"
    STRING_LENGTH_PARSE_ERROR = "StringLengthParseError"
    UNTERMINATED_LIST = "UnterminatedList"
    UNTERMINATED_DICT = "UnterminatedDict"
    ODD_DICT_ELEMENTS = "OddDictElements"
    NON_STRING_DICT_KEY = "NonStringDictKey"
    NESTING_TOO_DEEP = "NestingTooDeep"


class DecodeError(ValueError):
    """
    Raised for malformed input.
    `kind` says what went wrong, `offset` is the character position
    where the offending token starts.
    """
    def __init__(self, kind: ErrorKind, offset: int, detail: str = ""):
        super().__init__(kind, offset, detail)
        self.kind = kind
        self.offset = offset
        self.detail = detail

    def __str__(self):
        message = f"{self.kind.value} at offset {self.offset}"
        if self.detail:
            message += f": {self.detail}"
        return message
