import re
from errors import DecodeError, ErrorKind
from cursor import Cursor
from values import ByteString, Integer, List, Dict
from utils import as_text, describe_char, logger

# Open containers allowed at once before the input is rejected
DEFAULT_MAX_DEPTH = 512

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1

END = 'e'
COLON = ':'

_INTEGER = re.compile(r'([+-]?)0*([0-9]*)')
_LENGTH = re.compile(r'0*([0-9]*)')

# Digits in UINT64_MAX; anything longer overflows without calling int()
_MAX_DIGITS = 20


def _parse_number(text, pattern, low, high):
    """
    Parses `text` as a base-10 number within [low, high].
    Returns None when the text is malformed or out of range.
    """
    match = pattern.fullmatch(text)
    if match is None or not text.lstrip('+-'):
        return None

    *sign, significant = match.groups()
    if len(significant) > _MAX_DIGITS:
        return None

    number = int(''.join(sign) + (significant or '0'))
    if not low <= number <= high:
        return None
    return number


class _Frame:
    """A container that has been opened but not yet closed."""
    def __init__(self, tag, offset):
        self.tag = tag
        self.offset = offset
        self.elements = []


class Decoder:
    """
    Decodes bencoded data (d, l, i, strings) into a Value tree.
    One forward pass over the input. Nesting lives on an explicit stack of
    open containers, at most `max_depth` deep.
    """
    def __init__(self, data, max_depth=DEFAULT_MAX_DEPTH):
        self._text = as_text(data)
        self._max_depth = max_depth

    def decode(self):
        """
        Main entry point for decoding. Returns the first complete value.
        Every call starts again from the beginning of the input.
        """
        self._cursor = Cursor(self._text)
        self._stack = []

        if len(self._cursor) < 2:
            raise DecodeError(
                ErrorKind.INPUT_TOO_SHORT, 0,
                f"need at least 2 characters, got {len(self._cursor)}"
            )

        logger.debug(f"Decoding {len(self._cursor)} characters")
        try:
            value = self._decode_next()
            while value is None:
                value = self._step()
        except DecodeError as e:
            logger.debug(f"Decode failed: {e}")
            raise

        logger.debug(f"Decoded {value.kind} ending at offset {self._cursor.offset}")
        return value

    def _decode_next(self):
        """
        Dispatches on the next character.
        Returns the finished value for strings and integers, or None when
        a list or dict was opened and pushed onto the stack.
        """
        char = self._cursor.peek()

        if char == 'd':
            return self._decode_dict()
        elif char == 'i':
            return self._decode_int()
        elif char == 'l':
            return self._decode_list()
        elif char is not None and char in '0123456789':
            return self._decode_string()
        else:
            raise DecodeError(
                ErrorKind.UNEXPECTED_TOKEN, self._cursor.offset,
                f"unexpected {describe_char(char)}"
            )

    def _step(self):
        """
        Feeds one element (or the closing sentinel) to the innermost open
        container. Returns the outermost value once it closes, else None.
        """
        frame = self._stack[-1]
        char = self._cursor.peek()

        if char is None:
            kind = ErrorKind.UNTERMINATED_DICT if frame.tag == 'd' else ErrorKind.UNTERMINATED_LIST
            raise DecodeError(kind, frame.offset, "no closing 'e'")

        if char == END:
            self._cursor.advance()
            self._stack.pop()
            value = self._close(frame)
        else:
            value = self._decode_next()
            if value is None:
                return None

        if not self._stack:
            return value
        self._stack[-1].elements.append(value)
        return None

    def _open(self, tag):
        offset = self._cursor.offset
        if len(self._stack) >= self._max_depth:
            raise DecodeError(
                ErrorKind.NESTING_TOO_DEEP, offset,
                f"more than {self._max_depth} nested containers"
            )
        self._cursor.advance()  # Skip tag
        self._stack.append(_Frame(tag, offset))

    def _close(self, frame):
        if frame.tag == 'd':
            return self._build_dict(frame)
        return List(frame.elements)

    def _decode_int(self):
        offset = self._cursor.offset
        self._cursor.advance()  # Skip 'i'

        digits = []
        char = self._cursor.advance()
        while char != END:
            if char is None:
                raise DecodeError(ErrorKind.UNTERMINATED_INTEGER, offset, "no closing 'e'")
            digits.append(char)
            char = self._cursor.advance()

        text = ''.join(digits)
        number = _parse_number(text, _INTEGER, INT64_MIN, INT64_MAX)
        if number is None:
            raise DecodeError(
                ErrorKind.INTEGER_PARSE_ERROR, offset,
                f"{text!r} is not a signed 64-bit integer"
            )
        return Integer(number)

    def _decode_string(self):
        offset = self._cursor.offset

        digits = []
        char = self._cursor.advance()
        while char != COLON:
            if char is None:
                raise DecodeError(ErrorKind.STRING_LENGTH_PARSE_ERROR, offset, "no ':' after length")
            digits.append(char)
            char = self._cursor.advance()

        prefix = ''.join(digits)
        length = _parse_number(prefix, _LENGTH, 0, UINT64_MAX)
        if length is None:
            raise DecodeError(
                ErrorKind.STRING_LENGTH_PARSE_ERROR, offset,
                f"{prefix!r} is not a valid string length"
            )

        s = self._cursor.take(length)
        if len(s) < length:
            # Short strings are returned as-is rather than rejected
            logger.warning(f"String at offset {offset} declares {length} characters, only {len(s)} left")
        return ByteString(s)

    def _decode_list(self):
        self._open('l')
        return None

    def _decode_dict(self):
        self._open('d')
        return None

    def _build_dict(self, frame):
        elements = frame.elements
        if len(elements) % 2 != 0:
            raise DecodeError(
                ErrorKind.ODD_DICT_ELEMENTS, frame.offset,
                f"{len(elements)} elements cannot form key/value pairs"
            )

        # Pairs are taken from the back, so for a repeated key the
        # occurrence nearest the front of the input is inserted last and wins.
        d = {}
        while elements:
            value = elements.pop()
            key = elements.pop()
            if not isinstance(key, ByteString):
                raise DecodeError(
                    ErrorKind.NON_STRING_DICT_KEY, frame.offset,
                    f"dict key must be a ByteString, got {key.kind}"
                )
            if key.value in d:
                logger.debug(f"Duplicate dict key {key.value!r} at offset {frame.offset}, overwriting")
                del d[key.value]
            d[key.value] = value

        # Built back to front; flip so keys read in input order
        return Dict(dict(reversed(list(d.items()))))


def decode(data, max_depth=DEFAULT_MAX_DEPTH):
    """Decodes one bencoded value from `data` (str or bytes)."""
    return Decoder(data, max_depth=max_depth).decode()
