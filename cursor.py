class Cursor:
    """
    Forward-only reader over the input characters.
    There is no way to move back; peek() gives one character of lookahead.
    """
    def __init__(self, text: str):
        self._text = text
        self._index = 0

    def __len__(self):
        return len(self._text)

    @property
    def offset(self):
        """Number of characters consumed so far."""
        return self._index

    def peek(self):
        """Returns the next character without consuming it, or None at the end."""
        if self._index >= len(self._text):
            return None
        return self._text[self._index]

    def advance(self):
        """Consumes and returns the next character, or None at the end."""
        char = self.peek()
        if char is not None:
            self._index += 1
        return char

    def take(self, count):
        """Consumes up to `count` characters. Returns fewer if the input runs out."""
        chunk = self._text[self._index : self._index + count]
        self._index += len(chunk)
        return chunk
