import logging

# Configure logging to look professional
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger("FluxDecode")


def as_text(data):
    """
    Normalizes decoder input to text.
    Raw bytes map one byte to one character (latin-1), so every byte
    survives and lengths on the wire still line up with the cursor.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode('latin-1')
    raise TypeError(f"Cannot decode type: {type(data)}")


def describe_char(char):
    """Human readable form of a cursor character for error messages."""
    if char is None:
        return "end of input"
    return repr(char)
