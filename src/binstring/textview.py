"""
Unchecked text view over raw bytes.

Bytes are reinterpreted as UTF-8 without a validation step. Sequences that
are not valid UTF-8 are carried through as lone surrogates U+DC80..U+DCFF
(the ``surrogateescape`` error handler), so nothing here ever raises on
content and encoding the text again restores the original bytes exactly.
Callers that rely on the result being meaningful text must know the
buffer is valid UTF-8.
"""

TEXT_ENCODING = "utf-8"
ESCAPE_HANDLER = "surrogateescape"


def reinterpret(buffer: bytes) -> str:
    return buffer.decode(TEXT_ENCODING, ESCAPE_HANDLER)


def _encode_char(ch: str) -> bytes:
    if 0xDC80 <= ord(ch) <= 0xDCFF:
        return ch.encode(TEXT_ENCODING, ESCAPE_HANDLER)
    return ch.encode(TEXT_ENCODING, "surrogatepass")


def encode_text(text: str) -> bytes:
    """
    Encode text back to its bytes. Never raises.

    Escapes U+DC80..U+DCFF become the raw bytes they stand for. Any other
    lone surrogate, which no decoded buffer can contain, is written in its
    generalized UTF-8 form (``surrogatepass``), e.g. U+D800 -> ED A0 80.
    """
    try:
        return text.encode(TEXT_ENCODING, ESCAPE_HANDLER)
    except UnicodeEncodeError:
        return b"".join(_encode_char(ch) for ch in text)


def strip_whitespace(buffer: bytes, chars: str, leading: bool = True, trailing: bool = True) -> bytes:
    """Strip ``chars`` from one or both ends of the text view of ``buffer``."""
    if not buffer:
        return buffer

    text = reinterpret(buffer)
    if leading and trailing:
        text = text.strip(chars)
    elif leading:
        text = text.lstrip(chars)
    elif trailing:
        text = text.rstrip(chars)
    return encode_text(text)
