from dataclasses import dataclass

# Characters with the Unicode White_Space property. str.isspace() also
# accepts U+001C..U+001F, which are separators rather than whitespace.
UNICODE_WHITESPACE = (
    "\t\n\x0b\x0c\r\x20"
    "\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass(frozen=True)
class Settings:
    """Per-instance display and trimming defaults for BinString."""
    repr_limit: int = 64
    whitespace: str = UNICODE_WHITESPACE


DEFAULT_SETTINGS = Settings()
