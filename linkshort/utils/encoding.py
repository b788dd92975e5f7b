from linkshort.core.errors import InvalidIdentifier

# Base32 digits without 0, i, l and o so codes are not misread
ALPHABET = "123456789abcdefghjkmnpqrstuvwxyz"
BASE = len(ALPHABET)
ID_BITS = 32
MAX_ID = (1 << ID_BITS) - 1

_DIGITS = {ch: i for i, ch in enumerate(ALPHABET)}


def normalize_short_code(code: str) -> str:
    """Normalize short code to lowercase for case-insensitive lookups."""
    return code.lower().strip()


def encode_id(num: int) -> str:
    """Render an identifier as its public path segment."""
    if not 0 <= num <= MAX_ID:
        raise InvalidIdentifier(f"Identifier out of range: {num}")
    if num == 0:
        return ALPHABET[0]
    out = []
    while num:
        num, rem = divmod(num, BASE)
        out.append(ALPHABET[rem])
    return ''.join(reversed(out))


def decode_id(code: str) -> int:
    """Parse a path segment produced by encode_id back into the identifier."""
    s = normalize_short_code(code)
    if not s:
        raise InvalidIdentifier()
    n = 0
    for ch in s:
        digit = _DIGITS.get(ch)
        if digit is None:
            raise InvalidIdentifier(f"Invalid character in identifier: {ch!r}")
        n = n * BASE + digit
        if n > MAX_ID:
            raise InvalidIdentifier("Identifier out of range")
    return n
