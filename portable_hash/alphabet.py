from .errors import InvalidSymbol

# 64 symbols used for every binary-to-text step of the portable hash
ALPHABET = ('./0123456789'
            'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
            'abcdefghijklmnopqrstuvwxyz')

ALPHABET_LEN = len(ALPHABET)  # 64
# Reverse lookup, char -> index
ALPHABET_MAP = {char: i for i, char in enumerate(ALPHABET)}

def symbol_for(index: int) -> str:
    if not 0 <= index < ALPHABET_LEN:
        raise InvalidSymbol(f"Index out of alphabet range: {index!r}")
    return ALPHABET[index]

def index_of(char: str) -> int:
    """Inverse of symbol_for. Unknown characters are a format error, never index 0."""
    try:
        return ALPHABET_MAP[char]
    except KeyError:
        raise InvalidSymbol(f"Character not in alphabet: {char!r}") from None
