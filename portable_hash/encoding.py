from .alphabet import ALPHABET

def encode64(data: bytes, count: int) -> str:
    """Encode the first ``count`` bytes of ``data`` with the portable-hash alphabet.

    Bytes are packed little-endian, three at a time, into four 6-bit symbols.
    A short trailing group is not padded: one leftover byte gives two symbols,
    two leftover bytes give three. So 16 bytes -> 22 symbols, 6 bytes -> 8.
    """
    if count > len(data):
        raise ValueError(f"Cannot encode {count} bytes from a {len(data)}-byte buffer")

    out = []
    i = 0
    while i < count:
        value = data[i]
        i += 1
        out.append(ALPHABET[value & 0x3F])

        if i >= count:
            out.append(ALPHABET[(value >> 6) & 0x3F])
            break
        value |= data[i] << 8
        i += 1
        out.append(ALPHABET[(value >> 6) & 0x3F])

        if i >= count:
            out.append(ALPHABET[(value >> 12) & 0x3F])
            break
        value |= data[i] << 16
        i += 1
        out.append(ALPHABET[(value >> 12) & 0x3F])
        out.append(ALPHABET[(value >> 18) & 0x3F])

    return ''.join(out)
