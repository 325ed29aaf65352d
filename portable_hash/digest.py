from cryptography.hazmat.primitives import hashes

from .alphabet import index_of
from .encoding import encode64
from .errors import InvalidIterationCount, InvalidSaltLength, InvalidSymbol

MIN_COUNT_LOG2 = 7
MAX_COUNT_LOG2 = 30
SETTING_LEN = 12  # tag(3) + count(1) + salt(8)
SALT_LEN = 8
DIGEST_LEN = 16   # MD5

def to_bytes(value: str | bytes) -> bytes:
    # str is taken as UTF-8 with no normalisation so hashes match the PHP side byte for byte.
    # Lone surrogates pass through rather than raising on a malformed stored hash.
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    raise TypeError(f"Expected str or bytes, got {type(value).__name__}")

def _md5(*parts: bytes) -> bytes:
    h = hashes.Hash(hashes.MD5())
    for part in parts:
        h.update(part)
    return h.finalize()

def check_count_log2(count_log2: int) -> int:
    if (not isinstance(count_log2, int) or isinstance(count_log2, bool)
            or not MIN_COUNT_LOG2 <= count_log2 <= MAX_COUNT_LOG2):
        raise InvalidIterationCount(count_log2)
    return count_log2

def crypt_private(password: str | bytes, setting: str) -> str:
    """Recompute a portable hash from ``password`` and the first 12 chars of ``setting``.

    Runs MD5(salt || password) followed by 2**count_log2 rounds of
    MD5(digest || password). Each round needs the previous digest, so the
    cost grows linearly with the iteration count: log2 = 30 is about a
    billion MD5 calls and takes that long, synchronously.
    """
    try:
        count_log2 = index_of(setting[3:4])
    except InvalidSymbol:
        raise InvalidIterationCount(setting[3:4] or None) from None
    check_count_log2(count_log2)

    salt = setting[4:SETTING_LEN]
    if len(salt) != SALT_LEN:
        raise InvalidSaltLength(salt)

    secret = to_bytes(password)
    digest = _md5(to_bytes(salt), secret)
    for _ in range(1 << count_log2):
        digest = _md5(digest, secret)

    return setting[:SETTING_LEN] + encode64(digest, DIGEST_LEN)
