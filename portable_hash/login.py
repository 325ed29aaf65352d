import logging
from os import urandom

from cryptography.hazmat.primitives.constant_time import bytes_eq

from . import config
from .alphabet import symbol_for
from .digest import SETTING_LEN, to_bytes, check_count_log2, crypt_private
from .encoding import encode64
from .errors import InvalidIterationCount, InvalidSaltLength

log = logging.getLogger(__name__)

OUTPUT_TAG = "$P$"
ACCEPTED_TAGS = ("$P$", "$H$")  # $H$ is the phpBB3 spelling of the same scheme
SALT_SEED_LEN = 6               # 6 random bytes -> 8 salt symbols
HASH_LEN = SETTING_LEN + 22     # 16-byte digest encodes to 22 symbols

def identify(hash: str) -> bool:
    return bool(hash) and hash.startswith(ACCEPTED_TAGS)

def generate_hash(password: str | bytes, iteration_count_log2: int) -> str:
    """Hash ``password`` with a fresh random salt; always emits a 34-char ``$P$`` hash."""
    check_count_log2(iteration_count_log2)
    salt = encode64(urandom(SALT_SEED_LEN), SALT_SEED_LEN)
    setting = OUTPUT_TAG + symbol_for(iteration_count_log2) + salt
    log.debug("Generating portable hash with 2**%d iterations", iteration_count_log2)
    return crypt_private(password, setting)

def check_password(password: str | bytes, hash: str) -> bool:
    """Return True iff ``password`` matches ``hash``. Never raises on a malformed hash."""
    if not identify(hash):
        log.debug("Rejected hash with unsupported format")
        return False
    try:
        computed = crypt_private(password, hash)
    except (InvalidIterationCount, InvalidSaltLength) as e:
        log.debug("Rejected malformed portable hash: %s", e)
        return False
    return bytes_eq(to_bytes(computed), to_bytes(hash))

class PortableHasher:
    """Same shape as argon2's PasswordHasher: hash(), verify(), needs_rehash()."""

    def __init__(self, iteration_count_log2: int | None = None):
        if iteration_count_log2 is None:
            iteration_count_log2 = config.default_iteration_count_log2()
        self.iteration_count_log2 = check_count_log2(iteration_count_log2)

    def hash(self, password: str | bytes) -> str:
        return generate_hash(password, self.iteration_count_log2)

    def verify(self, hash: str, password: str | bytes) -> bool:
        return check_password(password, hash)

    def needs_rehash(self, hash: str) -> bool:
        # Anything but a full $P$ hash at our cost should be replaced on next login
        if not hash or len(hash) != HASH_LEN or not hash.startswith(OUTPUT_TAG):
            return True
        return hash[3] != symbol_for(self.iteration_count_log2)
