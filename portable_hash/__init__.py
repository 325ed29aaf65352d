"""Portable (phpass) password hashes: $P$/$H$ iterated MD5 with the ./0-9A-Za-z alphabet."""
from .alphabet import ALPHABET, ALPHABET_MAP, index_of, symbol_for
from .encoding import encode64
from .digest import crypt_private
from .errors import PortableHashError, InvalidSymbol, InvalidIterationCount, InvalidSaltLength
from .login import PortableHasher, generate_hash, check_password, identify
