"""
Adapter: bcrypt password hasher.

Implements PasswordHasher port with salted bcrypt hashes.
"""

import base64
import hashlib

import bcrypt

from library_api.domain.library.ports import PasswordHasher

DEFAULT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasher):
    """Derives and checks bcrypt hashes.

    Passwords are SHA-256 digested and base64 encoded first, since
    bcrypt only reads the first 72 bytes of its input.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_prehash(password), salt).decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_prehash(password), password_hash.encode("ascii"))
        except ValueError:
            # Stored value is not a bcrypt hash.
            return False


def _prehash(password: str) -> bytes:
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)
