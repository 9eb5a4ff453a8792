"""Password hashing with PBKDF2-SHA256 in a self-describing format.

Encoded layout (before base64):

    +--------+-----------+----------------------+---------------+
    | "v01"  | salt (16) | iterations (3, BE)   | key (32)      |
    +--------+-----------+----------------------+---------------+
"""
import base64
import binascii
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..config import PBKDF2_ITERATIONS
from ..errors import FormatError

FORMAT_TAG = b"v01"
SALT_SIZE = 16
ITERATIONS_SIZE = 3
KEY_SIZE = 32  # 256 bits

_SALT_END = len(FORMAT_TAG) + SALT_SIZE
_ITERATIONS_END = _SALT_END + ITERATIONS_SIZE
ENCODED_SIZE = _ITERATIONS_END + KEY_SIZE

MAX_ITERATIONS = (1 << (8 * ITERATIONS_SIZE)) - 1


class CredentialCodec:
    """Derives and verifies password hashes."""

    @staticmethod
    def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
        return PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_SIZE,
            salt=salt,
            iterations=iterations,
        )

    @staticmethod
    def hash(password: str, iterations: int = PBKDF2_ITERATIONS) -> str:
        """Hash a password with a fresh random salt.

        Args:
            password: Plain text password
            iterations: PBKDF2 iteration count, embedded in the result

        Returns:
            Base64 string carrying tag, salt, iteration count and key
        """
        if not 0 < iterations <= MAX_ITERATIONS:
            raise ValueError(f"iterations must be in 1..{MAX_ITERATIONS}, got {iterations}")

        salt = os.urandom(SALT_SIZE)
        key = CredentialCodec._kdf(salt, iterations).derive(password.encode("utf-8"))
        composite = FORMAT_TAG + salt + iterations.to_bytes(ITERATIONS_SIZE, "big") + key
        return base64.b64encode(composite).decode("ascii")

    @staticmethod
    def verify(plaintext: str, encoded_hash: str) -> bool:
        """Check a plain text password against a stored hash.

        Returns False for a wrong password. The key comparison is
        constant-time (PBKDF2HMAC.verify).

        Raises:
            FormatError: If the stored hash is not a valid "v01" composite
        """
        try:
            composite = base64.b64decode(encoded_hash, validate=True)
        except (binascii.Error, ValueError) as e:
            raise FormatError(f"Invalid key: {e}")

        if len(composite) != ENCODED_SIZE:
            raise FormatError("Invalid key: unexpected length")

        tag = composite[:len(FORMAT_TAG)]
        if tag != FORMAT_TAG:
            raise FormatError("Invalid key: unknown format")

        salt = composite[len(FORMAT_TAG):_SALT_END]
        iterations = int.from_bytes(composite[_SALT_END:_ITERATIONS_END], "big")
        key = composite[_ITERATIONS_END:]
        if iterations == 0:
            raise FormatError("Invalid key: zero iterations")

        try:
            CredentialCodec._kdf(salt, iterations).verify(plaintext.encode("utf-8"), key)
        except InvalidKey:
            return False
        return True
