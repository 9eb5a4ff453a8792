"""Low-level services: credential hashing, session tokens, id generation."""
from .credentials import CredentialCodec
from .tokens import SessionTokenService
from .ids import generate_id

__all__ = [
    "CredentialCodec",
    "SessionTokenService",
    "generate_id",
]
