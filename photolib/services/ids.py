"""Random identifiers for albums and photos."""
import secrets

from ..config import GENERATED_ID_LENGTH


def generate_id(length: int = GENERATED_ID_LENGTH) -> str:
    """Return a URL-safe random id of exactly ``length`` characters.

    Collisions are not checked against existing ids.
    """
    return secrets.token_urlsafe(length)[:length]
