"""Unit tests for id generation."""
import re

from photolib.services.ids import generate_id


def test_generated_ids_are_url_safe_and_fixed_length():
    for _ in range(50):
        value = generate_id()
        assert len(value) == 16
        assert re.fullmatch(r"[A-Za-z0-9_-]{16}", value)


def test_generated_ids_differ():
    assert len({generate_id() for _ in range(100)}) == 100


def test_custom_length():
    assert len(generate_id(8)) == 8
