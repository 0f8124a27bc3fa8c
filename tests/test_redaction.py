import pytest

from lfx_auth.redaction import redact, redact_email


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", ""),
        ("a", "**"),
        ("ab", "**"),
        ("abc", "a****"),
        ("abcde", "a****"),
        ("abcdef", "abc****"),
        ("johndoe123", "joh****"),
        ("verylongsensitivedata", "ver****"),
    ],
)
def test_redact(value, expected):
    assert redact(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", ""),
        ("notanemail", "not****"),
        ("a@example.com", "**@example.com"),
        ("john@example.com", "j****@example.com"),
        ("johndoe@example.com", "joh****@example.com"),
        ("john.doe@example.com", "joh****@example.com"),
        ("verylongusername@example.com", "ver****@example.com"),
        ("a@b@example.com", "a@b****"),
        ("jóse@example.com", "j****@example.com"),
    ],
)
def test_redact_email(value, expected):
    assert redact_email(value) == expected


def test_redact_counts_characters_not_bytes():
    assert redact("こんにちは") == "こ****"
    assert redact("こんにちは世界") == "こんに****"