"""
Unit tests for reset token and password hashing helpers
"""
import re

from src.app.services.token_service import (
    generate_token,
    hash_password,
    hash_token,
    verify_password,
)

HEX_64 = re.compile(r"^[0-9a-f]{64}$")


def test_generated_tokens_are_64_hex_chars():
    token = generate_token()

    assert HEX_64.match(token)


def test_generated_tokens_do_not_repeat():
    tokens = {generate_token() for _ in range(10_000)}

    assert len(tokens) == 10_000


def test_hash_token_is_deterministic_sha256_hex():
    token = generate_token()

    assert hash_token(token) == hash_token(token)
    assert HEX_64.match(hash_token(token))
    assert hash_token(token) != token


def test_hash_token_known_vector():
    assert (
        hash_token("abc")
        == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_different_tokens_hash_differently():
    assert hash_token(generate_token()) != hash_token(generate_token())


def test_password_hash_round_trip():
    password_hash = hash_password("correct horse", rounds=4)

    assert password_hash != "correct horse"
    assert password_hash.startswith("$2")
    assert verify_password("correct horse", password_hash)
    assert not verify_password("wrong horse", password_hash)


def test_verify_password_rejects_malformed_hash():
    assert verify_password("anything", "not-a-bcrypt-hash") is False
