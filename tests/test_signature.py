import pytest

from hmactoken.errors import SerializationError
from hmactoken.serializer import JsonSerializer, ModelSerializer
from hmactoken.signature import derive_signature, secret_bytes, signatures_match
from tests.payloads import Claims

EXPECTED_SIGNATURE = "Ir9W3KCkyGNmsPFURs4Sj7aQSkuvcqpQ7kTk4F6wCyU"


def test_derive_signature_known_value(claims: Claims, secret: str) -> None:
    assert derive_signature(claims, secret, ModelSerializer(Claims)) == EXPECTED_SIGNATURE


def test_signature_is_unpadded_sha256_digest(claims: Claims, secret: str) -> None:
    signature = derive_signature(claims, secret, ModelSerializer(Claims))

    assert len(signature) == 43
    assert "=" not in signature


def test_bytes_and_text_secrets_agree(claims: Claims) -> None:
    serializer = ModelSerializer(Claims)

    from_text = derive_signature(claims, "secret", serializer)

    assert derive_signature(claims, b"secret", serializer) == from_text
    assert derive_signature(claims, bytearray(b"secret"), serializer) == from_text


def test_different_secret_changes_signature(claims: Claims) -> None:
    serializer = ModelSerializer(Claims)

    assert derive_signature(claims, "secret", serializer) != derive_signature(
        claims, "other secret", serializer
    )


def test_serialization_failure_propagates(secret: str) -> None:
    with pytest.raises(SerializationError):
        derive_signature({"when": object()}, secret, JsonSerializer())


def test_secret_bytes_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        secret_bytes(1234)


def test_signatures_match() -> None:
    assert signatures_match(EXPECTED_SIGNATURE, EXPECTED_SIGNATURE) is True
    assert signatures_match(EXPECTED_SIGNATURE, EXPECTED_SIGNATURE[:-1] + "V") is False
    assert signatures_match(EXPECTED_SIGNATURE, EXPECTED_SIGNATURE[:-1]) is False
    assert signatures_match(EXPECTED_SIGNATURE, "") is False


def test_signatures_match_accepts_non_ascii_candidate() -> None:
    assert signatures_match(EXPECTED_SIGNATURE, "ünïcode") is False
