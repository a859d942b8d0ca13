from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.salon_system.salon_system.common.datetime_utils import add_years
from src.salon_system.salon_system.core.exceptions import AuthenticationError, ConfigurationError
from src.salon_system.salon_system.users.tokens import JwtSettings, TokenIssuer

TEST_SECRET = "test-jwt-secret-that-is-long-enough-for-hs256"
FIXED_NOW = datetime(2024, 5, 10, 12, 0, 0, tzinfo=timezone.utc)


def test_token_is_a_non_empty_string(token_issuer, robert):
    token = token_issuer.generate_token(robert)

    assert isinstance(token, str)
    assert token.count(".") == 2


def test_token_carries_identity_claims(token_issuer, robert):
    claims = jwt.decode(token_issuer.generate_token(robert), TEST_SECRET, algorithms=["HS256"])

    assert claims["Id"] == str(robert.user_id)
    assert claims["Name"] == robert.name
    assert claims["Email"] == robert.email
    assert claims["Login"] == robert.login
    assert claims["Role"] == "0"


def test_token_expires_about_one_year_from_now(token_issuer, robert):
    claims = jwt.decode(token_issuer.generate_token(robert), TEST_SECRET, algorithms=["HS256"])

    expected = add_years(datetime.now(timezone.utc), 1)
    exp = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
    assert abs(exp - expected) < timedelta(minutes=1)


def test_tokens_for_different_users_differ(token_issuer, robert, tony):
    assert token_issuer.generate_token(robert) != token_issuer.generate_token(tony)


def test_fixed_clock_drives_iat_and_exp(jwt_settings, robert):
    issuer = TokenIssuer(jwt_settings, clock=lambda: FIXED_NOW)

    claims = jwt.decode(
        issuer.generate_token(robert),
        TEST_SECRET,
        algorithms=["HS256"],
        options={"verify_exp": False, "verify_nbf": False, "verify_iat": False},
    )

    assert claims["iat"] == int(FIXED_NOW.timestamp())
    assert claims["exp"] == int(datetime(2025, 5, 10, 12, 0, 0, tzinfo=timezone.utc).timestamp())


def test_decode_returns_claims(token_issuer, tony):
    claims = token_issuer.decode_token(token_issuer.generate_token(tony))

    assert claims["Login"] == "tony"
    assert claims["Role"] == "1"


def test_decode_rejects_token_signed_with_other_secret(token_issuer, robert):
    other = TokenIssuer(JwtSettings(secret="another-secret-that-is-also-long-enough"))

    with pytest.raises(AuthenticationError, match="Invalid token"):
        token_issuer.decode_token(other.generate_token(robert))


def test_decode_rejects_expired_token(jwt_settings, token_issuer, robert):
    long_ago = datetime(2000, 1, 1, tzinfo=timezone.utc)
    old = TokenIssuer(jwt_settings, clock=lambda: long_ago).generate_token(robert)

    with pytest.raises(AuthenticationError, match="Token expired"):
        token_issuer.decode_token(old)


def test_decode_rejects_garbage(token_issuer):
    with pytest.raises(AuthenticationError):
        token_issuer.decode_token("not-a-token")


def test_decode_rejects_token_without_identity_claims(token_issuer):
    now = datetime.now(timezone.utc)
    token = jwt.encode({"iat": now, "exp": now + timedelta(hours=1)}, TEST_SECRET, algorithm="HS256")

    with pytest.raises(AuthenticationError, match="Invalid token"):
        token_issuer.decode_token(token)


def test_missing_secret_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        JwtSettings(secret="")


def test_short_secret_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        JwtSettings(secret="too-short")


def test_hs512_needs_a_longer_secret():
    with pytest.raises(ConfigurationError):
        JwtSettings(secret=TEST_SECRET, algorithm="HS512")


def test_unsupported_algorithm_is_rejected():
    with pytest.raises(ConfigurationError):
        JwtSettings(secret=TEST_SECRET, algorithm="none")


def test_settings_from_mapping():
    settings = JwtSettings.from_mapping({"JWT_SECRET": TEST_SECRET})

    assert settings.secret == TEST_SECRET
    assert settings.algorithm == "HS256"
    assert settings.validity_years == 1


def test_settings_from_mapping_without_secret_fails():
    with pytest.raises(ConfigurationError):
        JwtSettings.from_mapping({})
