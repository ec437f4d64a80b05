# tests/core/test_signature.py
"""
Тесты для проверки подписи initData.
"""

from __future__ import annotations

import hashlib
import hmac
from urllib.parse import parse_qsl, urlencode

from src.core.init_data.signature import (
    authenticate_init_data,
    compute_init_data_hash,
    derive_secret_key,
    sign_init_data,
    verify_signature,
)

DAY = 86400


def _replace_param(raw: str, key: str, value: str) -> str:
    """Заменяет значение параметра, сохраняя порядок."""
    return urlencode([(k, value if k == key else v) for k, v in parse_qsl(raw, keep_blank_values=True)])


class TestSecretKey:
    """Тесты для производного ключа."""

    def test_matches_reference_algorithm(self, bot_token: str) -> None:
        """Проверяет ключ: HMAC-SHA256(key="WebAppData", msg=token)."""
        expected = hmac.new(b"WebAppData", bot_token.encode(), hashlib.sha256).digest()

        assert derive_secret_key(bot_token) == expected

    def test_hash_is_hex(self, bot_token: str) -> None:
        result = compute_init_data_hash("auth_date=1", bot_token)

        assert len(result) == 64
        int(result, 16)


class TestVerifySignature:
    """Тесты для verify_signature."""

    def test_valid(self, signed_raw, bot_token: str) -> None:
        assert verify_signature(signed_raw(), bot_token) is True

    def test_wrong_token(self, signed_raw) -> None:
        assert verify_signature(signed_raw(), "other_token") is False

    def test_tampered_value(self, signed_raw, bot_token: str, now: int) -> None:
        """Проверяет, что изменение любого поля ломает подпись."""
        raw = _replace_param(signed_raw(), "auth_date", str(now + 1))

        assert verify_signature(raw, bot_token) is False

    def test_reordered_params_still_valid(self, signed_raw, bot_token: str) -> None:
        """Проверяет независимость подписи от порядка параметров."""
        pairs = parse_qsl(signed_raw(), keep_blank_values=True)

        assert verify_signature(urlencode(list(reversed(pairs))), bot_token) is True

    def test_missing_hash(self, bot_token: str) -> None:
        assert verify_signature("auth_date=1", bot_token) is False

    def test_empty_inputs(self, signed_raw, bot_token: str) -> None:
        assert verify_signature("", bot_token) is False
        assert verify_signature(signed_raw(), "") is False


class TestSignInitData:
    """Тесты для sign_init_data."""

    def test_skips_none_and_hash(self, bot_token: str) -> None:
        raw = sign_init_data({"auth_date": 1, "query_id": None, "hash": "old"}, bot_token)
        params = dict(parse_qsl(raw))

        assert "query_id" not in params
        assert params["hash"] != "old"

    def test_user_encoded_as_json(self, bot_token: str) -> None:
        raw = sign_init_data({"auth_date": 1, "user": {"id": 1, "first_name": "A"}}, bot_token)

        assert dict(parse_qsl(raw))["user"] == '{"id":1,"first_name":"A"}'


class TestAuthenticateInitData:
    """Тесты для authenticate_init_data."""

    def test_valid(self, signed_raw, bot_token: str, now: int, sample_user: dict) -> None:
        result = authenticate_init_data(signed_raw(), bot_token, now=now)

        assert result is not None
        assert result.user is not None
        assert result.user.id == sample_user["id"]

    def test_bad_signature(self, signed_raw, now: int) -> None:
        assert authenticate_init_data(signed_raw(), "other", now=now) is None

    def test_expired(self, signed_raw, bot_token: str, now: int) -> None:
        raw = signed_raw(auth_date=now - DAY - 1)

        assert authenticate_init_data(raw, bot_token, now=now) is None

    def test_boundary_is_fresh(self, signed_raw, bot_token: str, now: int) -> None:
        raw = signed_raw(auth_date=now - DAY)

        assert authenticate_init_data(raw, bot_token, now=now) is not None

    def test_custom_max_age(self, signed_raw, bot_token: str, now: int) -> None:
        raw = signed_raw(auth_date=now - 120)

        assert authenticate_init_data(raw, bot_token, max_age_seconds=60, now=now) is None
        assert authenticate_init_data(raw, bot_token, max_age_seconds=120, now=now) is not None

    def test_signed_without_auth_date(self, bot_token: str, now: int) -> None:
        """Проверяет, что подписанные данные без auth_date отклоняются."""
        raw = sign_init_data({"query_id": "q"}, bot_token)

        assert authenticate_init_data(raw, bot_token, now=now) is None
