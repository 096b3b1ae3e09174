"""Testes de derivação de identidade e chave de sessão."""

from __future__ import annotations

import pytest

from app.domain.identity import derive_session_key, space_id, strip_prefix, user_id


class TestStripPrefix:
    """Remoção idempotente de prefixos de namespace."""

    @pytest.mark.parametrize(
        ("raw", "prefix", "expected"),
        [
            ("spaces/AAA", "spaces/", "AAA"),
            ("AAA", "spaces/", "AAA"),
            ("users/123", "users/", "123"),
            ("", "users/", ""),
            ("spaces/", "spaces/", ""),
        ],
    )
    def test_strip_prefix(self, raw: str, prefix: str, expected: str) -> None:
        assert strip_prefix(raw, prefix) == expected

    def test_strip_prefix_is_idempotent(self) -> None:
        once = strip_prefix("spaces/spaces/X", "spaces/")
        assert once == "spaces/X"
        assert space_id("spaces/X") == strip_prefix(space_id("spaces/X"), "spaces/")

    def test_prefix_only_removed_at_start(self) -> None:
        assert user_id("x/users/1") == "x/users/1"


class TestDeriveSessionKey:
    """Chaves determinísticas por DM (usuário) e grupo (espaço)."""

    def test_dm_key_uses_user(self) -> None:
        assert derive_session_key("S1", "U1", is_dm=True) == "dm:U1"

    def test_group_key_uses_surface(self) -> None:
        assert derive_session_key("S1", "U1", is_dm=False) == "group:S1"

    def test_dm_key_ignores_surface(self) -> None:
        keys = {derive_session_key(surface, "U1", is_dm=True) for surface in ("A", "B", "C")}
        assert keys == {"dm:U1"}

    def test_group_key_ignores_sender(self) -> None:
        keys = {derive_session_key("S1", sender, is_dm=False) for sender in ("U1", "U2", "")}
        assert keys == {"group:S1"}
