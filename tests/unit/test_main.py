"""Unit tests for the composition root and CLI helpers."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from nodeguard.config import Settings
from nodeguard.main import build_actor, build_engine, main, run_check

from tests.conftest import make_uow_factory, role_record, FakeUnitOfWork


def test_build_actor_scoped() -> None:
    actor = build_actor("u1", ["R1"], "g1")
    assert actor.role_ids == ("R1", "g1")
    assert actor.scope == "g1"


def test_build_actor_direct() -> None:
    actor = build_actor("u1", ["R1"], None)
    assert actor.role_ids == ("R1",)
    assert actor.scope is None


def test_build_engine_wires_overrides() -> None:
    settings = Settings(_env_file=None, backdoor_ids="b1,b2", owner_id="o1")
    engine = build_engine(settings)

    assert engine.authorizer.is_authorized("x", build_actor("b2", [], None))
    assert engine.authorizer.is_authorized("x", build_actor("o1", [], None))
    assert not engine.authorizer.is_authorized("x", build_actor("u1", [], None))


@pytest.mark.asyncio
async def test_run_check_loads_then_decides() -> None:
    from nodeguard.infrastructure.permission.authorizer import NodeGuardAuthorizer
    from nodeguard.infrastructure.permission.permission_store import PermissionStore

    uow = FakeUnitOfWork()
    uow.permissions.add(role_record("R1", "admin.*"))
    store = PermissionStore(make_uow_factory(uow))
    engine = MagicMock()
    engine.pool.open = AsyncMock()
    engine.pool.close = AsyncMock()
    engine.store = store
    engine.authorizer = NodeGuardAuthorizer(store)

    assert await run_check(engine, "admin.kick", build_actor("u1", ["R1"], None), False)
    assert not await run_check(engine, "admin.kick", build_actor("u1", ["R1"], None), True)
    engine.pool.close.assert_awaited()


@pytest.mark.asyncio
async def test_run_check_load_failure_returns_none() -> None:
    engine = MagicMock()
    engine.pool.open = AsyncMock()
    engine.pool.close = AsyncMock()
    engine.store.refresh = AsyncMock(return_value=False)

    assert await run_check(engine, "x", build_actor("u1", [], None), False) is None
    engine.pool.close.assert_awaited_once()


def test_version_command(capsys) -> None:
    assert main(["version"]) == 0
    assert "NodeGuard v" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("result", "code", "stream", "text"),
    [
        (True, 0, "out", "allowed"),
        (False, 1, "out", "denied"),
        (None, 2, "err", "could not be loaded"),
    ],
)
def test_check_command_exit_codes(monkeypatch, capsys, result, code, stream, text) -> None:
    seen = {}

    async def fake_run_check(engine, node, actor, strict):
        seen.update(node=node, actor=actor, strict=strict)
        return result

    monkeypatch.setattr("nodeguard.main.build_engine", lambda settings: MagicMock())
    monkeypatch.setattr("nodeguard.main.run_check", fake_run_check)

    exit_code = main(
        ["check", "admin.kick", "--user", "u1", "--role", "R1", "--scope", "g1", "--strict"]
    )

    assert exit_code == code
    assert text in getattr(capsys.readouterr(), stream)
    assert seen["node"] == "admin.kick"
    assert seen["actor"].role_ids == ("R1", "g1")
    assert seen["strict"] is True
