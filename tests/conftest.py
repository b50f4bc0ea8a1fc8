"""Pytest fixtures for NodeGuard tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace

import pytest

from nodeguard.domain.entities import PermissionRecord
from nodeguard.domain.value_objects import Decision, RoleSubject, Subject, UserSubject
from nodeguard.infrastructure.permission.authorizer import NodeGuardAuthorizer
from nodeguard.infrastructure.permission.permission_store import PermissionStore


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission repository keeping insertion order."""

    def __init__(self) -> None:
        self._records: list[PermissionRecord] = []
        self._next_id = 1
        self.fail_with: Exception | None = None

    def add(self, record: PermissionRecord) -> PermissionRecord:
        """Helper to append a record for tests."""
        stored = replace(record, id=self._next_id)
        self._next_id += 1
        self._records.append(stored)
        return stored

    async def find_all(self) -> list[PermissionRecord]:
        if self.fail_with:
            raise self.fail_with
        return list(self._records)

    async def list_by_scope(self, scope: str | None) -> list[PermissionRecord]:
        return [r for r in self._records if r.scope == scope]

    async def find_one(
        self, scope: str | None, subject: Subject, node: str
    ) -> PermissionRecord | None:
        for r in self._records:
            if r.key == (scope, subject, node):
                return r
        return None

    async def create(self, record: PermissionRecord) -> PermissionRecord:
        return self.add(record)

    async def update(self, record: PermissionRecord) -> None:
        self._records = [record if r.id == record.id else r for r in self._records]

    async def delete(self, record_id: int) -> None:
        self._records = [r for r in self._records if r.id != record_id]


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.permissions = FakePermissionRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow
        await uow.commit()

    return _factory


def role_record(
    role_id: str, node: str, allowed: bool = True, scope: str | None = None
) -> PermissionRecord:
    return PermissionRecord(
        scope=scope,
        subject=RoleSubject(role_id),
        node=node,
        decision=Decision.from_allowed(allowed),
    )


def user_record(
    user_id: str, node: str, allowed: bool = True, scope: str | None = None
) -> PermissionRecord:
    return PermissionRecord(
        scope=scope,
        subject=UserSubject(user_id),
        node=node,
        decision=Decision.from_allowed(allowed),
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def store(uow_factory) -> PermissionStore:
    return PermissionStore(uow_factory, load_timeout=1.0)


@pytest.fixture
def authorizer(store: PermissionStore) -> NodeGuardAuthorizer:
    return NodeGuardAuthorizer(store, backdoor_ids={"backdoor-1"}, owner_id="owner-1")


@pytest.fixture
def load_records(fake_uow: FakeUnitOfWork, store: PermissionStore):
    """Persist records in the given order and load them into the store."""

    async def _load(*records: PermissionRecord) -> None:
        for record in records:
            fake_uow.permissions.add(record)
        await store.load()

    return _load
