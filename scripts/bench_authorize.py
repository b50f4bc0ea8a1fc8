#!/usr/bin/env python3
"""Benchmark is_authorized: latency (p50, p95, p99) and QPS over a synthetic snapshot.

Usage:
  uv run python scripts/bench_authorize.py [--records 5000] [--queries 20000]
"""
from __future__ import annotations

import argparse
import asyncio
import random
import statistics
import sys
import time
from contextlib import asynccontextmanager

from nodeguard.domain.entities import Actor, PermissionRecord
from nodeguard.domain.value_objects import Decision, RoleSubject, UserSubject
from nodeguard.infrastructure.permission.authorizer import NodeGuardAuthorizer
from nodeguard.infrastructure.permission.permission_store import PermissionStore

NODES = ["admin.kick", "admin.ban", "report.delete", "report.requeue", "tag.create", "tag.edit", "ping", "stats"]


class _MemoryRepository:
    def __init__(self, records: list[PermissionRecord]) -> None:
        self._records = records

    async def find_all(self) -> list[PermissionRecord]:
        return self._records


class _MemoryUnitOfWork:
    def __init__(self, records: list[PermissionRecord]) -> None:
        self.permissions = _MemoryRepository(records)


def build_records(count: int, scopes: int, rng: random.Random) -> list[PermissionRecord]:
    records = []
    for i in range(count):
        scope = f"g{rng.randrange(scopes)}"
        node = rng.choice(NODES)
        if rng.random() < 0.2:
            node = node.split(".")[0] + ".*"
        subject = RoleSubject(f"r{rng.randrange(200)}") if rng.random() < 0.8 else UserSubject(f"u{rng.randrange(1000)}")
        records.append(
            PermissionRecord(
                id=i + 1,
                scope=scope,
                subject=subject,
                node=node,
                decision=Decision.from_allowed(rng.random() < 0.85),
            )
        )
    return records


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark authorization")
    parser.add_argument("--records", type=int, default=5000, help="Permission records in snapshot")
    parser.add_argument("--queries", type=int, default=20000, help="Number of is_authorized calls")
    parser.add_argument("--scopes", type=int, default=50, help="Distinct scopes")
    parser.add_argument("--seed", type=int, default=1)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    uow = _MemoryUnitOfWork(build_records(args.records, args.scopes, rng))

    @asynccontextmanager
    async def factory():
        yield uow

    store = PermissionStore(factory)
    asyncio.run(store.load())
    authorizer = NodeGuardAuthorizer(store)

    latencies: list[float] = []
    allowed = 0
    start = time.perf_counter()
    for _ in range(args.queries):
        actor = Actor.member(
            f"u{rng.randrange(1000)}",
            f"g{rng.randrange(args.scopes)}",
            [f"r{rng.randrange(200)}" for _ in range(rng.randrange(1, 6))],
        )
        t0 = time.perf_counter()
        allowed += authorizer.is_authorized(rng.choice(NODES), actor, strict=rng.random() < 0.1)
        latencies.append((time.perf_counter() - t0) * 1000)
    total = time.perf_counter() - start

    latencies.sort()
    q = statistics.quantiles(latencies, n=100)
    print(f"records={args.records} queries={args.queries} allowed={allowed}")
    print(f"p50={q[49]:.3f}ms p95={q[94]:.3f}ms p99={q[98]:.3f}ms")
    print(f"qps={args.queries / total:.0f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
