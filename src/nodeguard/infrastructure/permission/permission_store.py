"""Permission store - immutable in-memory snapshot of all permission records."""

import asyncio
import logging
from datetime import UTC, datetime

from nodeguard.domain.entities import PermissionRecord
from nodeguard.domain.exceptions import LoadError

logger = logging.getLogger(__name__)

DEFAULT_LOAD_TIMEOUT = 10.0


class PermissionStore:
    """Holds the active snapshot and replaces it atomically on reload.

    Readers call snapshot() and get an immutable tuple; they never take a
    lock. Reloads are serialized among themselves so an older reload can
    not overwrite a newer one.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        load_timeout: float = DEFAULT_LOAD_TIMEOUT,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._load_timeout = load_timeout
        self._snapshot: tuple[PermissionRecord, ...] = ()
        self._loaded_at: datetime | None = None
        self._reload_lock = asyncio.Lock()

    def snapshot(self) -> tuple[PermissionRecord, ...]:
        """Current snapshot, empty until the first successful load."""
        return self._snapshot

    @property
    def loaded(self) -> bool:
        return self._loaded_at is not None

    @property
    def loaded_at(self) -> datetime | None:
        return self._loaded_at

    async def load(self) -> None:
        """Fetch every record and swap the snapshot.

        Raises LoadError on timeout or persistence failure; the previous
        snapshot stays active in that case.
        """
        async with self._reload_lock:
            try:
                async with asyncio.timeout(self._load_timeout):
                    async with self._uow_factory() as uow:
                        records = await uow.permissions.find_all()
                snapshot = tuple(records)
            except TimeoutError as exc:
                raise LoadError(
                    f"Loading permissions timed out after {self._load_timeout}s"
                ) from exc
            except Exception as exc:
                raise LoadError(f"Failed fetching permissions: {exc}") from exc

            self._snapshot = snapshot
            self._loaded_at = datetime.now(UTC)
            logger.info("Loaded %d permission records", len(snapshot))

    async def refresh(self) -> bool:
        """Load, logging failures instead of raising. Returns True on success."""
        try:
            await self.load()
        except LoadError:
            logger.exception("Permission reload failed")
            if not self.loaded:
                logger.warning(
                    "No permission records loaded; denying everything except "
                    "override users until a reload succeeds"
                )
            else:
                logger.warning(
                    "Serving stale permission snapshot from %s",
                    self._loaded_at.isoformat(),
                )
            return False
        return True
