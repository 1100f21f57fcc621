"""
Startup sequence: connect, sync schema, seed, then serve.

Each step runs only after the previous one succeeded.  A failing step
moves the bootstrapper to ``FAILED`` and raises ``BootstrapError``; the
``start`` callback handed to ``serve`` is then never called.
"""
from __future__ import annotations

import enum
import logging
from typing import Callable, Optional

from .seed import ensure_seed_accounts
from .storage import SchemaSync, StorageHandle

logger = logging.getLogger(__name__)


class BootState(str, enum.Enum):
    DISCONNECTED = 'disconnected'
    CONNECTED = 'connected'
    SCHEMA_SYNCED = 'schema_synced'
    SEEDED = 'seeded'
    SERVING = 'serving'
    FAILED = 'failed'


class BootstrapError(RuntimeError):
    def __init__(self, step: str, cause: BaseException):
        super().__init__(f'startup failed during {step}: {cause}')
        self.step = step
        self.cause = cause


class Bootstrapper:
    def __init__(
        self,
        storage: Optional[StorageHandle] = None,
        strategy: SchemaSync = SchemaSync.ALTER,
        seeder: Callable[..., list] = ensure_seed_accounts,
    ):
        self.storage = storage or StorageHandle()
        self.strategy = SchemaSync(strategy)
        self.seeder = seeder
        self.state = BootState.DISCONNECTED
        self.seeded_ids: list[str] = []

    def _step(self, name: str, target: BootState, action: Callable[[], object]):
        try:
            result = action()
        except Exception as exc:
            self.state = BootState.FAILED
            logger.exception('Startup step %s failed', name)
            raise BootstrapError(name, exc) from exc
        self.state = target
        return result

    def run(self) -> BootState:
        """Bring storage up and seed it; returns ``SEEDED`` on success."""
        if self.state is not BootState.DISCONNECTED:
            raise RuntimeError(f'bootstrap already ran (state={self.state.value})')
        self._step('connect', BootState.CONNECTED, self.storage.connect)
        self._step('schema', BootState.SCHEMA_SYNCED, lambda: self.storage.sync_schema(self.strategy))
        self.seeded_ids = self._step('seed', BootState.SEEDED, lambda: self.seeder(using=self.storage.alias))
        return self.state

    def serve(self, start: Callable[[], object]):
        self.run()
        self.state = BootState.SERVING
        return start()
