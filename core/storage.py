"""
Storage handle used during startup.

Wraps one Django database alias: verify the connection, reconcile the
schema, and expose the alias to the seeding step.  Request handlers use
the ORM directly and never go through this object.
"""
from __future__ import annotations

import enum
import logging

from django.core.management import call_command
from django.db import DEFAULT_DB_ALIAS, connections

logger = logging.getLogger(__name__)


class SchemaSync(str, enum.Enum):
    ALTER = 'alter'
    FORCE = 'force'


class StorageHandle:
    def __init__(self, alias: str = DEFAULT_DB_ALIAS):
        self.alias = alias

    @property
    def connection(self):
        return connections[self.alias]

    @property
    def vendor(self) -> str:
        return self.connection.vendor

    def connect(self) -> None:
        self.connection.ensure_connection()
        logger.info('Database connection established (%s, alias=%s)', self.vendor, self.alias)

    def sync_schema(self, strategy: SchemaSync = SchemaSync.ALTER) -> None:
        strategy = SchemaSync(strategy)
        call_command('migrate', database=self.alias, interactive=False, verbosity=0)
        if strategy is SchemaSync.FORCE:
            call_command('flush', database=self.alias, interactive=False, verbosity=0)
        logger.info('Schema synchronised (strategy=%s)', strategy.value)
