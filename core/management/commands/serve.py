"""
Start the server only after storage is reachable, migrated and seeded.

Any failure before listening raises ``CommandError`` so the process exits
with a non-zero status.
"""
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS

from core.bootstrap import Bootstrapper, BootstrapError
from core.storage import SchemaSync, StorageHandle


class Command(BaseCommand):
    help = "Connect to the database, sync the schema, ensure seed accounts, then run the HTTP server."

    def add_arguments(self, parser):
        parser.add_argument('addrport', nargs='?', help='Optional ip:port to listen on (default 0.0.0.0:$PORT).')
        parser.add_argument(
            '--schema-sync',
            choices=[s.value for s in SchemaSync],
            help='Override SCHEMA_SYNC for this run.',
        )
        parser.add_argument('--database', default=DEFAULT_DB_ALIAS)

    def handle(self, *args, **opts):
        addrport = opts.get('addrport') or f"0.0.0.0:{settings.PORT}"
        strategy = opts.get('schema_sync') or settings.SCHEMA_SYNC
        if strategy == SchemaSync.FORCE.value and settings.ENV == 'prod':
            raise CommandError("Refusing --schema-sync=force in prod")

        boot = Bootstrapper(StorageHandle(opts['database']), strategy=strategy)
        try:
            boot.serve(lambda: self._listen(boot, addrport))
        except BootstrapError as exc:
            raise CommandError(f"Failed to start server - DB error: {exc}") from exc

    def _listen(self, boot, addrport):
        for account_id in boot.seeded_ids:
            self.stdout.write(self.style.SUCCESS(f"[SEED] Created account: {account_id}"))
        port = addrport.rsplit(':', 1)[-1]
        self.stdout.write(self.style.SUCCESS(f"Server running on http://localhost:{port}"))
        self.stdout.write(f"   Internal Address: http://{addrport}")
        self.stdout.write(f"   Database: {boot.storage.vendor} ({settings.ENV})")
        call_command('runserver', addrport, use_reloader=False)
