# core/management/commands/ensure_seed_accounts.py
from django.core.management.base import BaseCommand
from django.db import DEFAULT_DB_ALIAS

from core.seed import SEED_ACCOUNTS, ensure_seed_accounts


class Command(BaseCommand):
    help = "Create the baseline admin and patient accounts if they are missing (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--database', default=DEFAULT_DB_ALIAS)

    def handle(self, *args, **opts):
        created = set(ensure_seed_accounts(using=opts['database']))
        for seed in SEED_ACCOUNTS:
            state = "created" if seed.id in created else "exists"
            self.stdout.write(self.style.SUCCESS(f"{state}: {seed.id} ({seed.active_role})"))
        self.stdout.write(self.style.SUCCESS("All seed accounts ensured."))
