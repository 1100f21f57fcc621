"""
Baseline accounts that must exist before the server takes traffic.

Seeding only ever creates: an account that already exists is left exactly
as it is, whatever its current fields.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from django.contrib.auth.hashers import make_password
from django.db import DEFAULT_DB_ALIAS

from .models import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedAccount:
    id: str
    name: str
    phone: str
    email: str
    password: str
    roles: tuple[str, ...] = field(default=('patient',))

    @property
    def active_role(self) -> str:
        return self.roles[0]


SEED_ACCOUNTS: tuple[SeedAccount, ...] = (
    SeedAccount(
        id='admin001',
        name='Admin User',
        phone='0000000000',
        email='admin@medrecord.com',
        password='admin123',
        roles=('admin',),
    ),
    SeedAccount(
        id='12345678901234',
        name='Test Patient',
        phone='01012345678',
        email='patient@test.com',
        password='test123',
        roles=('patient',),
    ),
)


def ensure_seed_accounts(accounts: Iterable[SeedAccount] = SEED_ACCOUNTS, using: str = DEFAULT_DB_ALIAS) -> list[str]:
    """Create each missing seed account; return the ids that were created."""
    created_ids: list[str] = []
    manager = User.objects.db_manager(using)
    for seed in accounts:
        _, created = manager.get_or_create(
            id=seed.id,
            defaults={
                'name': seed.name,
                'phone': seed.phone,
                'email': seed.email,
                'password': make_password(seed.password),
                'roles': list(seed.roles),
                'active_role': seed.active_role,
            },
        )
        if created:
            created_ids.append(seed.id)
            logger.info('[SEED] Created %s account: %s', seed.active_role, seed.id)
        else:
            logger.debug('[SEED] %s already present', seed.id)
    return created_ids
