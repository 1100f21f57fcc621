"""
Database models for the MedRecord backend.

``User`` is the account record every handler group works with; it is
keyed by a stable string identifier (staff id or national patient number)
rather than an auto-increment integer.  ``Message`` and ``Notification``
back the messaging and notification handler groups.
"""
from __future__ import annotations

from django.contrib.auth.base_user import BaseUserManager
from django.contrib.auth.models import AbstractUser
from django.core.exceptions import ValidationError
from django.db import models


ROLE_CHOICES = [
    ('patient', 'Patient'),
    ('doctor', 'Doctor'),
    ('admin', 'Administrator'),
]
ROLE_TAGS = {tag for tag, _ in ROLE_CHOICES}


class AccountManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, id, password, **extra_fields):
        if not id:
            raise ValueError('An account identifier is required')
        email = self.normalize_email(extra_fields.pop('email', ''))
        roles = extra_fields.pop('roles', None) or ['patient']
        extra_fields.setdefault('active_role', roles[0])
        user = self.model(id=id, email=email, roles=roles, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, id, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(id, password, **extra_fields)

    def create_superuser(self, id, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('roles', ['admin'])
        return self._create_user(id, password, **extra_fields)


class User(AbstractUser):
    """An account with one or more role tags and the role currently in use.

    ``active_role`` must always be one of ``roles``; ``save()`` refuses to
    persist a record that breaks this.
    """
    id = models.CharField(max_length=64, primary_key=True)
    username = None
    first_name = None
    last_name = None
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=32, blank=True)
    roles = models.JSONField(default=list)
    active_role = models.CharField(max_length=20, choices=ROLE_CHOICES)

    objects = AccountManager()

    USERNAME_FIELD = 'id'
    REQUIRED_FIELDS = ['name']

    def check_roles(self) -> None:
        if not isinstance(self.roles, list) or not self.roles:
            raise ValidationError({'roles': 'An account needs at least one role.'})
        unknown = set(self.roles) - ROLE_TAGS
        if unknown:
            raise ValidationError({'roles': f"Unknown role(s): {', '.join(sorted(unknown))}"})
        if self.active_role not in self.roles:
            raise ValidationError({'active_role': f'{self.active_role!r} is not one of {self.roles}.'})

    def clean(self) -> None:
        super().clean()
        self.check_roles()

    def save(self, *args, **kwargs):
        self.check_roles()
        super().save(*args, **kwargs)

    def switch_role(self, role: str) -> None:
        if role not in self.roles:
            raise ValidationError({'role': f'{role!r} is not held by this account.'})
        self.active_role = role
        self.save(update_fields=['active_role'])

    def get_full_name(self) -> str:
        return self.name

    def get_short_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return f"{self.id} ({self.active_role})"


class Message(models.Model):
    """A direct message between two accounts."""
    sender = models.ForeignKey(User, on_delete=models.CASCADE, related_name='sent_messages')
    recipient = models.ForeignKey(User, on_delete=models.CASCADE, related_name='received_messages')
    body = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    read_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self) -> str:
        return f"{self.sender_id} -> {self.recipient_id}"


class Notification(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='notifications')
    title = models.CharField(max_length=255)
    body = models.TextField(blank=True)
    read = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self) -> str:
        return f"{self.title} for {self.user_id}"
