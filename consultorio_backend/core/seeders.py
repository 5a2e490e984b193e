import os

from django.contrib.auth import get_user_model
from django.db import transaction

from .models import AuditLog, Role

User = get_user_model()

ROLE_DEFINITIONS = [
    (Role.ADMIN, "Admin"),
    (Role.DENTIST, "Dentista"),
    (Role.RECEPTIONIST, "Recepcionista"),
]

# Demo-Benutzer (nicht für Produktion)
DEMO_USERS = [
    ("dra.silva", Role.DENTIST),
    ("dr.souza", Role.DENTIST),
    ("recepcao", Role.RECEPTIONIST),
]
DEMO_PASSWORD = "consultorio123"


def seed_core(flush: bool = False, demo: bool = True) -> dict:
    """
    Seedet:
    - Rollen (admin, dentist, receptionist)
    - initialen Admin (SEED_ADMIN_USERNAME / SEED_ADMIN_PASSWORD)
    - Demo-Benutzer, wenn demo=True

    Bestehende Datensätze werden wiederverwendet, mehrfaches Seeden legt
    keine Duplikate an.

    Wenn flush=True:
        - Löscht AuditLogs
        - Löscht NICHT Superuser
        - Löscht die Demo-Benutzer
    """
    stats: dict[str, int] = {}

    with transaction.atomic():
        if flush:
            AuditLog.objects.all().delete()
            User.objects.filter(
                is_superuser=False,
                username__in=[username for username, _role in DEMO_USERS],
            ).delete()

        roles = _seed_roles()
        stats["core_roles"] = len(roles)

        users = [_seed_admin(roles)]
        if demo:
            users.extend(_seed_demo_users(roles))
        stats["core_users"] = len(users)

    return stats


def _seed_roles() -> dict[str, Role]:
    roles: dict[str, Role] = {}
    for name, label in ROLE_DEFINITIONS:
        role, _created = Role.objects.update_or_create(name=name, defaults={"label": label})
        roles[name] = role
    return roles


def _seed_admin(roles: dict[str, Role]) -> User:
    username = os.getenv("SEED_ADMIN_USERNAME", "admin")
    password = os.getenv("SEED_ADMIN_PASSWORD", "admin12345")

    user = User.objects.filter(username=username).first()
    if user is None:
        user = User.objects.create_superuser(
            username=username,
            email=f"{username}@consultorio.local",
            password=password,
            role=roles[Role.ADMIN],
        )
    elif user.role_id is None:
        user.role = roles[Role.ADMIN]
        user.save(update_fields=["role"])
    return user


def _seed_demo_users(roles: dict[str, Role]) -> list[User]:
    users: list[User] = []
    for username, role_name in DEMO_USERS:
        user = User.objects.filter(username=username).first()
        if user is None:
            user = User.objects.create_user(
                username=username,
                email=f"{username}@consultorio.local",
                password=DEMO_PASSWORD,
                role=roles[role_name],
            )
        users.append(user)
    return users
