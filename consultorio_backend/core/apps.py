"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Default configuration for core (users, roles, audit log)"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'consultorio_backend.core'
    verbose_name = 'Core (Usuários & Perfis)'
