from django.apps import AppConfig


class ReportsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'consultorio_backend.reports'
    verbose_name = 'Relatórios'
