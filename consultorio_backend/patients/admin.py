"""
Patients App - Admin
"""

from django.contrib import admin
from django.utils.html import format_html

from consultorio_backend.patients.models import Patient
from consultorio_backend.patients.odontogram import Odontogram


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "age",
        "phone",
        "charted_teeth",
        "created_at",
    )
    list_filter = ("created_at", "updated_at")
    search_fields = ("name", "phone")
    ordering = ("name",)
    list_per_page = 50

    readonly_fields = ("id", "created_at", "updated_at")

    fieldsets = (
        ("Paciente", {
            "fields": ("name", "age", "phone", "notes")
        }),
        ("Odontograma", {
            "fields": ("odontogram",),
            "classes": ("collapse",)
        }),
        ("Sistema", {
            "fields": ("id", "created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )

    def charted_teeth(self, obj):
        """Teeth with a recorded condition."""
        charted = [f"{tooth} ({code})" for tooth, code in Odontogram.for_patient(obj) if code]
        return format_html('<span style="color: #5F6368;">{}</span>', ", ".join(charted) or "-")
    charted_teeth.short_description = "Odontograma"
