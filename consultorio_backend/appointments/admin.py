"""
Appointments App - Admin
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import Appointment, Procedure


STATUS_COLORS = {
    Appointment.STATUS_OPEN: "#EA4335",
    Appointment.STATUS_PARTIAL: "#FBBC05",
    Appointment.STATUS_PAID: "#34A853",
}


@admin.register(Procedure)
class ProcedureAdmin(admin.ModelAdmin):
    list_display = ("id", "order", "name", "value", "appointment_count")
    list_editable = ("order",)
    search_fields = ("name",)
    ordering = ("order", "name")

    def appointment_count(self, obj):
        return obj.appointments.count()
    appointment_count.short_description = "Atendimentos"


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "datetime",
        "patient",
        "procedure",
        "total_value",
        "paid_amount",
        "status_badge",
        "payment_date",
    )
    list_filter = ("payment_status", "procedure", "datetime")
    search_fields = ("patient__name", "procedure__name", "notes")
    date_hierarchy = "datetime"
    ordering = ("-datetime",)
    list_select_related = ("patient", "procedure")
    list_per_page = 50

    # Money fields and payment status only change through the billing service
    readonly_fields = ("total_value", "paid_amount", "payment_status", "payment_date", "created_at", "updated_at")

    fieldsets = (
        ("Atendimento", {
            "fields": ("patient", "procedure", "datetime", "notes")
        }),
        ("Consulta", {
            "fields": ("anamnesis",),
            "classes": ("collapse",)
        }),
        ("Cobrança", {
            "fields": ("total_value", "paid_amount", "payment_status", "payment_date")
        }),
        ("Sistema", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )

    def status_badge(self, obj):
        color = STATUS_COLORS.get(obj.payment_status, "#5F6368")
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-weight: bold;">{}</span>',
            color,
            obj.get_payment_status_display(),
        )
    status_badge.short_description = "Status"
