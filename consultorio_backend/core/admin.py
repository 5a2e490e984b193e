"""
Core admin: users, roles and the audit log.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from .models import AuditLog, Role, User


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ("name", "label", "user_count")
    search_fields = ("name", "label")

    def user_count(self, obj):
        return obj.users.count()
    user_count.short_description = "Usuários"


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("username", "role", "is_active", "last_login")
    list_filter = ("role", "is_active")
    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Perfil", {"fields": ("role",)}),
    )
    add_fieldsets = DjangoUserAdmin.add_fieldsets + (
        ("Perfil", {"fields": ("role",)}),
    )


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ("timestamp", "action", "role_name", "user", "patient_id")
    list_filter = ("action", "role_name")
    search_fields = ("action", "patient_id")
    readonly_fields = ("user", "role_name", "action", "patient_id", "timestamp", "meta")

    def has_add_permission(self, request):
        return False
