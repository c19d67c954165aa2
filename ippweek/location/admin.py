from django.contrib import admin

from ippweek.location.models import Ville


@admin.register(Ville)
class VilleAdmin(admin.ModelAdmin):
    """Admin pour Ville."""

    list_display = [
        "id",
        "nom",
        "code_postal_principal",
        "departement",
        "region",
        "population",
    ]
    list_filter = ["departement", "region"]
    search_fields = ["nom", "code_postal_principal", "departement"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["id"]
