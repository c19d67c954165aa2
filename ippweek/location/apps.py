from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class LocationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "ippweek.location"
    verbose_name = _("Location")
