"""
Modèles pour l'app Location (Ville).
"""

from django.core.validators import MaxValueValidator
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from ippweek.core.models import BaseModel


class Ville(BaseModel):
    """Ville. L'id est attribué à la première sauvegarde."""

    nom = models.CharField(max_length=100, db_index=True)
    code_postal_principal = models.CharField(max_length=5, blank=True)
    departement = models.CharField(max_length=3, blank=True)
    region = models.CharField(max_length=100, blank=True)
    lat = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(-90), MaxValueValidator(90)],
        help_text=_("Latitude"),
    )
    lng = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(-180), MaxValueValidator(180)],
        help_text=_("Longitude"),
    )
    population = models.PositiveIntegerField(
        default=0,
        help_text=_("Population (données INSEE)"),
    )

    class Meta:
        verbose_name = _("Ville")
        verbose_name_plural = _("Villes")
        ordering = ["id"]

    def __str__(self):
        if self.code_postal_principal:
            return f"{self.nom} ({self.code_postal_principal})"
        return self.nom
