"""
Serializers pour l'app Location (Ville).
"""

from rest_framework import serializers

from ippweek.location.models import Ville
from ippweek.location.services import VilleService


class VilleSerializer(serializers.ModelSerializer):
    """
    Serializer pour Ville.

    La sauvegarde passe par VilleService.
    """

    class Meta:
        model = Ville
        fields = [
            "id",
            "nom",
            "code_postal_principal",
            "departement",
            "region",
            "lat",
            "lng",
            "population",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def create(self, validated_data):
        return VilleService.save(Ville(**validated_data))

    def update(self, instance, validated_data):
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        return VilleService.save(instance)
