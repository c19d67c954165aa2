"""
ViewSets pour l'app Location (Ville).
"""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.response import Response

from ippweek.core.headers import create_entity_deletion_alert
from ippweek.core.responses import wrap_or_not_found
from ippweek.core.viewsets import CRUDViewSet
from ippweek.location.api.serializers import VilleSerializer
from ippweek.location.models import Ville
from ippweek.location.services import ENTITY_NAME
from ippweek.location.services import VilleService

logger = logging.getLogger(__name__)


class VilleViewSet(CRUDViewSet):
    """
    ViewSet pour Ville.

    Les actions sont liées à la main dans location/api/urls.py
    (PUT sur la collection, pas de PUT /villes/{id}).
    """

    queryset = Ville.objects.all()
    serializer_class = VilleSerializer
    pagination_class = None
    entity_name = ENTITY_NAME
    detail_url_name = "api:ville-detail"

    def get_object_or_none(self, object_id):
        return VilleService.find_one(object_id)

    @extend_schema(
        summary="Créer une ville",
        request=VilleSerializer,
        responses={
            201: VilleSerializer,
            400: OpenApiResponse(description="La ville a déjà un id (idexists) ou données invalides"),
        },
        tags=["Villes"],
    )
    def create(self, request, *args, **kwargs):
        logger.debug("REST request to save Ville : %s", request.data)
        return super().create(request, *args, **kwargs)

    @extend_schema(
        summary="Mettre à jour une ville",
        description="Sans id dans le corps, la ville est créée (même réponse que POST).",
        request=VilleSerializer,
        responses={
            200: VilleSerializer,
            201: VilleSerializer,
            400: OpenApiResponse(description="Données invalides"),
            500: OpenApiResponse(description="La ville n'a pas pu être mise à jour"),
        },
        tags=["Villes"],
    )
    def create_or_update(self, request, *args, **kwargs):
        logger.debug("REST request to update Ville : %s", request.data)
        return super().create_or_update(request, *args, **kwargs)

    @extend_schema(
        summary="Lister toutes les villes",
        responses={200: VilleSerializer(many=True)},
        tags=["Villes"],
    )
    def list(self, request, *args, **kwargs):
        logger.debug("REST request to get all Villes")
        serializer = self.get_serializer(VilleService.find_all(), many=True)
        return Response(serializer.data)

    @extend_schema(
        summary="Détail d'une ville",
        responses={
            200: VilleSerializer,
            400: OpenApiResponse(description="Id invalide (idinvalid)"),
            404: OpenApiResponse(description="Ville introuvable (corps vide)"),
        },
        tags=["Villes"],
    )
    def retrieve(self, request, pk=None, *args, **kwargs):
        logger.debug("REST request to get Ville : %s", pk)
        ville = VilleService.find_one(self.parse_object_id(pk))
        return wrap_or_not_found(
            self.get_serializer(ville).data if ville is not None else None,
        )

    @extend_schema(
        summary="Supprimer une ville",
        description="Répond 200 même si la ville n'existe pas.",
        responses={
            200: OpenApiResponse(description="Ville supprimée"),
            400: OpenApiResponse(description="Id invalide (idinvalid)"),
        },
        tags=["Villes"],
    )
    def destroy(self, request, pk=None, *args, **kwargs):
        logger.debug("REST request to delete Ville : %s", pk)
        ville_id = self.parse_object_id(pk)
        VilleService.delete(ville_id)
        return Response(headers=create_entity_deletion_alert(ENTITY_NAME, ville_id))
