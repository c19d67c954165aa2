"""
URLs pour l'API Location (Ville).

CRUDViewSet ne passe pas par un router: PUT est lié à la collection.
"""
from django.urls import path

from ippweek.location.api.views import VilleViewSet

ville_list = VilleViewSet.as_view(
    {
        "get": "list",
        "post": "create",
        "put": "create_or_update",
    },
    basename="ville",
)
ville_detail = VilleViewSet.as_view(
    {
        "get": "retrieve",
        "delete": "destroy",
    },
    basename="ville",
)

urlpatterns = [
    path("villes", ville_list, name="ville-list"),
    path("villes/<str:pk>", ville_detail, name="ville-detail"),
]
