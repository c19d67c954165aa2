import pytest
from rest_framework import status
from rest_framework.test import APIRequestFactory

from ippweek.location.api.views import VilleViewSet
from ippweek.location.models import Ville
from ippweek.location.services import VilleService


class TestVilleViewSetUnit:
    """Views only, the service is faked: no database access."""

    @pytest.fixture
    def api_rf(self) -> APIRequestFactory:
        return APIRequestFactory()

    @pytest.fixture
    def saved(self, monkeypatch: pytest.MonkeyPatch):
        calls = []

        def _save(ville):
            calls.append(ville)
            if ville.pk is None:
                ville.pk = 1
            return ville

        monkeypatch.setattr(VilleService, "save", _save)
        return calls

    def test_create_with_id_never_saves(self, api_rf, saved):
        request = api_rf.post("/api/villes", {"id": 5, "nom": "Paris"}, format="json")
        view = VilleViewSet.as_view({"post": "create"}, basename="ville")

        response = view(request)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["errorKey"] == "idexists"
        assert saved == []

    def test_create_without_id(self, api_rf, saved):
        request = api_rf.post("/api/villes", {"nom": "Paris"}, format="json")
        view = VilleViewSet.as_view({"post": "create"}, basename="ville")

        response = view(request)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["id"] == 1
        assert response["Location"] == "/api/villes/1"
        assert [v.nom for v in saved] == ["Paris"]

    def test_update_without_id_behaves_like_create(self, api_rf, saved):
        view = VilleViewSet.as_view(
            {"post": "create", "put": "create_or_update"}, basename="ville",
        )

        created = view(api_rf.post("/api/villes", {"nom": "Lyon"}, format="json"))
        upserted = view(api_rf.put("/api/villes", {"nom": "Lyon"}, format="json"))

        assert created.status_code == upserted.status_code == status.HTTP_201_CREATED
        assert created.data["nom"] == upserted.data["nom"] == "Lyon"
        assert created["Location"] == upserted["Location"]

    def test_update_with_id_keeps_identity(self, api_rf, saved, monkeypatch):
        existing = Ville(pk=7, nom="Paris")
        monkeypatch.setattr(VilleService, "find_one", lambda ville_id: existing if ville_id == 7 else None)
        view = VilleViewSet.as_view({"put": "create_or_update"}, basename="ville")

        response = view(api_rf.put("/api/villes", {"id": 7, "nom": "Paris 1er"}, format="json"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == 7
        assert response.data["nom"] == "Paris 1er"
        assert saved == [existing]

    def test_retrieve_absent_is_not_an_error(self, api_rf, monkeypatch):
        monkeypatch.setattr(VilleService, "find_one", lambda ville_id: None)
        view = VilleViewSet.as_view({"get": "retrieve"}, basename="ville")

        response = view(api_rf.get("/api/villes/3"), pk=3)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data is None

    def test_destroy_does_not_check_existence(self, api_rf, monkeypatch):
        deleted = []
        monkeypatch.setattr(VilleService, "find_one", lambda ville_id: pytest.fail("lookup on delete"))
        monkeypatch.setattr(VilleService, "delete", deleted.append)
        view = VilleViewSet.as_view({"delete": "destroy"}, basename="ville")

        response = view(api_rf.delete("/api/villes/3"), pk=3)

        assert response.status_code == status.HTTP_200_OK
        assert response.data is None
        assert deleted == [3]
