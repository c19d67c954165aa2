import pytest
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status

from ippweek.location.models import Ville
from ippweek.location.services import VilleService


def detail_url(pk):
    return reverse("api:ville-detail", kwargs={"pk": pk})


@pytest.mark.django_db
class TestVilleApi:
    @pytest.fixture
    def list_url(self):
        return reverse("api:ville-list")

    def test_urls(self):
        assert reverse("api:ville-list") == "/api/villes"
        assert detail_url(3) == "/api/villes/3"

    def test_create(self, api_client, list_url):
        response = api_client.post(list_url, {"nom": "Paris"}, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        ville_id = response.data["id"]
        assert ville_id is not None
        assert response.data["nom"] == "Paris"
        assert response["Location"] == f"/api/villes/{ville_id}"
        assert response["X-ippWeekApp-alert"] == f"A new ville is created with identifier {ville_id}"
        assert response["X-ippWeekApp-params"] == str(ville_id)
        assert Ville.objects.filter(pk=ville_id).exists()

    def test_create_with_id_is_rejected(self, api_client, list_url):
        response = api_client.post(list_url, {"id": 12, "nom": "Paris"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["success"] is False
        assert body["entityName"] == "ville"
        assert body["errorKey"] == "idexists"
        assert body["message"] == "error.idexists"
        assert response["X-ippWeekApp-error"] == "error.idexists"
        assert response["X-ippWeekApp-params"] == "ville"
        assert Ville.objects.count() == 0

    def test_create_with_null_id_is_accepted(self, api_client, list_url):
        response = api_client.post(list_url, {"id": None, "nom": "Paris"}, format="json")

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_invalid_body(self, api_client, list_url):
        response = api_client.post(list_url, {"nom": "Nulle part", "lat": 120}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "lat" in response.json()["errors"]
        assert Ville.objects.count() == 0

    def test_update_without_id_creates(self, api_client, list_url):
        response = api_client.put(list_url, {"nom": "Lyon"}, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        ville_id = response.data["id"]
        assert response["Location"] == f"/api/villes/{ville_id}"
        assert Ville.objects.get(pk=ville_id).nom == "Lyon"

    def test_update_with_id(self, api_client, list_url, paris):
        payload = {"id": paris.pk, "nom": "Paris Centre", "population": 10}

        response = api_client.put(list_url, payload, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == paris.pk
        assert response.data["nom"] == "Paris Centre"
        assert response["X-ippWeekApp-alert"] == f"A ville is updated with identifier {paris.pk}"
        paris.refresh_from_db()
        assert paris.nom == "Paris Centre"
        assert paris.population == 10
        assert Ville.objects.count() == 1

    def test_update_with_unknown_id_saves_under_that_id(self, api_client, list_url):
        response = api_client.put(list_url, {"id": 4242, "nom": "Nouvelle"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == 4242
        assert Ville.objects.get(pk=4242).nom == "Nouvelle"

    def test_update_with_invalid_id(self, api_client, list_url):
        response = api_client.put(list_url, {"id": "abc", "nom": "Nouvelle"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errorKey"] == "idinvalid"

    @pytest.mark.parametrize("bad_id", [True, 1.7, "1.7", 0, -3, 2**70])
    def test_update_rejects_ids_that_are_not_storable(self, api_client, list_url, paris, bad_id):
        response = api_client.put(list_url, {"id": bad_id, "nom": "Autre"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errorKey"] == "idinvalid"
        paris.refresh_from_db()
        assert paris.nom == "Paris"
        assert Ville.objects.count() == 1

    def test_create_after_update_with_explicit_id(self, api_client, list_url):
        upserted = api_client.put(list_url, {"id": 1, "nom": "Paris"}, format="json")
        created = api_client.post(list_url, {"nom": "Lyon"}, format="json")

        assert upserted.status_code == status.HTTP_200_OK
        assert created.status_code == status.HTTP_201_CREATED
        assert created.data["id"] != 1
        assert Ville.objects.count() == 2

    def test_list(self, api_client, list_url, paris):
        lyon = Ville.objects.create(nom="Lyon")

        response = api_client.get(list_url)

        assert response.status_code == status.HTTP_200_OK
        assert [item["id"] for item in response.json()] == [paris.pk, lyon.pk]

    def test_list_empty(self, api_client, list_url):
        response = api_client.get(list_url)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_get(self, api_client, paris):
        response = api_client.get(detail_url(paris.pk))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["nom"] == "Paris"
        assert response.json()["code_postal_principal"] == "75001"

    def test_get_unknown_has_empty_body(self, api_client):
        response = api_client.get(detail_url(999))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.content == b""

    def test_delete(self, api_client, paris):
        response = api_client.delete(detail_url(paris.pk))

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b""
        assert response["X-ippWeekApp-alert"] == f"A ville is deleted with identifier {paris.pk}"
        assert not Ville.objects.filter(pk=paris.pk).exists()

    def test_delete_unknown_is_ok(self, api_client):
        response = api_client.delete(detail_url(999))

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_detail_with_invalid_id_is_json_400(self, api_client, paris, method):
        response = getattr(api_client, method)("/api/villes/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response["Content-Type"].startswith("application/json")
        assert response.json()["errorKey"] == "idinvalid"
        assert Ville.objects.count() == 1

    def test_list_excludes_deleted(self, api_client, list_url):
        ids = [
            api_client.post(list_url, {"nom": nom}, format="json").data["id"]
            for nom in ("Paris", "Lyon", "Marseille")
        ]
        api_client.delete(detail_url(ids[1]))

        response = api_client.get(list_url)

        assert [item["id"] for item in response.json()] == [ids[0], ids[2]]

    def test_persistence_failure_is_500(self, api_client, list_url, monkeypatch):
        def _fail(ville):
            raise DatabaseError("database is unavailable")

        monkeypatch.setattr(VilleService, "save", _fail)

        response = api_client.post(list_url, {"nom": "Paris"}, format="json")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["success"] is False
        assert response.json()["detail"] == "database is unavailable"

    def test_paris_lifecycle(self, api_client, list_url):
        created = api_client.post(list_url, {"nom": "Paris"}, format="json")
        assert created.status_code == status.HTTP_201_CREATED
        ville_id = created.data["id"]

        fetched = api_client.get(detail_url(ville_id))
        assert fetched.status_code == status.HTTP_200_OK
        assert fetched.json()["id"] == ville_id
        assert fetched.json()["nom"] == "Paris"

        assert api_client.delete(detail_url(ville_id)).status_code == status.HTTP_200_OK
        assert api_client.get(detail_url(ville_id)).status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
def test_schema_documents_villes(api_client):
    response = api_client.get(reverse("api-schema"), {"format": "json"})

    assert response.status_code == status.HTTP_200_OK
    assert "/api/villes" in response.content.decode()
