import pytest
from rest_framework.test import APIClient

from ippweek.location.models import Ville


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def paris(db) -> Ville:
    return Ville.objects.create(
        nom="Paris",
        code_postal_principal="75001",
        departement="75",
        region="Ile-de-France",
        lat=48.8566,
        lng=2.3522,
        population=2_100_000,
    )
