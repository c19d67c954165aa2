"""
Service de persistance pour Ville.
"""

import logging

from django.core.management.color import no_style
from django.db import transaction

from ippweek.core.structured_logging import log_execution_time
from ippweek.core.structured_logging import log_operation
from ippweek.core.structured_logging import structured_logger_entities
from ippweek.location.models import Ville

logger = logging.getLogger(__name__)

ENTITY_NAME = "ville"


class VilleService:
    """
    Stockage et lecture des villes.

    Seul point d'accès à la base pour l'API: les vues ne touchent jamais
    ``Ville.objects`` directement.
    """

    @classmethod
    @log_execution_time("ville_save")
    def save(cls, ville: Ville) -> Ville:
        """
        Sauvegarde une ville et la retourne.

        Sans id, la ville est créée et reçoit un id. Avec un id, la ligne
        correspondante est mise à jour (ou insérée sous cet id si absente,
        la séquence des id est alors recalée pour les créations suivantes).
        """
        logger.debug("Request to save Ville : %s", ville)
        is_new = ville._state.adding  # noqa: SLF001
        explicit_pk = is_new and ville.pk is not None
        with transaction.atomic():
            ville.save()
            if explicit_pk:
                cls._reset_id_sequence()
        structured_logger_entities.log_entity_event(
            ENTITY_NAME,
            "created" if is_new else "updated",
            ville.pk,
        )
        return ville

    @classmethod
    def _reset_id_sequence(cls):
        connection = transaction.get_connection()
        # empty on SQLite, setval(...) on PostgreSQL
        statements = connection.ops.sequence_reset_sql(no_style(), [Ville])
        if not statements:
            return
        with connection.cursor() as cursor:
            for sql in statements:
                cursor.execute(sql)

    @classmethod
    @log_execution_time("ville_find_all")
    def find_all(cls) -> list[Ville]:
        logger.debug("Request to get all Villes")
        return list(Ville.objects.order_by("id"))

    @classmethod
    @log_execution_time("ville_find_one")
    def find_one(cls, ville_id) -> Ville | None:
        logger.debug("Request to get Ville : %s", ville_id)
        return Ville.objects.filter(pk=ville_id).first()

    @classmethod
    def delete(cls, ville_id) -> None:
        """Supprime la ville si elle existe, ne fait rien sinon."""
        logger.debug("Request to delete Ville : %s", ville_id)
        with log_operation(
            structured_logger_entities, "ville_delete", {"ville_id": ville_id},
        ):
            deleted, _ = Ville.objects.filter(pk=ville_id).delete()
        if deleted:
            structured_logger_entities.log_entity_event(ENTITY_NAME, "deleted", ville_id)
