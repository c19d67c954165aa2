"""
Alert headers attached to entity responses.

The front end reads ``X-<app>-alert`` / ``X-<app>-error`` to display a toast
and ``X-<app>-params`` to know which entity (or identifier) it is about.
"""

from django.conf import settings


def _application_name() -> str:
    return getattr(settings, "APPLICATION_NAME", "ippWeekApp")


def create_alert(message: str, param: str) -> dict[str, str]:
    app = _application_name()
    return {
        f"X-{app}-alert": message,
        f"X-{app}-params": param,
    }


def create_entity_creation_alert(entity_name: str, param) -> dict[str, str]:
    return create_alert(
        f"A new {entity_name} is created with identifier {param}",
        str(param),
    )


def create_entity_update_alert(entity_name: str, param) -> dict[str, str]:
    return create_alert(
        f"A {entity_name} is updated with identifier {param}",
        str(param),
    )


def create_entity_deletion_alert(entity_name: str, param) -> dict[str, str]:
    return create_alert(
        f"A {entity_name} is deleted with identifier {param}",
        str(param),
    )


def create_failure_alert(
    entity_name: str, error_key: str, default_message: str,
) -> dict[str, str]:
    # default_message stays in the body, headers only carry the i18n key
    app = _application_name()
    return {
        f"X-{app}-error": f"error.{error_key}",
        f"X-{app}-params": entity_name,
    }
