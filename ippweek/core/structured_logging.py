"""
Structured (JSON) logging for IppWeek.

Structured logs for:
- entity lifecycle (created, updated, deleted)
- timed service calls
- errors and exceptions

One JSON document per line, with timing in seconds.
"""

import json
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Dict, Optional

from django.utils import timezone


class StructuredLogger:
    """JSON structured logger for service operations."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.name = name

    def log_event(
        self,
        event_type: str,
        level: str = 'INFO',
        **kwargs
    ):
        """
        Log a structured event as JSON.

        Args:
            event_type: event type (entity_event, function_execution, etc.)
            level: log level (DEBUG, INFO, WARNING, ERROR)
            **kwargs: extra data to log
        """
        log_entry = {
            'timestamp': timezone.now().isoformat(),
            'logger': self.name,
            'event_type': event_type,
            'level': level,
            **kwargs
        }

        log_message = json.dumps(log_entry, ensure_ascii=False, default=str)

        if level == 'ERROR':
            self.logger.error(log_message)
        elif level == 'WARNING':
            self.logger.warning(log_message)
        elif level == 'DEBUG':
            self.logger.debug(log_message)
        else:
            self.logger.info(log_message)

    def log_entity_event(
        self,
        entity_name: str,
        action: str,
        entity_id,
        **kwargs
    ):
        """Log a create / update / delete of an entity."""
        self.log_event(
            event_type='entity_event',
            entity_name=entity_name,
            action=action,
            entity_id=entity_id,
            **kwargs
        )


@contextmanager
def log_operation(
    logger: StructuredLogger,
    operation: str,
    context: Optional[Dict] = None,
):
    """
    Context manager logging an operation with its execution time.

    Usage:
        with log_operation(logger, 'purge_villes', {'count': 12}):
            # operation code
            pass
    """
    start_time = time.time()
    success = False
    error_details = None

    try:
        yield
        success = True
    except Exception as e:
        error_details = str(e)
        raise
    finally:
        duration = time.time() - start_time
        logger.log_event(
            event_type='operation',
            level='INFO' if success else 'ERROR',
            operation=operation,
            duration_seconds=round(duration, 4),
            success=success,
            error_details=error_details,
            context=context or {},
        )


def log_execution_time(operation: str):
    """
    Decorator logging the execution time of a function.

    Usage:
        @log_execution_time('ville_save')
        def save(ville):
            pass
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            start_time = time.time()
            success = False
            error_details = None

            try:
                result = func(*args, **kwargs)
                success = True
                return result
            except Exception as e:
                error_details = str(e)
                raise
            finally:
                duration = time.time() - start_time
                logger.log_event(
                    event_type='function_execution',
                    level='DEBUG' if success else 'ERROR',
                    function=func.__name__,
                    operation=operation,
                    duration_seconds=round(duration, 4),
                    success=success,
                    error_details=error_details,
                )

        return wrapper
    return decorator


structured_logger_entities = StructuredLogger('ippweek.entities')
