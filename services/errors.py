"""
Service Errors

Error taxonomy for the domain services and the boundary decorator that
turns failures into result values.
"""

import functools
import logging

from models import db

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for failures reported back to the caller."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Missing/invalid field or empty item list. Raised before any write."""


class ReferentialIntegrityError(ServiceError):
    """Delete refused because other rows still reference the entity."""


class PersistenceError(ServiceError):
    """Unclassified data-access failure; the caller gets a fixed message."""


class NotFoundError(PersistenceError):
    """Update/delete against an id that does not exist."""


class Redirect(Exception):
    """
    Navigation signal raised after a successful create/delete.

    Not an error: service_action lets it through and the web layer turns
    it into an HTTP redirect to `endpoint`.
    """

    def __init__(self, endpoint, message=None, **values):
        super().__init__(endpoint)
        self.endpoint = endpoint
        self.message = message
        self.values = values


def ok(**extra):
    """Success result."""
    result = {'success': True}
    result.update(extra)
    return result


def fail(message):
    """Failure result."""
    return {'error': message}


def service_action(failure_message):
    """
    Wrap a service operation so no raw failure reaches the caller.

    ValidationError and ReferentialIntegrityError report their own
    message; anything else, NotFoundError included, reports
    failure_message. Redirect is re-raised untouched.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Redirect:
                raise
            except (ValidationError, ReferentialIntegrityError) as e:
                db.session.rollback()
                logger.info("%s: %s", failure_message, e.message)
                return fail(e.message)
            except PersistenceError as e:
                db.session.rollback()
                logger.warning("%s: %s", failure_message, e.message)
                return fail(failure_message)
            except Exception:
                db.session.rollback()
                logger.exception(failure_message)
                return fail(failure_message)
        return wrapper
    return decorator
