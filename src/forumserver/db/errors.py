"""Translation of SQLAlchemy failures into the project's store errors.

Repositories wrap their statements in :func:`translate_store_errors` so that
callers above the persistence layer only ever see
:class:`forumserver.core.errors.StoreError` subclasses.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import exc as sa_exc

from forumserver.core.errors import (
    ConstraintViolationError,
    StoreError,
    StoreUnavailableError,
)

__all__ = ["translate_store_errors"]


@contextmanager
def translate_store_errors() -> Iterator[None]:
    try:
        yield
    except StoreError:
        raise
    except sa_exc.IntegrityError as exc:
        raise ConstraintViolationError(str(exc.orig)) from exc
    except (sa_exc.OperationalError, sa_exc.InterfaceError, sa_exc.DisconnectionError) as exc:
        raise StoreUnavailableError(str(exc)) from exc
    except sa_exc.SQLAlchemyError as exc:
        raise StoreError(str(exc)) from exc
    except OverflowError as exc:
        # integer parameter wider than the column / LIMIT the driver can bind
        raise StoreError(str(exc)) from exc
    except OSError as exc:
        # raw socket failures from the async driver while (re)connecting
        raise StoreUnavailableError(str(exc)) from exc
    except ValueError as exc:
        # parameter the driver refused to bind
        raise StoreError(str(exc)) from exc
