"""Translation of store connectivity failures into domain errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import InterfaceError, OperationalError

from storefront.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Raise ``StoreUnavailableError`` for connectivity failures inside the block."""
    try:
        yield
    except (OperationalError, InterfaceError, OSError, TimeoutError) as exc:
        logger.error("Store unavailable during %s: %s", operation, exc)
        raise StoreUnavailableError(operation, exc) from exc
