import logging
import secrets
from sqlalchemy.orm import Session

from linkshort.core.errors import KeyspaceExhausted
from linkshort.db import repository
from linkshort.utils.encoding import ID_BITS

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 64


def allocate_id(db: Session, max_attempts: int = DEFAULT_MAX_ATTEMPTS, randbits=secrets.randbits) -> int:
    """Draw random identifiers until one is not held by a live link."""
    for attempt in range(max_attempts):
        candidate = randbits(ID_BITS)
        if not repository.id_in_use(db, candidate):
            return candidate
        logger.info(f"Identifier collision on attempt {attempt + 1}/{max_attempts}")

    logger.error(f"No unused identifier found after {max_attempts} attempts")
    raise KeyspaceExhausted()
