from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from linkshort.core.errors import NotFound, TargetConflict, KeyspaceExhausted
from linkshort.db import repository
from linkshort.db.Models.models import Link
from linkshort.services.allocator import allocate_id, DEFAULT_MAX_ATTEMPTS
from linkshort.utils.encoding import decode_id
from linkshort.utils.urls import canonicalize

logger = logging.getLogger(__name__)

MAX_INSERT_RETRIES = 5


class LinkService:

    @staticmethod
    def _require_live(db: Session, target: str) -> Link:
        link = repository.get_live_by_target(db, target)
        if link is None:
            logger.warning("No live link for target %s", target[:50])
            raise NotFound()
        return link

    @staticmethod
    def create_link(db: Session, address: str, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> Link:
        target = canonicalize(address)

        # Idempotency: the same target always maps to the same identifier
        existing = repository.get_live_by_target(db, target)
        if existing:
            logger.info("Link already existed: %s for URL: %s", existing.id, target[:50])
            return repository.save_link(db, existing)

        for attempt in range(MAX_INSERT_RETRIES):
            link_id = allocate_id(db, max_attempts)
            try:
                link = repository.insert_link(db, link_id, target)
                logger.info("Added link %s for URL: %s", link.id, target[:50])
                return link
            except IntegrityError:
                # A concurrent request took the identifier or the target
                existing = repository.get_live_by_target(db, target)
                if existing:
                    return existing
                logger.info(f"Insert conflict on attempt {attempt + 1}/{MAX_INSERT_RETRIES}")

        raise KeyspaceExhausted()

    @staticmethod
    def remove_link(db: Session, address: str) -> Link:
        target = canonicalize(address)
        link = LinkService._require_live(db, target)
        repository.soft_delete(db, link)
        logger.info("Removed link %s for URL: %s", link.id, target[:50])
        return link

    @staticmethod
    def update_link(db: Session, old_address: str, new_address: str) -> Link:
        old_target = canonicalize(old_address)
        new_target = canonicalize(new_address)
        link = LinkService._require_live(db, old_target)
        if new_target == old_target:
            return link

        if repository.get_live_by_target(db, new_target) is not None:
            logger.warning("Update rejected, %s is already shortened", new_target[:50])
            raise TargetConflict()

        try:
            repository.retarget(db, link, new_target)
        except IntegrityError:
            raise TargetConflict()
        logger.info("Link %s now points to %s", link.id, new_target[:50])
        return link

    @staticmethod
    def resolve(db: Session, short_code: str) -> Link:
        link_id = decode_id(short_code)
        link = repository.get_live_by_id(db, link_id)
        if link is None:
            raise NotFound()
        return link
