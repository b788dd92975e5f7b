from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from datetime import datetime
import logging

from linkshort.db.Models.models import Link

logger = logging.getLogger(__name__)


def _live(db: Session):
    return db.query(Link).filter(Link.deleted_at.is_(None))


def get_live_by_target(db: Session, target: str) -> Optional[Link]:
    return _live(db).filter(Link.target == target).first()


def get_live_by_id(db: Session, link_id: int) -> Optional[Link]:
    return _live(db).filter(Link.id == link_id).first()


def id_in_use(db: Session, link_id: int) -> bool:
    return get_live_by_id(db, link_id) is not None


def _commit_and_refresh(db: Session, link: Link) -> Link:
    try:
        db.add(link)
        db.commit()
        db.refresh(link)
        return link
    except IntegrityError as e:
        db.rollback()
        logger.warning(
            "IntegrityError saving Link id=%s target=%s: %s",
            link.id, link.target, str(e)
        )
        raise


def insert_link(db: Session, link_id: int, target: str) -> Link:
    return _commit_and_refresh(db, Link(id=link_id, target=target))


def save_link(db: Session, link: Link) -> Link:
    link.updated_at = datetime.utcnow()
    return _commit_and_refresh(db, link)


def soft_delete(db: Session, link: Link) -> Link:
    link.deleted_at = datetime.utcnow()
    return _commit_and_refresh(db, link)


def retarget(db: Session, link: Link, target: str) -> Link:
    link.target = target
    return save_link(db, link)
