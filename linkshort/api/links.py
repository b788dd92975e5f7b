from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from linkshort.core.config import Settings
from linkshort.core.dependencies import authenticated_body, get_settings
from linkshort.db.Connection import database
from linkshort.schemas import LinkRequest, LinkUpdateRequest, LinkResponse, MessageResponse
from linkshort.services.shortener import LinkService
from linkshort.utils.encoding import encode_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["links"])


def add_link_endpoint(
    link_request: LinkRequest = Depends(authenticated_body(LinkRequest)),
    db: Session = Depends(database.get_db),
    settings: Settings = Depends(get_settings),
):
    link = LinkService.create_link(db, link_request.address, settings.max_allocation_attempts)
    return LinkResponse(address=f"/{settings.prefix}{encode_id(link.id)}")


router.add_api_route("/add", add_link_endpoint, methods=["POST"], response_model=LinkResponse)


@router.post("/remove", response_model=MessageResponse)
def remove_link_endpoint(
    link_request: LinkRequest = Depends(authenticated_body(LinkRequest)),
    db: Session = Depends(database.get_db),
):
    LinkService.remove_link(db, link_request.address)
    return MessageResponse(message="Link removed")


@router.post("/update", response_model=MessageResponse)
def update_link_endpoint(
    update_request: LinkUpdateRequest = Depends(authenticated_body(LinkUpdateRequest)),
    db: Session = Depends(database.get_db),
):
    LinkService.update_link(db, update_request.old_address, update_request.new_address)
    return MessageResponse(message="Link updated")


def build_prefixed_router(prefix: str) -> APIRouter:
    """Routes living under the configured public prefix (POST <prefix>add)."""
    prefixed = APIRouter(tags=["links"])
    if f"/{prefix}add" != "/api/add":
        prefixed.add_api_route(f"/{prefix}add", add_link_endpoint, methods=["POST"], response_model=LinkResponse)
    return prefixed
