from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session
import logging

from linkshort.core.errors import ShortenerError
from linkshort.db.Connection import database
from linkshort.services.shortener import LinkService

logger = logging.getLogger(__name__)

BAD_REQUEST_TITLE = "400 - Bad Request"
BAD_REQUEST_PAGE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <link rel="stylesheet" href="/resources/style.css">
</head>
<body>
    <h1>{title}</h1>
    <p>This short link does not exist.</p>
</body>
</html>
"""


def bad_request_page() -> HTMLResponse:
    return HTMLResponse(
        content=BAD_REQUEST_PAGE.format(title=BAD_REQUEST_TITLE),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def redirect_to_target_endpoint(short_code: str, db: Session = Depends(database.get_db)):
    """
    Follow a short link to its stored target.
    """
    try:
        link = LinkService.resolve(db, short_code)
    except ShortenerError as e:
        logger.warning(f"Redirect 400: {short_code}: {e}")
        return bad_request_page()

    return RedirectResponse(url=link.target, status_code=status.HTTP_301_MOVED_PERMANENTLY)


def prefix_root_endpoint():
    return bad_request_page()


def build_router(prefix: str) -> APIRouter:
    router = APIRouter(tags=["redirect"])
    router.add_api_route(f"/{prefix}", prefix_root_endpoint, methods=["GET"], response_class=HTMLResponse)
    router.add_api_route(f"/{prefix}{{short_code}}", redirect_to_target_endpoint, methods=["GET"])
    return router
