# re-export common schemas for simpler imports
from .LinkRequest import LinkRequest, LinkUpdateRequest
from .LinkResponse import LinkResponse, MessageResponse

__all__ = [
    "LinkRequest",
    "LinkUpdateRequest",
    "LinkResponse",
    "MessageResponse",
]
