from pydantic import BaseModel

# Response DTOs
class LinkResponse(BaseModel):
    # Public path of the short link, e.g. /s/4fk2ab
    address: str


class MessageResponse(BaseModel):
    message: str
