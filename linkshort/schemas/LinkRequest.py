from pydantic import BaseModel

# Request DTOs, bound from a JSON or form-encoded body
class LinkRequest(BaseModel):
    address: str = ""
    password: str = ""


class LinkUpdateRequest(BaseModel):
    old_address: str = ""
    new_address: str = ""
    password: str = ""
