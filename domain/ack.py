from pydantic import BaseModel


class AckJsonResponse(BaseModel):
    message: str
    status: int
