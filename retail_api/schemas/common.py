from pydantic import BaseModel


class DeleteResult(BaseModel):
    status: str = "deleted"
    id: str
