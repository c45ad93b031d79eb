from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    vocabulary_size: int = 0
