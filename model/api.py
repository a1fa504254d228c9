# model/api.py
from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool
