"""
Pydantic models for revenue endpoints.
"""
from pydantic import BaseModel


class Revenue(BaseModel):
    """One month of revenue."""
    month: str
    revenue: int
