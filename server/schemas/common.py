from pydantic import BaseModel
from typing import Dict, List, Optional


class ErrorResponse(BaseModel):
    """Error body produced by the registered exception handlers."""
    error: str
    message: str
    errors: Optional[List[str]] = None
    path: str


class ReferenceData(BaseModel):
    """Fixed enumerations offered to form and API clients."""
    legal_forms: List[str]
    # Position value -> display label, UNSET excluded
    positions: Dict[int, str]


class IdResponse(BaseModel):
    id: int
