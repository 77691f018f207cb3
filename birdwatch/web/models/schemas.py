"""
Response and parameter models for the proxy endpoints.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class ModelChoice(str, Enum):
    """Classifier the backend should use for an image submission."""

    SELF = "self"
    HF = "hf"


class ErrorEnvelope(BaseModel):
    error: str
    details: Optional[str] = None


class ChatTextEnvelope(BaseModel):
    """Wrapper for a chat backend that answered with plain text."""

    response: str
    note: str = "Upstream returned non-JSON response"


class SpeciesList(BaseModel):
    species: List[str]


class Prediction(BaseModel):
    predicted_species: str
    confidence: float
