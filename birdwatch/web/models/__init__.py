"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .schemas import (
    ChatTextEnvelope,
    ErrorEnvelope,
    ModelChoice,
    Prediction,
    SpeciesList,
)

__all__ = [
    "ChatTextEnvelope",
    "ErrorEnvelope",
    "ModelChoice",
    "Prediction",
    "SpeciesList",
]
