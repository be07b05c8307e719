"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .convert import ConvertResponse, ConvertSummary

__all__ = ["ConvertResponse", "ConvertSummary"]
