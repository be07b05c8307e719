"""
Convert Styling Web API
=======================
FastAPI surface for running migrations over HTTP.

Quick Start:
    uvicorn convert_styling.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
