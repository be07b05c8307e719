"""
Request Dependencies
====================
Shared FastAPI dependencies for the routers.
"""
from fastapi import Request

from convert_styling.guides import Guide, load_guide
from convert_styling.web_api.config import settings


def current_guide(request: Request) -> Guide:
    """Guide preloaded at startup; loaded per request when the app runs without lifespan."""
    guide = getattr(request.app.state, "guide", None)
    if guide is not None:
        return guide
    return load_guide(settings.GUIDE_PATH)
