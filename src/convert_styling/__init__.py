"""convert_styling — mechanical NativeWind → Uniwind source migration engine."""

__all__ = [
    "__version__",
    "convert_styling",
    "ToolResponse",
]
__version__ = "0.1.0"

# Programmatic engine entrypoint (backend use).
from convert_styling.api import ToolResponse, convert_styling  # noqa: E402, F401
