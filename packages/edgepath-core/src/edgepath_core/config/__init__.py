from .models import (
    EdgepathConfig,
    InputConfig,
    OutputConfig,
    SearchConfig,
)

__all__ = [
    "EdgepathConfig",
    "InputConfig",
    "OutputConfig",
    "SearchConfig",
]
