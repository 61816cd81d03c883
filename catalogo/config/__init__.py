"""Configuration module for Catalogo.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

Usage:
------
```python
from catalogo.config import get_logger, settings

logger = get_logger(__name__)
logger.info("Console level: {}", settings.logging.console_level)
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
