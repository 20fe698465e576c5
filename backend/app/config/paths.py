"""
Paths configuration

Centralized directory paths for the application.
"""

import os
from pathlib import Path

# Base directories
APP_DIR = Path(__file__).parent.parent
BACKEND_DIR = APP_DIR.parent
DATA_DIR = Path(os.getenv("DATA_DIR", str(BACKEND_DIR / "data")))
LOG_DIR = BACKEND_DIR / "logs"

# Ensure directories exist
DATA_DIR.mkdir(parents=True, exist_ok=True)

__all__ = ["APP_DIR", "BACKEND_DIR", "DATA_DIR", "LOG_DIR"]
