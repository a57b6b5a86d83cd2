"""Configuration management for the result-shaping layer."""
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Language used when a request does not name one; "default" selects the
# untranslated name directly
DEFAULT_LANGUAGE: str = os.getenv("PLACESHAPE_LANGUAGE", "default")

# Worker threads for batch feature assembly (1 = assemble inline)
ASSEMBLY_WORKERS: int = int(os.getenv("PLACESHAPE_ASSEMBLY_WORKERS", "1"))

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Error tracking settings
SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
RELEASE: str = os.getenv("RELEASE", "unknown")
SENTRY_DEBUG: bool = os.getenv("SENTRY_DEBUG", "false").lower() == "true"

# Coordinate reference system of every emitted geometry
OUTPUT_CRS: str = "EPSG:4326"
