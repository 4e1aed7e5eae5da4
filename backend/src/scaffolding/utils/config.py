"""
Scaffolding Property Metadata - Configuration
Settings read from the process environment; a local .env file is loaded
first via python-dotenv, and real environment variables win over it.
"""

import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Environment-backed settings used by the logger and the marker lookup."""

    def __init__(self):
        self.environment = os.getenv('ENVIRONMENT', 'local')

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the environment value for key, or default when unset."""
        return os.getenv(key, default)

    def get_bool(self, key: str, default: bool) -> bool:
        """
        Read a flag from the environment.

        Args:
            key: Environment variable name
            default: Value used when the variable is unset

        Returns:
            True for 'true', '1', 'yes' or 'on' (any case), else False
        """
        value = self.get(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')


config = Config()


LOG_LEVEL = config.get('LOG_LEVEL', 'INFO')

# Key read from dataclass field metadata and SQLAlchemy column info
SCAFFOLD_MARKER_KEY = config.get('SCAFFOLD_MARKER_KEY', 'scaffold')

# Emit a DEBUG record for every PropertyMetadata built
SCAFFOLD_LOG_BUILDS = config.get_bool('SCAFFOLD_LOG_BUILDS', False)
