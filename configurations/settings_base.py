# configurations/settings_base.py
"""
Base configuration classes and environment handling.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class EnvironmentVariables:
    """
    This is for the environmental variables:
    """

    env_file_path: Optional[str] = ".env"
    environment_key: str = "MATCHSHEET_ENV"
    log_level_key: str = "MATCHSHEET_LOG_LEVEL"

    def load(self) -> None:
        """
        Load the optional .env file into the process environment
        """
        if self.env_file_path and os.path.exists(self.env_file_path):
            load_dotenv(self.env_file_path)

    def get_environment(self, default: str = "development") -> str:
        return os.getenv(self.environment_key, default).strip().lower()

    def get_log_level(self) -> Optional[str]:
        value = os.getenv(self.log_level_key)
        return value.strip().upper() if value else None
