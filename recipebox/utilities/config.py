"""Configuration management for the recipe organizer."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from recipebox.infra.paths import STORE_FILE as DEFAULT_STORE_FILE

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Storage
STORE_FILE: Final[Path] = Path(os.getenv('STORE_FILE', str(DEFAULT_STORE_FILE))).expanduser()

# Create Mom/Dad and the sample recipes on first start
SEED_DEMO_DATA: Final[bool] = os.getenv('SEED_DEMO_DATA', 'True').lower() == 'true'
