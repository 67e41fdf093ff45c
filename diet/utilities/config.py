"""Configuration management for the Reverse Diet Planner application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Plan store
PLAN_ID_LENGTH: Final[int] = int(os.getenv('PLAN_ID_LENGTH', '10'))

# Metabolic adaptation calibration ("sqrt" or "linear")
ADAPTATION_PROFILE: Final[str] = os.getenv('ADAPTATION_PROFILE', 'sqrt').strip().lower()
# Empty string means "use the profile default"
ADAPTATION_RATE: Final[str] = os.getenv('ADAPTATION_RATE', '')
MAX_ADAPTATION: Final[str] = os.getenv('MAX_ADAPTATION', '')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DIET_DATA_DIR', str(BASE_DIR / 'data')))
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
