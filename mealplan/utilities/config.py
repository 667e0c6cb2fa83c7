"""Configuration management for the batch meal planner."""
import os
from typing import Final
from pathlib import Path

# Load environment variables from .env file if it exists
from dotenv import load_dotenv

BASE_DIR: Final[Path] = Path(__file__).parent.parent
env_path = BASE_DIR.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_FORMAT: Final[str] = os.getenv('LOG_FORMAT', '%(asctime)s %(levelname)s %(name)s: %(message)s')

# File Paths
DATA_DIR: Final[Path] = Path(os.getenv('MEALPLAN_DATA_DIR', str(BASE_DIR / 'data')))
RECIPES_FILE: Final[Path] = Path(os.getenv('MEALPLAN_RECIPES_FILE', str(DATA_DIR / 'recipes.json')))
STORAGE_FILE: Final[Path] = Path(os.getenv('MEALPLAN_STORAGE_FILE', str(DATA_DIR / 'storage.json')))
EXPORT_DIR: Final[Path] = Path(os.getenv('MEALPLAN_EXPORT_DIR', '.'))
