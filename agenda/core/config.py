"""Application configuration and environment variables"""
import os
from pathlib import Path
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).parent.parent

# Load environment from the working directory, where the service is launched
load_dotenv(Path.cwd() / '.env')

class Settings:
    """Application settings"""
    STORAGE_BACKEND: str = os.environ.get('STORAGE_BACKEND', 'memory')
    STORAGE_DIR: str = os.environ.get('STORAGE_DIR', './data')
    STORAGE_KEY: str = os.environ.get('STORAGE_KEY', 'contacts')
    MONGO_URL: str = os.environ.get('MONGO_URL', 'mongodb://localhost:27017')
    DB_NAME: str = os.environ.get('DB_NAME', 'agenda')
    LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO')
    
settings = Settings()

# Convenience exports
STORAGE_KEY = settings.STORAGE_KEY
