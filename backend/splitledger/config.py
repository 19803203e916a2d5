import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from the package directory or its parent
env_path = Path(__file__).parent / '.env'
if not env_path.exists():
    env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get('CORS_ORIGINS', 'http://localhost:5173,http://localhost:8080').split(',')
        if origin.strip()
    ]

    # Participant bootstrap
    SEED_DEFAULT_PARTICIPANTS = _env_flag('SEED_DEFAULT_PARTICIPANTS', True)
    PARTICIPANTS_FILE = os.environ.get('PARTICIPANTS_FILE')


class TestConfig(Config):
    __test__ = False  # not a pytest test class

    TESTING = True
    LOG_LEVEL = "ERROR"
    SEED_DEFAULT_PARTICIPANTS = False
    PARTICIPANTS_FILE = None
