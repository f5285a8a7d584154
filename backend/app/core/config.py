import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    API_PREFIX: str = ""
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    SEED_ENABLED: bool = True
    SEED_URL: str = "https://randomuser.me/api/"
    SEED_RESULTS: int = 50
    SEED_NATIONALITIES: str = "us,gb,ca,au"
    SEED_TIMEOUT_SECONDS: float = 30.0

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
