import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    DEBUG: bool = False

    EMPLOYEE_SERVICE_BASE_URL: str = "http://localhost:8081/employeeservice"
    EMPLOYEE_SERVICE_TIMEOUT_SECONDS: float = 30.0

    EMPLOYEE_RETRY_MAX_ATTEMPTS: int = 3
    EMPLOYEE_RETRY_BACKOFF_SECONDS: float = 2.0
    EMPLOYEE_RETRY_DEADLINE_SECONDS: float | None = None

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

