from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Tokens only identify the caller; this portal keeps no real credentials
    SECRET_KEY: str = "staffgap-dev-secret-change-me"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    ENV: str = "dev"  # "dev" or "prod"
    LOG_LEVEL: str = "INFO"

    # Seed the in-memory stores with the demo university on startup
    SEED_DEMO_DATA: bool = True

    # Academic year given to the first submission of a department
    DEFAULT_ACADEMIC_YEAR: str = "2024-2025"

    # The mock accepts any old password unless this is switched on
    VERIFY_OLD_PASSWORD: bool = False

    # --- DASHBOARD SCORE WEIGHTS ---
    SCORE_COMPLIANCE_WEIGHT: float = 0.7
    SCORE_STATUS_WEIGHT: float = 0.3
    FACULTY_COVERAGE_WEIGHT: float = 0.5
    FACULTY_DEPARTMENT_WEIGHT: float = 0.5
    TOP_DEPARTMENTS_LIMIT: int = 5

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
