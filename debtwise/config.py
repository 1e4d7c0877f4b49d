from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "DEBTWISE_"}

    # Storage
    database_path: str = "data/debtwise.db"

    # Simulation
    max_months: int = 600  # 50 years
    # Recompute the extra payment each month from the still-active minimums
    redistribute_freed_minimums: bool = False

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
