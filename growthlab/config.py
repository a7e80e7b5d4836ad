from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    LOG_LEVEL: str = "INFO"
    # request caps; they keep every served series finite
    MAX_HORIZON_YEARS: int = 100
    MAX_FREQUENCY: int = 365
    MAX_RATE: float = 1.0
    MAX_AMOUNT: float = 1e12

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
