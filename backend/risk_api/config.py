from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ARTIFACTS_DIR: str = "./artifacts"
    CUTOFFS_FILE: str = "artifacts_meta.json"
    CORS_ORIGINS: list[str] = ["*"]
    CORS_ALLOW_METHODS: list[str] = ["GET", "POST", "OPTIONS"]
    CORS_ALLOW_HEADERS: list[str] = ["authorization", "x-client-info", "apikey", "content-type"]
    NOISE_AMPLITUDE: float = 0.01
    NOISE_SEED: int | None = None
    CLAMP_AFTER_NOISE: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
