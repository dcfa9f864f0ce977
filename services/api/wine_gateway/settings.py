from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    upstream_prediction_url: str = "http://localhost:9000/predict_wine"
    upstream_timeout: float = 30.0
    allowed_origins: str = "*"
    log_level: str = "INFO"

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


settings = Settings()
