from pydantic_settings import BaseSettings
import logging


class Settings(BaseSettings):
    api_base_url: str = "http://localhost:8000"
    # Absolute URL calls the prediction service directly; a relative path is
    # resolved against api_base_url and goes through the gateway.
    prediction_url: str = "/predict_wine"
    request_timeout: float = 30.0
    log_level: str = "INFO"


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
