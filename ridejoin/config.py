"""Centralised client settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Remote ride service
    api_base_url: str = "http://localhost:3000/api"
    session_cookie_name: str = "token"

    # Navigation
    confirmation_route: str = "/ride/{ride_id}/confirmed"

    # Booking flow
    single_flight: bool = False  # reject a second confirmation while one is in flight

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
