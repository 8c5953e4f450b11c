"""Client configuration via environment variables."""

from pydantic_settings import BaseSettings

from wayforpay.constants import API_URL, DEFAULT_CHARSET


class Settings(BaseSettings):
    merchant_account: str = ""
    merchant_password: str = ""
    charset: str = DEFAULT_CHARSET
    api_url: str = API_URL
    timeout: float = 30.0  # seconds, per gateway call

    model_config = {"env_prefix": "WAYFORPAY_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
