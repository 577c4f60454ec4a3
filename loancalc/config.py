import logging

from pydantic_settings import BaseSettings

from loancalc.engine.products import DEFAULT_PRODUCT_ID


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "LOANCALC_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Calculator defaults
    default_product: str = DEFAULT_PRODUCT_ID

    # Input limits for the HTTP and CLI boundary (the engine itself takes anything)
    max_amount: int = 1_000_000
    max_term_months: int = 60


settings = Settings()


def configure_logging() -> None:
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
