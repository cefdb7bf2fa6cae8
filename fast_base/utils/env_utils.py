import logging
import os
from typing import Optional

from dotenv import load_dotenv

from fast_base.exceptions.common_exceptions import EnvMissingException


def configure_env(env_file_name: Optional[str] = None) -> None:
    """
    Configure the application's environment.
    
    Args:
        env_file_name: Optional environment file name. If None, tries `.env.<ENV>` then `.env`.
    """
    if env_file_name is not None:
        load_dotenv(env_file_name, override=True)
        return

    environment = os.getenv("ENV", "debug")

    for env_file in [f".env.{environment}", ".env"]:
        if load_dotenv(env_file, override=True):
            logging.debug(f"☑️ Loaded {env_file} file successfully")
            break


def require_env(env_name: str) -> str:
    value = os.getenv(env_name)
    if not value:
        raise EnvMissingException(env_name)
    return value
