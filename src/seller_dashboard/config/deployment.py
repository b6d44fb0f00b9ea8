"""Deployment mode configuration and factory patterns."""

import logging
from typing import TYPE_CHECKING

from .settings import Settings, get_settings

if TYPE_CHECKING:
    from seller_dashboard.session.token_store import TokenStore

logger = logging.getLogger(__name__)


def get_token_store(settings: Settings | None = None) -> "TokenStore":
    """
    Factory function to get the token store configured for this deployment.

    Args:
        settings: Optional Settings instance. If None, will use get_settings().

    Returns:
        TokenStore: Appropriate token store implementation

    Raises:
        ValueError: If the configured token store is unknown
    """
    if settings is None:
        settings = get_settings()

    if settings.token_store == "memory":
        logger.info("Using in-memory token store")
        from seller_dashboard.session.memory_store import MemoryTokenStore

        return MemoryTokenStore()

    elif settings.token_store == "file":
        logger.info(f"Using file token store at {settings.token_store_path}")
        from seller_dashboard.session.file_store import FileTokenStore

        return FileTokenStore(path=settings.token_store_path, key=settings.token_storage_key)

    else:
        raise ValueError(f"Invalid token store: {settings.token_store}")


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure logging based on deployment mode.

    Args:
        settings: Optional Settings instance. If None, will use get_settings().
    """
    if settings is None:
        settings = get_settings()

    if settings.deployment_mode == "hf_spaces":
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        )
        # httpx logs every request at INFO; the API client already does
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info(f"Logging configured for deployment mode: {settings.deployment_mode}")


def get_gradio_server_config(settings: Settings | None = None) -> dict:
    """
    Get Gradio server configuration based on deployment mode.

    Args:
        settings: Optional Settings instance. If None, will use get_settings().

    Returns:
        dict: Gradio server configuration
    """
    if settings is None:
        settings = get_settings()

    if settings.deployment_mode == "hf_spaces":
        return {
            "server_name": "0.0.0.0",  # Listen on all interfaces for HF Spaces
            "server_port": 7860,
            "share": False,
            "show_error": True,
        }
    else:
        return {
            "server_name": "127.0.0.1",  # Localhost only for local use
            "server_port": 7860,
            "share": False,
            "show_error": True,
            "debug": True,
        }
