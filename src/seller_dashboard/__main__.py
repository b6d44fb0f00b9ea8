"""Main entry point for the Seller Dashboard."""

import logging

from seller_dashboard.config.deployment import configure_logging, get_gradio_server_config

logger = logging.getLogger(__name__)


def main():
    """Launch the Gradio UI."""
    from seller_dashboard.config import get_settings
    from seller_dashboard.ui import create_gradio_interface

    settings = get_settings()
    configure_logging(settings)
    server_config = get_gradio_server_config(settings)

    print("\n" + "=" * 60)
    print("🛍️ Seller Dashboard")
    print("=" * 60)
    print(f"\nSeller API: {settings.seller_api_base_url}")
    print(f"Access the UI at: http://{server_config['server_name']}:{server_config['server_port']}")
    print("\nPress Ctrl+C to stop the server")
    print("=" * 60 + "\n")

    demo = create_gradio_interface()
    demo.launch(**server_config)


if __name__ == "__main__":
    main()
