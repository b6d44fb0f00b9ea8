"""Session token storage."""

from seller_dashboard.session.file_store import FileTokenStore
from seller_dashboard.session.memory_store import MemoryTokenStore
from seller_dashboard.session.token_store import TokenStore

__all__ = [
    "TokenStore",
    "MemoryTokenStore",
    "FileTokenStore",
]
