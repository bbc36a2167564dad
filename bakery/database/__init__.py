from bakery.database.async_db import AsyncSessionLocal, get_async_db

__all__ = ["AsyncSessionLocal", "get_async_db"]
