"""Database engine creation for the SQL blob store."""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from threadtree.config import StorageSettings


def create_engine(settings: StorageSettings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Storage settings with database URL

    Returns:
        Configured async engine
    """
    options: dict = {
        "echo": settings.echo,  # Log SQL statements
        "pool_pre_ping": True,  # Verify connections before using
    }
    if not settings.url.startswith("sqlite"):
        options["pool_size"] = 5
        options["max_overflow"] = 10
    return create_async_engine(settings.url, **options)
