"""
Portaria - Database Session
"""
import logging
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import declarative_base

from portaria.core.config import settings

logger = logging.getLogger(__name__)

# Base para models
Base = declarative_base()


def build_engine(url: str = None) -> AsyncEngine:
    """Cria engine assincrono para a URL informada (ou a configurada)"""
    return create_async_engine(
        url or settings.db_url,
        echo=settings.DEBUG,
        pool_pre_ping=True,
    )


async def init_db(engine: AsyncEngine):
    """Inicializa banco de dados (cria tabelas das colecoes)"""
    # Registra as tabelas no metadata
    import portaria.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Tabelas verificadas: {', '.join(sorted(Base.metadata.tables))}")
