from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Backends with INSERT ... ON CONFLICT DO NOTHING, used for bookings and user upserts
SUPPORTED_DIALECTS = ("postgresql", "sqlite")


class Database:
    """Engine and session factory for one application instance.

    Built in the app lifespan and kept on ``app.state.db``; nothing here is a
    module-level singleton.
    """

    def __init__(self, url: str, echo: bool = False):
        backend = make_url(url).get_backend_name()
        if backend not in SUPPORTED_DIALECTS:
            raise ValueError(
                f"Unsupported database backend '{backend}'; expected one of {', '.join(SUPPORTED_DIALECTS)}"
            )
        connect_args = {}
        if url.startswith("sqlite"):
            connect_args = {"check_same_thread": False}
        self.url = url
        self.engine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
        self.session = async_sessionmaker(self.engine, expire_on_commit=False)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    async def create_all(self):
        # Import models so they register on Base.metadata
        import doctor_portal.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self):
        await self.engine.dispose()


def conflict_insert(db: AsyncSession, model):
    """Dialect ``INSERT`` for ``model`` that supports ``on_conflict_do_nothing``."""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    else:
        raise NotImplementedError(f"Conditional insert not supported on {dialect}")
    return insert(model)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Per-request session; committed on success, rolled back on error."""
    async with request.app.state.db.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
