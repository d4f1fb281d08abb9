from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from yasinga.config import settings

# Do not log SQL statement parameters by default (they contain phone numbers
# and counterparty names). Echo is only honoured in development.
async_engine = create_async_engine(
    settings.database_url,
    echo=(settings.db_echo if settings.app_env.lower() == "development" else False),
    future=True,
)

AsyncSessionLocal = async_sessionmaker(
    async_engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session
