import asyncio
from app.core.config import settings
from app.database.database import Database


async def create_all_tables(database: Database):
    print("🛠️ Creating tables in the database...")
    await database.create_all()
    print("✅ SUCCESS: All tables created!")


async def _main():
    database = Database(settings)
    try:
        await create_all_tables(database)
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
