import asyncio
import logging

from src.core.settings import settings
from src.db.repo_holder import RepoHolder
from src.db.utils import create_db_tables, create_session_pool
from src.services.causes import create_cause, list_causes, update_cause_status
from src.services.revalidation import PathRevalidator

logging.basicConfig(level=settings.log_level)

# --- ДАННЫЕ ДЛЯ ЗАПОЛНЕНИЯ ---
DEFAULT_USERS = [
    {"email": "alice@example.com", "full_name": "Alice Moore"},
    {"email": "bob@example.com", "full_name": None},
]

DEFAULT_CAUSES = [
    {"owner": "alice@example.com", "title": "Clean water for Kibera", "description": "Drill two wells.", "category": "community", "goal": "25000", "moderation": "approved"},
    {"owner": "alice@example.com", "title": "School laptops", "description": "Twenty refurbished laptops.", "category": "education", "goal": 8000, "moderation": None},
    {"owner": "bob@example.com", "title": "Animal shelter roof", "description": "Replace the leaking roof.", "category": "animals", "goal": "12500.50", "moderation": "approved"},
    {"owner": "bob@example.com", "title": "Crypto giveaway", "description": "Send us coins.", "category": "other", "goal": 1, "moderation": "rejected", "reason": "Looks like a scam."},
]


async def create_users(repo: RepoHolder) -> dict:
    """Создает пользователей с профилями и возвращает словарь 'email -> id'."""
    users_map = {}

    for data in DEFAULT_USERS:
        user = await repo.user.get_or_create(data["email"])
        await repo.profile.set_full_name(user.id, data["full_name"])
        users_map[data["email"]] = user.id
        logging.info(f"User ready: {data['email']} ({user.id})")

    return users_map


async def create_causes(repo: RepoHolder, revalidator: PathRevalidator, users_map: dict):
    """Создает кампании и проводит их через модерацию."""
    for data in DEFAULT_CAUSES:
        user_id = users_map[data["owner"]]
        existing = {c.title for c in await list_causes(repo, {"user_id": user_id})}

        if data["title"] in existing:
            continue

        cause = await create_cause(repo, revalidator, user_id, data)
        logging.info(f"Created Cause: {cause.title}")

        if data["moderation"]:
            await update_cause_status(repo, revalidator, cause.id, data["moderation"], data.get("reason"))
            logging.info(f"Moderated Cause: {cause.title} -> {data['moderation']}")


async def seed_data():
    logging.info("Starting data seeding...")
    engine, session_pool = create_session_pool(str(settings.database_url), echo=settings.echo_sql)

    await create_db_tables(engine)

    async with session_pool() as session:
        repo = RepoHolder(session)
        revalidator = PathRevalidator()

        users_map = await create_users(repo)
        await create_causes(repo, revalidator, users_map)

    await engine.dispose()
    logging.info("Data seeding finished.")


if __name__ == "__main__":
    asyncio.run(seed_data())
