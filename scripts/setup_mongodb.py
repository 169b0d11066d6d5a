#!/usr/bin/env python3
"""
MongoDB initialization script.

Creates the indexes the MongoDB repositories rely on. The unique
(tenant_id, starting_date) index on planned_weeks is what turns a second
week on the same start date into a ConflictError.

Usage:
    python -m scripts.setup_mongodb

Environment:
    MONGODB_URI: MongoDB connection string (required)
    MONGODB_DATABASE: Database name (default: meal_planner)
"""

import asyncio
import sys
from typing import Any, Dict

import structlog
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from infrastructure.config import get_mongodb_database, get_mongodb_uri, load_environment
from infrastructure.logging_config import configure_logging
from infrastructure.persistence.mongodb import (
    MongoMealRepository,
    MongoPlannedWeekRepository,
    MongoUserSettingsRepository,
)

logger = structlog.get_logger(__name__)

EXPECTED_INDEXES: Dict[str, str] = {
    "planned_weeks": "tenant_starting_date_unique",
    "meals": "tenant_name",
    "user_settings": "tenant_id_unique",
}


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create indexes through each repository."""
    repositories = [
        MongoPlannedWeekRepository(client=client),
        MongoMealRepository(client=client),
        MongoUserSettingsRepository(client=client),
    ]
    for repository in repositories:
        await repository.ensure_indexes()
        logger.info("Indexes ensured", collection=repository.collection_name)


async def verify_indexes(client: AsyncIOMotorClient) -> bool:
    """Check every expected index exists."""
    db = client[get_mongodb_database()]
    all_present = True

    for collection_name, index_name in EXPECTED_INDEXES.items():
        indexes: Dict[str, Any] = await db[collection_name].index_information()
        if index_name in indexes:
            logger.info("Index present", collection=collection_name, index=index_name)
        else:
            logger.error("Index missing", collection=collection_name, index=index_name)
            all_present = False

    return all_present


async def run_setup(client: AsyncIOMotorClient) -> int:
    """Ping, create and verify indexes. Returns a process exit code."""
    try:
        await client.admin.command("ping")
        logger.info("MongoDB connection successful", database=get_mongodb_database())

        await create_indexes(client)
        if not await verify_indexes(client):
            return 1
    except PyMongoError as e:
        logger.error("MongoDB setup failed", error=str(e))
        return 1

    logger.info("MongoDB setup completed")
    return 0


async def main() -> int:
    load_environment()
    uri = get_mongodb_uri()
    if not uri:
        logger.error("MONGODB_URI not configured")
        return 1

    client: AsyncIOMotorClient = AsyncIOMotorClient(uri)
    try:
        return await run_setup(client)
    finally:
        client.close()


if __name__ == "__main__":
    configure_logging()
    sys.exit(asyncio.run(main()))
