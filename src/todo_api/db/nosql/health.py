from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


async def mongo_healthcheck(db) -> bool:
    try:
        await db.command("ping")
        return True
    except Exception as exc:
        logger.warning("Mongo ping failed: %s", exc)
        return False
