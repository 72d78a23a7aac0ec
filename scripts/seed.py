#!/usr/bin/env python
"""
Create the default roles for development.
"""

import asyncio
import sys


# Add src to path for imports
sys.path.insert(0, "src")

from foodstall.config import settings
from foodstall.core.database import async_session_factory, create_tables
from foodstall.core.logging import configure_logging
from foodstall.modules import discover_modules
from foodstall.seed import seed_roles


async def main() -> None:
    """Create tables if needed, then the default roles."""
    # Importing the modules registers every table on the metadata
    discover_modules()
    await create_tables()

    async with async_session_factory() as session:
        created = await seed_roles(session)
        await session.commit()

    if created:
        print(f"Created roles: {', '.join(role.name for role in created)}")
    else:
        print("Default roles already exist")


if __name__ == "__main__":
    configure_logging(settings)
    asyncio.run(main())
