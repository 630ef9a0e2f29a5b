"""
Create the Quick Estimate tables and seed the default pricing settings.

Safe to run repeatedly: existing settings are left untouched.

Usage:
    python -m quickestimate.scripts.seed
"""

import asyncio

from quickestimate.common.logging import setup_logging
from quickestimate.db.session import init_db


async def main() -> None:
    setup_logging()
    await init_db()
    print("Database ready.")


if __name__ == "__main__":
    asyncio.run(main())
