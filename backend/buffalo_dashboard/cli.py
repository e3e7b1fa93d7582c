"""
Command line tools.

Usage:
    buffalo-dashboard serve
    buffalo-dashboard reseed [--yes]
    buffalo-dashboard check-admin
"""
import argparse
import asyncio
import sys

from buffalo_dashboard.core.config import get_settings
from buffalo_dashboard.core.logging import configure_logging
from buffalo_dashboard.db.base import async_session_maker, engine, init_db
from buffalo_dashboard.seed import reseed
from buffalo_dashboard.services.auth import list_admins


async def run_reseed() -> None:
    settings = get_settings()
    await init_db()
    async with async_session_maker() as session:
        await reseed(session, settings)
        await session.commit()
    await engine.dispose()
    print("Database reseeded successfully")


async def run_check_admin() -> int:
    await init_db()
    async with async_session_maker() as session:
        admins = await list_admins(session)
    await engine.dispose()

    if not admins:
        print("No admin users found in database!")
        return 1

    print(f"Found {len(admins)} admin user(s):")
    for index, admin in enumerate(admins, start=1):
        print(f"  {index}. Username: {admin.username}")
        print(f"     Password hash: {admin.password_hash[:20]}...")
        print(f"     Last login: {admin.last_login or 'never'}")
    return 0


def serve() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "buffalo_dashboard.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Buffalo Dashboard management commands")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="Run the API server")
    reseed_parser = subparsers.add_parser(
        "reseed", help="Delete all links, config and admins and recreate the defaults"
    )
    reseed_parser.add_argument(
        "--yes",
        action="store_true",
        help="Do not ask for confirmation",
    )
    subparsers.add_parser("check-admin", help="List admin users")

    args = parser.parse_args(argv)
    configure_logging(get_settings().LOG_LEVEL)

    if args.command == "serve":
        serve()
        return 0

    if args.command == "reseed":
        if not args.yes:
            answer = input("This deletes all existing data. Continue? [y/N] ")
            if answer.strip().lower() != "y":
                print("Aborted")
                return 1
        asyncio.run(run_reseed())
        return 0

    return asyncio.run(run_check_admin())


if __name__ == "__main__":
    sys.exit(main())
