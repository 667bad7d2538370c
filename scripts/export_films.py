#!/usr/bin/env python3
"""Export the whole film catalog to films_full_export.csv.

Logs in with the given credentials (or reuses an access token) and writes one
row per film with every sub-record flattened into text cells.

Usage:
    python scripts/export_films.py --username=USER [--password=PASS] [--output-dir=DIR]
    python scripts/export_films.py --token=TOKEN [--output-dir=DIR]

Options:
    --username    Archive account used to log in
    --password    Password (prompted when omitted)
    --token       Existing access token instead of logging in
    --output-dir  Where to write the CSV (default: EXPORT_DIR setting)
"""

import argparse
import asyncio
import getpass
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from filmarchive.auth import AuthContext
from filmarchive.config import get_settings
from filmarchive.services.archive import (
    FilmArchiveError,
    FilmExportService,
    create_archive_client,
)
from filmarchive.utils import close_all_clients, get_logger, setup_logging

logger = get_logger("export_films")


async def run(args: argparse.Namespace) -> int:
    auth = AuthContext(token=args.token)
    client = create_archive_client(auth)

    try:
        if not auth.is_authenticated:
            password = args.password or getpass.getpass("Password: ")
            try:
                await client.login(args.username, password)
            except FilmArchiveError as e:
                print(f"Login failed: {e}")
                return 1

        output_dir = Path(args.output_dir) if args.output_dir else get_settings().export_dir
        result = await FilmExportService(client).export_to(output_dir)
    finally:
        await close_all_clients()

    print(result.message)
    if result.ok:
        print(f"Written to {result.path}")
        return 0
    return 1


def main() -> None:
    parser = argparse.ArgumentParser(description="Export the film catalog as CSV")
    parser.add_argument("--username", help="Archive account used to log in")
    parser.add_argument("--password", help="Password (prompted when omitted)")
    parser.add_argument("--token", help="Existing access token")
    parser.add_argument("--output-dir", help="Directory for the CSV file")
    args = parser.parse_args()

    if not args.token and not args.username:
        parser.error("either --token or --username is required")

    setup_logging()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
