#!/usr/bin/env python3
"""Create an API account in the configured document store.

Usage:
    python scripts/create_account.py <username> <role> [password]

The password is prompted for when not given. Roles: admin, manager, player.
"""
import asyncio
import getpass
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from errors import AccountAlreadyExists, StoreError
from services import AccountService
from stores import DocumentRepository, create_document_store


async def create_account(username: str, role: str, password: str) -> None:
    store = create_document_store()
    await store.init()
    try:
        accounts = AccountService(DocumentRepository(store))
        await accounts.register(username, password, role)
    finally:
        await store.close()


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    username, role = sys.argv[1], sys.argv[2]
    password = sys.argv[3] if len(sys.argv) > 3 else getpass.getpass(f"Password for {username}: ")

    try:
        asyncio.run(create_account(username, role, password))
    except AccountAlreadyExists as e:
        print(f"[ACCOUNT] ✗ {e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, StoreError) as e:
        print(f"[ACCOUNT] ✗ Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"[ACCOUNT] ✓ Created {role} account {username}")
