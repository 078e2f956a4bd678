"""Business logic for API accounts and bearer token issuance."""
import logging
from typing import Optional

import config
from errors import AccountAlreadyExists, AccountNotFound, Unauthorized
from models.domain_models import ACCOUNT_FIELDS, ROLES, Account
from passwords import hash_password, verify_password
from stores import DocumentRepository
from utils.tokens import create_access_token
from utils.validation import is_valid_document_id, is_valid_username

logger = logging.getLogger(__name__)


class AccountService:
    """Accounts live in the ``accounts`` collection keyed by username.

    Rules
    -----
    * ``username`` must match ``utils.validation.VALID_USERNAME_RE``.
    * ``role`` must be one of ``models.domain_models.ROLES``.
    * Passwords are stored only as bcrypt hashes.
    * Failed logins do not reveal whether the username exists.
    """

    collection = "accounts"

    def __init__(self, repository: DocumentRepository) -> None:
        self._repo = repository

    async def find(self, username: str) -> Optional[Account]:
        """Return the account for *username*, or ``None``.

        Names that cannot be document ids are never looked up.
        """
        if not is_valid_document_id(username):
            return None
        document = await self._repo.get_by_id(self.collection, username)
        if document is None:
            return None
        account = {"id": document.id}
        account.update({name: document.fields.get(name) for name in ACCOUNT_FIELDS})
        return account  # type: ignore[return-value]

    async def get(self, username: str) -> Account:
        account = await self.find(username)
        if account is None:
            raise AccountNotFound(username)
        return account

    async def register(self, username: str, password: str, role: str) -> Account:
        """Create an account.

        Raises:
            ValueError: If the username, password or role is not acceptable.
            AccountAlreadyExists: If the username is taken.
        """
        if not is_valid_username(username) or not is_valid_document_id(username):
            raise ValueError(f"Invalid username: {username!r}")
        if not password:
            raise ValueError("Password cannot be empty")
        if role not in ROLES:
            raise ValueError(f"Unknown role {role!r}; expected one of {', '.join(ROLES)}")
        if await self.find(username) is not None:
            raise AccountAlreadyExists(f"Account {username} already exists")

        fields = {"username": username, "passwordHash": hash_password(password), "role": role}
        await self._repo.update(self.collection, username, fields)
        logger.info(f"Registered account {username} with role {role}")
        return {"id": username, **fields}  # type: ignore[return-value]

    async def authenticate(self, username: str, password: str) -> Account:
        """Return the account if the password matches.

        Raises:
            Unauthorized: On unknown username or wrong password.
        """
        account = await self.find(username)
        if account is None or not verify_password(password, account.get("passwordHash") or ""):
            logger.info(f"Failed login for {username}")
            raise Unauthorized("Invalid username or password")
        return account

    async def issue_token(self, username: str, password: str) -> dict:
        account = await self.authenticate(username, password)
        token = create_access_token(account["username"], account["role"])
        return {
            "accessToken": token,
            "tokenType": "bearer",
            "expiresIn": config.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        }
