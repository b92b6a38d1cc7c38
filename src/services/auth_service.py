from datetime import datetime, timezone
from typing import Optional
from src.core.config import ALLOWED_EMAIL_DOMAIN
from src.core.exceptions import AuthError, ConflictError, ValidationError
from src.core.logging import logger
from src.core.security import get_password_hash, is_password_hash, verify_password
from src.db.models import Role, UserPublic
from src.services.account_repository import AccountRepository


class AuthService:
    def __init__(self, accounts: AccountRepository, email_domain: str = ALLOWED_EMAIL_DOMAIN):
        self.accounts = accounts
        self.email_domain = email_domain.lower()

    def _check_domain(self, email: str) -> None:
        if not email.lower().endswith(self.email_domain):
            raise ValidationError(
                f"Email must be an address ending with {self.email_domain}"
            )

    async def register(
        self,
        email: Optional[str],
        password: Optional[str],
        role: Optional[str]
    ) -> UserPublic:
        if not email or not password or not role:
            raise ValidationError("Email, password, and role are required")
        self._check_domain(email)
        if role not in {r.value for r in Role}:
            raise ValidationError("Role must be either 'student' or 'admin'")

        if await self.accounts.find_by_email(email):
            raise ConflictError("User with this email already exists")

        await self.accounts.create({
            "email": email,
            "password": get_password_hash(password),
            "role": role,
            "createdAt": datetime.now(timezone.utc),
        })
        logger.info("Registered %s account %s", role, email)
        return UserPublic(email=email, role=Role(role))

    async def login(self, email: Optional[str], password: Optional[str]) -> UserPublic:
        if not email or not password:
            raise ValidationError("Email and password are required")
        self._check_domain(email)

        user = await self.accounts.find_by_email(email)
        if not user or not verify_password(password, user.get("password", "")):
            raise AuthError()

        if not is_password_hash(user["password"]):
            logger.warning("Account %s still stores a plain text password", email)
        return UserPublic(email=user["email"], role=Role(user["role"]))
