# wholesale/services/auth_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from wholesale.core import email_templates
from wholesale.core.auth import create_access_token, hash_password, verify_password
from wholesale.core.email_client import ensure_email_configured
from wholesale.core.notifications import notify_by_email
from wholesale.core.oauth import SocialProfile
from wholesale.models.company import Company
from wholesale.models.user import User
from wholesale.repositories.company_repo import CompanyRepository
from wholesale.repositories.user_repo import UserRepository
from wholesale.schemas.auth import (
    CompanyBrief,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserProfile,
)

logger = logging.getLogger(__name__)


class AuthService:
    """
    Registration, password login, social login and profile lookup.

    Responsibilities:
      - create a company and its first ADMIN user atomically
      - verify bcrypt password hashes and issue JWTs
      - find-or-create users coming back from an OAuth provider
    """

    def __init__(self, user_repo: UserRepository, company_repo: CompanyRepository):
        self.user_repo = user_repo
        self.company_repo = company_repo

    # ---- internal helpers ----

    def _company_brief(self, session: Session, user: User) -> CompanyBrief | None:
        if user.company_id is None:
            return None
        company = self.company_repo.get_by_id(session, user.company_id)
        if company is None:
            return None
        return CompanyBrief(id=company.id, name=company.name)

    def to_profile(self, session: Session, user: User) -> UserProfile:
        return UserProfile(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=user.role,
            company=self._company_brief(session, user),
        )

    def _token_response(self, session: Session, user: User) -> TokenResponse:
        return TokenResponse(
            access_token=create_access_token(user),
            user=self.to_profile(session, user),
        )

    # ---- public operations ----

    def register(self, session: Session, payload: RegisterRequest) -> RegisterResponse:
        """
        B2B onboarding.

        Steps:
          1. Reject an email that is already registered (409).
          2. Reject a half-configured SMTP setup before anything is written (503).
          3. Create Company (status PENDING) and User (role ADMIN) in one commit.
          4. Send the welcome notification; a send failure is only logged.
        """
        email = payload.email.lower()
        if self.user_repo.get_by_email(session, email) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User with this email already exists",
            )
        ensure_email_configured()

        company = Company(name=payload.company_name, contact_email=email)
        user = User(
            email=email,
            password_hash=hash_password(payload.password),
            full_name=payload.full_name,
            role="ADMIN",
            company_id=company.id,
        )
        session.add(company)
        session.add(user)
        session.commit()
        session.refresh(company)
        session.refresh(user)
        logger.info("Registered company %s with admin %s", company.id, user.email)

        notify_by_email(
            to_email=user.email,
            subject="Welcome to SoleTrade",
            html_body=email_templates.welcome(user.full_name or "User"),
        )

        return RegisterResponse(
            user=self.to_profile(session, user),
            company=CompanyBrief(id=company.id, name=company.name),
        )

    def login(self, session: Session, payload: LoginRequest) -> TokenResponse:
        """
        Password login.

        Raises:
            HTTPException(401): unknown email or wrong password (same message).
        """
        user = self.user_repo.get_by_email(session, payload.email.lower())
        if user is None or not verify_password(payload.password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )
        return self._token_response(session, user)

    def validate_user_by_social(self, session: Session, profile: SocialProfile) -> TokenResponse:
        """
        Find or create the user behind an OAuth profile and issue a token.

        New social users get role USER, no company and no password hash.

        Raises:
            HTTPException(400): if the provider did not share an email.
        """
        if not profile.email:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{profile.provider} account has no email address",
            )

        email = profile.email.lower()
        user = self.user_repo.get_by_email(session, email)
        if user is None:
            user = self.user_repo.create(
                session,
                User(
                    email=email,
                    full_name=profile.full_name or None,
                    role="USER",
                    provider=profile.provider,
                ),
            )
            logger.info("Provisioned %s user %s", profile.provider, email)

        return self._token_response(session, user)
