"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_api.config import Settings
from blog_api.exceptions import DuplicateEmail, InvalidCredentials, InvalidToken, NotFound
from blog_api.models.user import User
from blog_api.schemas.auth import Identity

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class TokenService:
    """Issues and verifies signed, expiring tokens carrying an Identity.

    The signing secret, algorithm and lifetime come from the settings the
    service is constructed with. Expiry is the only bound on a token's
    lifetime; there is no revocation.
    """

    def __init__(self, settings: Settings):
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self.lifetime = timedelta(minutes=settings.jwt_expiration_minutes)

    def issue(self, identity: Identity, now: datetime | None = None) -> str:
        """Create a signed token for the identity, expiring after the configured lifetime."""
        issued_at = now or datetime.now(UTC)
        to_encode = {
            "sub": str(identity.user_id),
            "email": identity.email,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        """Decode and validate a token.

        Raises:
            InvalidToken: bad signature, malformed token, expired token or
                missing claims.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            raise InvalidToken() from e

        user_id = payload.get("sub")
        email = payload.get("email")
        if user_id is None or email is None:
            raise InvalidToken()
        try:
            return Identity(user_id=int(user_id), email=email)
        except ValueError as e:
            raise InvalidToken() from e


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, email: str, password: str, name: str) -> User:
    """Create a new user.

    Email uniqueness is checked before the insert. Two concurrent
    registrations can both pass the check; the unique constraint on
    ``users.email`` then rejects the second insert, which is reported as
    DuplicateEmail as well.
    """
    if get_user_by_email(db, email):
        raise DuplicateEmail()

    hashed_password = get_password_hash(password)
    user = User(email=email, password_hash=hashed_password, name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateEmail() from e
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Unknown email and wrong password raise the same InvalidCredentials.
    """
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Failed sign-in attempt")
        raise InvalidCredentials()
    return user


def get_profile(db: Session, identity: Identity) -> User:
    """Fetch the acting user's record."""
    user = get_user_by_id(db, identity.user_id)
    if user is None:
        raise NotFound("User not found")
    return user
