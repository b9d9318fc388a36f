import logging

import bcrypt
from sqlalchemy.orm import Session

from app.models.user import User
from app.services.common import apply_fields, delete_row, get_row, storage_errors, writable

logger = logging.getLogger(__name__)


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ValueError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def get_user(db: Session, user_id: str) -> User | None:
    return get_row(db, User, user_id, "fetch user")


def get_user_by_username(db: Session, username: str) -> User | None:
    with storage_errors(db, "fetch user"):
        return db.query(User).filter(User.username == username).first()


def create_user(db: Session, fields: dict) -> User:
    """`fields["password"]` must already be hashed (see hash_password)."""
    user = User(**writable(fields))
    with storage_errors(db, "create user"):
        db.add(user)
        db.commit()
        db.refresh(user)
    logger.info("created user id=%s username=%s", user.id, user.username)
    return user


def update_user(db: Session, user_id: str, fields: dict) -> User | None:
    with storage_errors(db, "update user"):
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            return None
        apply_fields(user, fields, touch=False)
        db.commit()
        db.refresh(user)
    return user


def delete_user(db: Session, user_id: str) -> bool:
    return delete_row(db, User, user_id, "delete user")
