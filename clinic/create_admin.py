"""
Create the administrator account.

Usage::

    ADMIN_PASSWORD=... python -m clinic.create_admin

Does nothing if a user with ``ADMIN_USERNAME`` already exists.
"""
import logging
import sys

from .core.config import settings
from .core.database import SessionLocal, init_db
from .services.user_service import UserService

logger = logging.getLogger(__name__)

def create_admin(db, username: str, password: str):
    return UserService(db).ensure_admin(username, password)

def main() -> int:
    logging.basicConfig(level=logging.INFO)
    
    if not settings.ADMIN_PASSWORD:
        logger.error("ADMIN_PASSWORD environment variable is required")
        return 1
    
    init_db()
    db = SessionLocal()
    try:
        user = create_admin(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    finally:
        db.close()
    
    if user:
        logger.info(f"Admin user {user.username} created successfully")
    return 0

if __name__ == "__main__":
    sys.exit(main())
