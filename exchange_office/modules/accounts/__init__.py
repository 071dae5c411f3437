"""Account domain exports"""

from .exceptions import AccountNotFoundError, ConcurrentUpdateError
from .models import Account
from .service import AccountService

__all__ = [
    "Account",
    "AccountService",
    "AccountNotFoundError",
    "ConcurrentUpdateError",
]
