from .demo import bootstrap_provider, run_demo  # noqa: F401
from .mappers import UserMapper, create_schema  # noqa: F401
from .models import User, UserState  # noqa: F401
from .repository import Users  # noqa: F401

__all__ = [
    "User",
    "UserState",
    "UserMapper",
    "Users",
    "bootstrap_provider",
    "create_schema",
    "run_demo",
]
