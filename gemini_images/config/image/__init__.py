"""Image configuration exports."""

from . import aliases, defaults, models
from .aliases import *  # noqa: F401,F403
from .defaults import *  # noqa: F401,F403
from .models import *  # noqa: F401,F403

__all__ = [
    *aliases.__all__,
    *defaults.__all__,
    *models.__all__,
]
