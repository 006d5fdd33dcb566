from slidedeck.db.base import Base  # noqa: F401

from .user import User  # noqa: F401
from .presentation import Presentation  # noqa: F401
from .slide import Slide  # noqa: F401
from .audit_log import AuditLog  # noqa: F401
