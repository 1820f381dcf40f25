"""
Domain-split SQLAlchemy models.

Importing this package registers every model on the shared metadata so
string-based relationships resolve.
"""

from .shared.models import Base, BaseModel, now_utc, User
from .subscriber.models import Subscriber, Tag, subscriber_tag
from .accounting.reports.models import Report
from .sample.models import SampleModel

__all__ = [
    # base
    "Base",
    "BaseModel",
    "now_utc",
    # shared
    "User",
    # subscriber
    "Subscriber",
    "Tag",
    "subscriber_tag",
    # accounting
    "Report",
    # sample
    "SampleModel",
]
