from .subscriber import Subscriber, subscriber_tag
from .tag import Tag

__all__ = ["Subscriber", "Tag", "subscriber_tag"]
