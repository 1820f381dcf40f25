from mailroom.domain.subscriber.models import Subscriber, Tag
from .base import Factory
from .shared import UserFactory


class TagFactory(Factory):
    model = Tag

    def definition(self):
        return {
            'title': f'tag-{self.sequence()}',
            'user_id': UserFactory(),
        }

    def for_user(self, user):
        return self.state(user_id=user.id)


class SubscriberFactory(Factory):
    model = Subscriber

    def definition(self):
        n = self.sequence()
        return {
            'email': f'subscriber{n}@example.test',
            'first_name': 'Sub',
            'last_name': f'Scriber{n}',
            'form_id': None,
            'user_id': UserFactory(),
        }

    def for_user(self, user):
        return self.state(user_id=user.id)

    def with_tags(self, count=1):
        """Attach ``count`` new tags owned by the subscriber's user after creation."""
        def _attach(db, subscriber):
            tags = TagFactory().count(count).create(db, user_id=subscriber.user_id)
            subscriber.tags.extend(tags)
            db.commit()

        return self.after_creating(_attach)
