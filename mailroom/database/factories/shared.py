from datetime import datetime, UTC

from mailroom.domain.shared.models import User
from .base import Factory


class UserFactory(Factory):
    model = User

    def definition(self):
        n = self.sequence()
        return {
            'name': f'User {n}',
            'email': f'user{n}@example.test',
            'password': 'password',
            'email_verified_at': datetime.now(UTC),
            'remember_token': f'token-{n:010d}',
        }

    def unverified(self):
        return self.state(email_verified_at=None)
