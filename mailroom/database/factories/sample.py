from mailroom.domain.sample.models import SampleModel
from .base import Factory


class SampleModelFactory(Factory):
    model = SampleModel

    def definition(self):
        return {'label': f'sample-{self.sequence()}'}
