from .sample_model import SampleModel

__all__ = ["SampleModel"]
