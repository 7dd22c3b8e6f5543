"""Record cache protocols."""

from .cacheable_record import CacheableRecord
from .secondarily_encoded import SecondarilyEncoded

__all__ = [
    "CacheableRecord",
    "SecondarilyEncoded",
]
