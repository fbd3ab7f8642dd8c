from .timestamp import Timestamp as Timestamp
from .value import Value as Value
from .mixins import WriteableMixin as WriteableMixin
