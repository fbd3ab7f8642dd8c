from .endpoint import Endpoint as Endpoint
from .precision import Precision as Precision
from .query_type import QueryType as QueryType
from .value_kind import ValueKind as ValueKind
