from .builders import (
    Query as Query,
    ReadQuery as ReadQuery,
    WriteQuery as WriteQuery,
)
from .protocols import QueryProtocol as QueryProtocol
from .valid_query import ValidQuery as ValidQuery
