from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .event import DomainEvent as DomainEvent
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    ErrorKind as ErrorKind,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
from .service import IdGenerator as IdGenerator
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    Money as Money,
)
