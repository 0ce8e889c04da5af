from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import DomainException as DomainException
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import ErrorKind as ErrorKind
from .exceptions import ForbiddenException as ForbiddenException
from .exceptions import InvalidInputException as InvalidInputException
from .exceptions import InvalidStateException as InvalidStateException
from .exceptions import OptimisticLockException as OptimisticLockException
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exceptions import (
    ResourceUnavailableException as ResourceUnavailableException,
)
