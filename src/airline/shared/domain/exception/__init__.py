from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    InvalidKeyException as InvalidKeyException,
)
