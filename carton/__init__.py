from typing import List

# Containers
from carton.option import Option
from carton.result import Result
from carton.either import Either

# Factories, predicates and conversions
from carton.utils._helpers import (
    wrap,
    wrap_absent,
    wrap_ok,
    wrap_err,
    left,
    right,
    is_present_variant,
    is_absent_variant,
    is_ok_variant,
    is_err_variant,
    is_left_variant,
    is_right_variant,
    option_to_result,
    result_to_option,
)
from carton.utils._utils import NOTHING

# Decorators
from carton.decorators.wrap_decorators import returns_result, returns_option

# Enums
from carton.core._enums import (
    OptionVariant,
    ResultVariant,
    EitherVariant,
    AbsencePolicy,
)

# Configuration
from carton.models.models import CartonConfig
from carton.registry.config_registry import ConfigRegistry

# Exceptions
from carton.core.exceptions import CartonError, EmptyAccessError, InvalidStateError

__all__: List[str] = [
    # Version
    "__version__",
    # Containers
    "Option",
    "Result",
    "Either",
    # Factories
    "wrap",
    "wrap_absent",
    "wrap_ok",
    "wrap_err",
    "left",
    "right",
    "NOTHING",
    # Predicates
    "is_present_variant",
    "is_absent_variant",
    "is_ok_variant",
    "is_err_variant",
    "is_left_variant",
    "is_right_variant",
    # Conversions
    "option_to_result",
    "result_to_option",
    # Decorators
    "returns_result",
    "returns_option",
    # Enums
    "OptionVariant",
    "ResultVariant",
    "EitherVariant",
    "AbsencePolicy",
    # Configuration
    "CartonConfig",
    "ConfigRegistry",
    # Exceptions
    "CartonError",
    "EmptyAccessError",
    "InvalidStateError",
]

__version__ = "0.1.0"
