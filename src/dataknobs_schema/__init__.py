"""Composable value validation for the dataknobs ecosystem.

Build a schema by chaining constraints and transforms, then validate values
against it. Validation never raises for bad data: it returns a
``ValidationResult`` carrying either the (possibly transformed) value or
every violation found.

Example:
    ```python
    from dataknobs_schema import int_type, string

    username = string().trim().to_lower_case().min(3).max(20)
    result = username.validate("  Alice  ")
    result.get_value()
    # 'alice'

    age = int_type().min(0).max(120)
    [error.code for error in age.validate(130).get_errors()]
    # ['NUMBER_TOO_LARGE']
    ```
"""

from .booleans import BooleanSchema
from .codes import ErrorCode
from .constraints import Constraint, ConstraintList, TransformPipeline
from .exceptions import (
    EmptyFailureError,
    FailedResultAccessError,
    SchemaConfigurationError,
    SchemaError,
)
from .factory import (
    SchemaFactory,
    boolean,
    double_type,
    int_type,
    long_type,
    schema_factory,
    string,
)
from .numeric import (
    DOUBLE,
    INT,
    LONG,
    DoubleSchema,
    IntSchema,
    LongSchema,
    NumberSchema,
    NumericKind,
)
from .result import Failure, Success, ValidationError, ValidationResult
from .schema import BaseSchema, Schema
from .strings import StringSchema

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Result types
    "ValidationResult",
    "Success",
    "Failure",
    "ValidationError",
    "ErrorCode",
    # Pipeline
    "Constraint",
    "ConstraintList",
    "TransformPipeline",
    # Schemas
    "Schema",
    "BaseSchema",
    "StringSchema",
    "BooleanSchema",
    "NumberSchema",
    "NumericKind",
    "IntSchema",
    "LongSchema",
    "DoubleSchema",
    "INT",
    "LONG",
    "DOUBLE",
    # Factories
    "string",
    "boolean",
    "int_type",
    "long_type",
    "double_type",
    "SchemaFactory",
    "schema_factory",
    # Exceptions
    "SchemaError",
    "EmptyFailureError",
    "FailedResultAccessError",
    "SchemaConfigurationError",
]
