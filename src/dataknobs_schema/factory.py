"""Entry points for creating schemas.

Schemas are normally built fluently from the factory functions::

    name_schema = string().trim().min(2).max(50)
    age_schema = int_type().min(0).max(120)

``SchemaFactory`` builds the same schemas from configuration, so they can
be declared in dataknobs config files alongside other components.
"""

import logging
from typing import Any

from dataknobs_config import FactoryBase

from .booleans import BooleanSchema
from .exceptions import SchemaConfigurationError
from .numeric import DoubleSchema, IntSchema, LongSchema
from .schema import BaseSchema
from .strings import StringSchema

logger = logging.getLogger(__name__)


def string() -> StringSchema:
    """Create a new StringSchema for validating strings."""
    return StringSchema()


def boolean() -> BooleanSchema:
    """Create a new BooleanSchema for validating booleans."""
    return BooleanSchema()


def int_type() -> IntSchema:
    """Create a new IntSchema for validating 32-bit integers."""
    return IntSchema()


def long_type() -> LongSchema:
    """Create a new LongSchema for validating 64-bit integers."""
    return LongSchema()


def double_type() -> DoubleSchema:
    """Create a new DoubleSchema for validating doubles."""
    return DoubleSchema()


SCHEMA_TYPES: dict[str, type[BaseSchema[Any]]] = {
    "string": StringSchema,
    "str": StringSchema,
    "boolean": BooleanSchema,
    "bool": BooleanSchema,
    "int": IntSchema,
    "integer": IntSchema,
    "long": LongSchema,
    "double": DoubleSchema,
    "float": DoubleSchema,
}

TRANSFORMS = ("trim", "to_lower_case", "to_upper_case")

# Constraint type -> name of the config key holding its argument (None if none)
CONSTRAINT_ARGUMENTS: dict[str, str | None] = {
    "min": "value",
    "max": "value",
    "positive": None,
    "negative": None,
    "multiple_of": "value",
    "email": None,
    "uuid": None,
    "regex": "pattern",
    "is_true": None,
    "is_false": None,
}


class SchemaFactory(FactoryBase):
    """Factory for creating value schemas from configuration.

    Configuration Options:
        value_type (str): Value type (string, boolean, int, long, double)
        transforms (list): Transform names, strings only
            (trim, to_lower_case, to_upper_case)
        constraints (list): Constraint definitions or bare constraint type
            names, applied in order

    Constraint Definition Options:
        type (str): Builder method name (min, max, positive, negative,
            multiple_of, email, uuid, regex, is_true, is_false)
        value (number): Argument for min, max and multiple_of
        pattern (str): Argument for regex

    Example Configuration:
        schemas:
          - name: username
            factory: dataknobs_schema.factory.SchemaFactory
            value_type: string
            transforms: [trim, to_lower_case]
            constraints:
              - type: min
                value: 3
              - type: regex
                pattern: "^[a-z0-9_]+$"
          - name: age
            factory: dataknobs_schema.factory.SchemaFactory
            value_type: int
            constraints:
              - type: min
                value: 0
              - type: max
                value: 120
    """

    def create(self, **config: Any) -> BaseSchema[Any]:
        """Create a schema from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance

        Raises:
            SchemaConfigurationError: If the configuration names an unknown
                value type, transform or constraint, or omits an argument
        """
        value_type = str(config.get("value_type", "")).lower()
        schema_class = SCHEMA_TYPES.get(value_type)
        if schema_class is None:
            raise SchemaConfigurationError(
                f"Unknown value type: {config.get('value_type')!r}",
                context={"value_type": config.get("value_type"), "available": sorted(SCHEMA_TYPES)},
            )

        logger.info(f"Creating {schema_class.__name__}")
        schema = schema_class()

        for transform in config.get("transforms") or []:
            self._apply_transform(schema, transform)

        for constraint_config in config.get("constraints") or []:
            self._apply_constraint(schema, constraint_config)

        logger.debug(
            f"Built {schema_class.__name__} with {len(schema.constraints)} constraint(s)"
        )
        return schema

    def _apply_transform(self, schema: BaseSchema[Any], transform: str | dict[str, Any]) -> None:
        """Add a transform to the schema based on configuration.

        Args:
            schema: Schema to add the transform to
            transform: Transform name, or a dict with a ``type`` key
        """
        name = transform.get("type", "") if isinstance(transform, dict) else transform
        name = str(name).lower()
        if name not in TRANSFORMS:
            raise SchemaConfigurationError(
                f"Unknown transform: {name!r}",
                context={"transform": name, "available": list(TRANSFORMS)},
            )
        if not isinstance(schema, StringSchema):
            raise SchemaConfigurationError(
                f"Transform {name!r} is only supported by string schemas",
                context={"transform": name, "schema": type(schema).__name__},
            )
        getattr(schema, name)()

    def _apply_constraint(self, schema: BaseSchema[Any], config: str | dict[str, Any]) -> None:
        """Add a constraint to the schema based on configuration.

        Args:
            schema: Schema to add the constraint to
            config: Constraint type name, or a constraint configuration dict
        """
        if not isinstance(config, dict):
            config = {"type": config}
        constraint_type = str(config.get("type", "")).lower()
        if constraint_type not in CONSTRAINT_ARGUMENTS:
            raise SchemaConfigurationError(
                f"Unknown constraint type: {constraint_type!r}",
                context={"constraint": constraint_type, "available": sorted(CONSTRAINT_ARGUMENTS)},
            )

        builder = getattr(schema, constraint_type, None)
        if builder is None:
            raise SchemaConfigurationError(
                f"Constraint {constraint_type!r} is not supported by {type(schema).__name__}",
                context={"constraint": constraint_type, "schema": type(schema).__name__},
            )

        argument = CONSTRAINT_ARGUMENTS[constraint_type]
        if argument is None:
            builder()
            return

        if config.get(argument) is None:
            raise SchemaConfigurationError(
                f"Constraint {constraint_type!r} requires {argument!r}",
                context={"constraint": constraint_type, "missing": argument},
            )
        builder(config[argument])


# Create singleton instance for registration
schema_factory = SchemaFactory()
