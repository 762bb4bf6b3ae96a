"""Flat, display-ready records of a single named type."""

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
)
from pydantic import BaseModel, ConfigDict
from pydantic import Field as ModelField
from pydantic.alias_generators import to_camel

from schema_explorer.categories import Category
from schema_explorer.classifier import category_for_type
from schema_explorer.utils.directive import get_deprecation_reason
from schema_explorer.utils.graphql_type import is_introspection_type


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Argument(_Record):
    name: str
    type: str
    description: str = ""
    deprecation_reason: str | None = None

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation_reason is not None


class Field(_Record):
    """A field, input field or enum value. Enum values have an empty ``type``."""

    name: str
    type: str = ""
    args: list[Argument] = ModelField(default_factory=list)
    description: str = ""
    deprecation_reason: str | None = None

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation_reason is not None


class MaterializedType(_Record):
    name: str
    category: Category
    description: str = ""
    interfaces: list[str] = ModelField(default_factory=list)
    fields: list[Field] = ModelField(default_factory=list)
    possible_types: list[str] = ModelField(default_factory=list)

    @property
    def has_args(self) -> bool:
        return any(field.args for field in self.fields)


def map_argument(name: str, argument: GraphQLArgument) -> Argument:
    return Argument(
        name=name,
        type=str(argument.type),
        description=argument.description or "",
        deprecation_reason=get_deprecation_reason(argument),
    )


def map_field(name: str, field: GraphQLField) -> Field:
    return Field(
        name=name,
        type=str(field.type),
        args=[map_argument(arg_name, arg) for arg_name, arg in field.args.items()],
        description=field.description or "",
        deprecation_reason=get_deprecation_reason(field),
    )


def map_input_field(name: str, field: GraphQLInputField) -> Field:
    return Field(
        name=name,
        type=str(field.type),
        description=field.description or "",
        deprecation_reason=get_deprecation_reason(field),
    )


def map_enum_value(name: str, value: GraphQLEnumValue) -> Field:
    return Field(
        name=name,
        description=value.description or "",
        deprecation_reason=get_deprecation_reason(value),
    )


def map_named_type(schema: GraphQLSchema, named_type: GraphQLNamedType) -> MaterializedType:
    """
    Convert a type of the schema into a MaterializedType.

    Object and interface types carry their implemented interfaces and fields, input objects
    their input fields, enums one field per value. Scalars and unions have no fields; union
    members are listed in ``possible_types`` only.

    Args:
        schema: The schema the type belongs to, used for root classification
        named_type: The type to convert

    Returns:
        The materialized record
    """
    interfaces: list[str] = []
    fields: list[Field] = []
    possible_types: list[str] = []

    if isinstance(named_type, GraphQLObjectType | GraphQLInterfaceType):
        interfaces = [interface.name for interface in named_type.interfaces]
        fields = [map_field(field_name, field) for field_name, field in named_type.fields.items()]
    elif isinstance(named_type, GraphQLInputObjectType):
        fields = [map_input_field(field_name, field) for field_name, field in named_type.fields.items()]
    elif isinstance(named_type, GraphQLEnumType):
        fields = [map_enum_value(value_name, value) for value_name, value in named_type.values.items()]
    elif isinstance(named_type, GraphQLUnionType):
        possible_types = [member.name for member in named_type.types]

    return MaterializedType(
        name=named_type.name,
        category=category_for_type(schema, named_type),
        description=named_type.description or "",
        interfaces=interfaces,
        fields=fields,
        possible_types=possible_types,
    )


def materialize(schema: GraphQLSchema, name: str) -> MaterializedType | None:
    """Materialize a type by name; None when the schema has no such type.

    Built-in scalars materialize like declared scalars so that references to them stay navigable.
    """
    named_type = schema.get_type(name)
    if named_type is None or is_introspection_type(name):
        return None
    return map_named_type(schema, named_type)
