"""Resolution of type-reference strings (``[Post!]!``, ``: String``) back to navigable types."""

import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlencode

from graphql import GraphQLError, GraphQLSchema, ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode, parse_type

from schema_explorer.categories import Category
from schema_explorer.classifier import classify
from schema_explorer.utils.graphql_type import is_builtin_scalar_type, is_introspection_type

LABEL_ARTIFACTS_PATTERN = re.compile(r"[:\s]")
WRAPPER_SYNTAX_PATTERN = re.compile(r"[\[\]!:\s]")


class Wrapper(str, Enum):
    LIST = "list"
    NON_NULL = "non-null"


@dataclass(frozen=True)
class TypeReference:
    """A bare type name plus its wrappers, outermost first.

    ``[String!]!`` is ``TypeReference("String", (NON_NULL, LIST, NON_NULL))``.
    """

    name: str
    wrappers: tuple[Wrapper, ...] = ()

    @property
    def is_list(self) -> bool:
        return Wrapper.LIST in self.wrappers

    @property
    def is_non_null(self) -> bool:
        return bool(self.wrappers) and self.wrappers[0] == Wrapper.NON_NULL

    def __str__(self) -> str:
        rendered = self.name
        for wrapper in reversed(self.wrappers):
            rendered = f"[{rendered}]" if wrapper == Wrapper.LIST else f"{rendered}!"
        return rendered


def _from_type_node(node: TypeNode) -> TypeReference:
    wrappers: list[Wrapper] = []
    while not isinstance(node, NamedTypeNode):
        if isinstance(node, ListTypeNode):
            wrappers.append(Wrapper.LIST)
        elif isinstance(node, NonNullTypeNode):
            wrappers.append(Wrapper.NON_NULL)
        node = node.type
    return TypeReference(name=node.name.value, wrappers=tuple(wrappers))


def unwrap_type_reference(raw: str) -> TypeReference:
    """
    Split a raw type reference into its bare name and wrappers.

    Label artifacts (a leading ``:`` and whitespace) are dropped first. References that do not
    parse as a GraphQL type are reduced to a bare name by deleting all wrapper characters.

    Args:
        raw: Type reference as rendered in SDL or in a field label

    Returns:
        The unwrapped reference; never raises
    """
    cleaned = LABEL_ARTIFACTS_PATTERN.sub("", raw)
    try:
        return _from_type_node(parse_type(cleaned, no_location=True))
    except (GraphQLError, RecursionError):
        return TypeReference(name=WRAPPER_SYNTAX_PATTERN.sub("", cleaned))


def resolve_reference(schema: GraphQLSchema, raw: str) -> Category | None:
    """
    Resolve a raw type reference to the category of the type it names.

    Args:
        schema: The GraphQL schema the reference originates from
        raw: Type reference, possibly wrapped or taken from a label

    Returns:
        The category of the referenced type, ``scalar`` for built-in scalars, or None when
        the bare name is neither declared nor built in, or names an introspection type
    """
    name = unwrap_type_reference(raw).name
    if is_introspection_type(name):
        return None
    if name and schema.get_type(name) is not None:
        return classify(schema, name)
    if is_builtin_scalar_type(name):
        return Category.SCALAR
    return None


@dataclass(frozen=True)
class TypeLink:
    """Cross-link target for a type reference."""

    reference: TypeReference
    category: Category

    @property
    def name(self) -> str:
        return self.reference.name

    @property
    def query_string(self) -> str:
        return urlencode({"category": self.category.value, "typename": self.reference.name})

    def href(self, base_path: str) -> str:
        """Append the navigation query to a path, replacing any existing query."""
        return f"{base_path.split('?')[0]}?{self.query_string}"


def resolve_link(schema: GraphQLSchema, raw: str) -> TypeLink | None:
    """Build the cross-link for a raw type reference, or None when it cannot be resolved."""
    reference = unwrap_type_reference(raw)
    category = resolve_reference(schema, reference.name)
    if category is None:
        return None
    return TypeLink(reference=reference, category=category)
