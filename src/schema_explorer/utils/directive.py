from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    GraphQLNamedType,
)

DEPRECATED_DIRECTIVE = "deprecated"

DirectiveElement = GraphQLNamedType | GraphQLField | GraphQLArgument | GraphQLInputField | GraphQLEnumValue


def has_given_directive(element: DirectiveElement, directive_name: str) -> bool:
    """Check whether a GraphQL element (type, field, argument, enum value) carries the given directive."""
    ast_node = element.ast_node
    if ast_node and ast_node.directives:
        for directive in ast_node.directives:
            if directive.name.value == directive_name:
                return True
    return False


def get_directive_arguments(element: DirectiveElement, directive_name: str) -> dict[str, Any]:
    """
    Extracts the literal arguments of a directive applied to a GraphQL element.

    Args:
        element: The GraphQL element from which to extract the directive arguments.
        directive_name: The name of the directive whose arguments are to be extracted.
    Returns:
        dict[str, Any]: Raw literal values of scalar arguments; other values (null, lists, objects) as AST nodes.
    """
    if not has_given_directive(element, directive_name) or not element.ast_node:
        return {}

    directive = next(d for d in element.ast_node.directives if d.name.value == directive_name)
    return {arg.name.value: getattr(arg.value, "value", arg.value) for arg in directive.arguments}


def get_deprecation_reason(element: DirectiveElement) -> str | None:
    """
    Read the deprecation reason from the element's @deprecated directive.

    graphql-core fills in "No longer supported" when the reason is omitted; the AST is
    read instead so that a bare @deprecated is reported as an empty reason.

    Returns:
        None when not deprecated, the given reason otherwise ("" when none was given).
    """
    if element.ast_node is None:
        return getattr(element, "deprecation_reason", None)
    if not has_given_directive(element, DEPRECATED_DIRECTIVE):
        return None
    reason = get_directive_arguments(element, DEPRECATED_DIRECTIVE).get("reason")
    return reason if isinstance(reason, str) else ""
