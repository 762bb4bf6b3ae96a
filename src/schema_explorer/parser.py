"""Adapter around graphql-core's SDL parser."""

from graphql import GraphQLError, GraphQLSchema, build_schema

from schema_explorer import log
from schema_explorer.utils.graphql_type import get_declared_types


def parse_schema(sdl: str | None) -> GraphQLSchema | None:
    """Build a schema from SDL text.

    Absent, blank and unparsable documents all yield None; the caller decides whether
    that means "nothing fetched yet" or "fetched but invalid".

    Args:
        sdl: The SDL document, or None

    Returns:
        The built schema, or None
    """
    if not sdl or not sdl.strip():
        log.debug("No SDL given, nothing to parse.")
        return None

    try:
        schema = build_schema(sdl)
    except (GraphQLError, TypeError, RecursionError) as e:
        log.debug(f"Could not build schema from SDL: {e}")
        return None

    log.debug(f"Built schema with {len(declared_type_names(schema))} declared types.")
    return schema


def declared_type_names(schema: GraphQLSchema) -> list[str]:
    """Names of all types declared by the document, in type map order."""
    return [type_.name for type_ in get_declared_types(schema)]
