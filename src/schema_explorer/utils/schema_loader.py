from pathlib import Path

from ariadne import load_schema_from_path
from graphql import GraphQLSchema

from schema_explorer import log
from schema_explorer.parser import parse_schema

GRAPHQL_FILE_SUFFIXES = (".graphql", ".graphqls", ".gql")


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve a list of paths (files and directories) into a flat list of unique GraphQL files.

    Args:
        paths: List of file or directory paths

    Returns:
        Flat list of unique GraphQL file paths (deduplicated and sorted)
    """
    resolved_files: set[Path] = set()

    for path in paths:
        if path.is_file():
            resolved_files.add(path)
        elif path.is_dir():
            for suffix in GRAPHQL_FILE_SUFFIXES:
                resolved_files.update(path.rglob(f"*{suffix}"))

    return sorted(resolved_files)


def build_sdl_str(graphql_schema_paths: list[Path]) -> str:
    """Concatenate the SDL of the given files.

    Raises:
        ariadne.exceptions.GraphQLFileSyntaxError: If a file is not valid GraphQL syntax
        OSError: If a file cannot be read
    """
    sdl_str = ""
    for graphql_file in resolve_graphql_files(graphql_schema_paths):
        log.debug(f"Reading SDL from {graphql_file}")
        sdl_str += load_schema_from_path(graphql_file) + "\n"
    return sdl_str


def load_schema(graphql_schema_paths: Path | list[Path]) -> GraphQLSchema | None:
    """Load SDL files or folders and build the schema; None when nothing usable was found."""
    if isinstance(graphql_schema_paths, Path):
        graphql_schema_paths = [graphql_schema_paths]

    return parse_schema(build_sdl_str(graphql_schema_paths))
