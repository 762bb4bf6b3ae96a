import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
import yaml
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import GraphQLSchema
from pydantic import ValidationError
from rich.markup import escape
from rich.traceback import install

from schema_explorer import __version__, log
from schema_explorer.categories import ALL_CATEGORIES, ROOT_CATEGORIES, TYPE_CATEGORIES, Category
from schema_explorer.config import ExplorerConfig, load_config
from schema_explorer.index import CategoryIndex, TypeSummary
from schema_explorer.materializer import Field, MaterializedType
from schema_explorer.navigation import select, selection_for_category
from schema_explorer.references import resolve_link
from schema_explorer.utils.schema_loader import load_schema, resolve_graphql_files


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        paths = set(value)
        return resolve_graphql_files(list(paths))


schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    required=True,
    multiple=True,
    help="The GraphQL schema file or directory containing schema files. Can be specified multiple times.",
)


category_choice = click.Choice([category.value for category in ALL_CATEGORIES], case_sensitive=False)


json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as JSON instead of tables",
)


def get_config(ctx: click.Context) -> ExplorerConfig:
    config = ctx.find_object(ExplorerConfig)
    return config if config is not None else ExplorerConfig()


def load_schema_or_exit(schemas: list[Path] | None) -> GraphQLSchema:
    """Load the schema files, exiting with an error when they yield no usable schema."""
    if not schemas:
        log.error("Could not retrieve schema: no GraphQL files found.")
        sys.exit(1)

    try:
        schema = load_schema(schemas)
    except GraphQLFileSyntaxError as e:
        log.debug(f"Syntax error in schema files: {e}")
        schema = None
    except OSError as e:
        log.error(f"File I/O error: {e}")
        sys.exit(1)

    if schema is None:
        log.error("Could not retrieve schema: chances are the schema is invalid or does not exist.")
        sys.exit(1)
    return schema


def format_description(description: str, config: ExplorerConfig) -> str:
    return description or config.empty_placeholder


def format_arguments(field: Field, config: ExplorerConfig) -> str:
    args = [arg for arg in field.args if config.show_deprecated or not arg.is_deprecated]
    if not args:
        return config.empty_placeholder
    return "\n".join(f"{arg.name}: {arg.type}" + (" (deprecated)" if arg.is_deprecated else "") for arg in args)


def format_field_name(field: Field) -> str:
    rendered = f"{field.name}: {field.type}" if field.type else field.name
    if field.deprecation_reason is not None:
        note = f"deprecated: {field.deprecation_reason}" if field.deprecation_reason else "deprecated"
        rendered += f" ({note})"
    return rendered


def print_listing(category: Category, listing: list[TypeSummary], config: ExplorerConfig) -> None:
    log.rule(f"{category.label} types")
    log.print_table(
        ["Type", "Description"],
        [[summary.name, format_description(summary.description, config)] for summary in listing],
    )


def print_type(materialized: MaterializedType, config: ExplorerConfig) -> None:
    heading = materialized.name
    if materialized.interfaces:
        heading += " implements " + " & ".join(materialized.interfaces)
    log.rule(escape(heading))
    log.key_value("Category", materialized.category.label)
    if materialized.description:
        log.print(escape(materialized.description))
    if materialized.possible_types:
        log.key_value("Members", escape(" | ".join(materialized.possible_types)))

    fields = [field for field in materialized.fields if config.show_deprecated or not field.is_deprecated]
    if not fields:
        return

    headers = ["Field", "Description"]
    if materialized.has_args:
        headers.insert(1, "Input")

    rows: list[list[str]] = []
    for field in fields:
        row = [format_field_name(field), format_description(field.description, config)]
        if materialized.has_args:
            row.insert(1, format_arguments(field, config))
        rows.append(row)
    log.print_table(headers, rows)


@click.group(context_settings={"auto_envvar_prefix": "SCHEMA_EXPLORER"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file containing explorer configuration",
)
@click.version_option(__version__)
@click.pass_context
def cli(ctx: click.Context, log_level: str, log_file: Path | None, config_path: Path | None) -> None:
    """Explore the types of a GraphQL schema by category."""
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)

    try:
        ctx.obj = load_config(config_path)
    except (OSError, yaml.YAMLError, TypeError, ValidationError) as e:
        log.error(f"Invalid config file {config_path}: {e}")
        sys.exit(1)


@cli.command
@schema_option
@json_option
def counts(schemas: list[Path] | None, as_json: bool) -> None:
    """Count the types of the schema per category."""
    schema = load_schema_or_exit(schemas)
    index = CategoryIndex.build(schema)

    if as_json:
        log.print_dict({category.value: count for category, count in index.counts.items()})
        return

    log.rule("GraphQL Schema Type Counts")
    rows = [[category.label, index.counts[category]] for category in ROOT_CATEGORIES]
    rows += [[category.label, index.counts[category]] for category in TYPE_CATEGORIES]
    log.print_table(["Category", "Count"], rows)
    log.key_value("Total", index.total)


@cli.command(name="list")
@schema_option
@click.option("--category", "-c", type=category_choice, required=True, help="Category to list")
@json_option
@click.pass_context
def list_types(ctx: click.Context, schemas: list[Path] | None, category: str, as_json: bool) -> None:
    """List the types of one category with their descriptions."""
    config = get_config(ctx)
    schema = load_schema_or_exit(schemas)
    selection = select(schema, Category(category.lower()), sort=config.sort_listings)
    listing = selection.listing or []

    if as_json:
        log.print_dict([summary.model_dump(mode="json") for summary in listing])
        return

    print_listing(Category(category.lower()), listing, config)


@cli.command
@schema_option
@click.option("--category", "-c", type=category_choice, help="Selected category")
@click.option("--type", "-t", "type_name", type=str, help="Selected type name")
@json_option
@click.pass_context
def show(
    ctx: click.Context,
    schemas: list[Path] | None,
    category: str | None,
    type_name: str | None,
    as_json: bool,
) -> None:
    """Show a type, or the listing of a category when no type is given.

    Without any selection the configured default category is opened; root categories open their root type.
    """
    config = get_config(ctx)
    schema = load_schema_or_exit(schemas)

    selected_category = Category(category.lower()) if category else None
    if selected_category is None and not type_name:
        target = selection_for_category(schema, config.default_category)
        selected_category, type_name = target.category, target.type_name
    elif selected_category is not None and selected_category.is_root and not type_name:
        type_name = selection_for_category(schema, selected_category).type_name

    selection = select(schema, selected_category, type_name, sort=config.sort_listings)

    if selection.empty:
        log.warning(f"No data found for type '{selection.type_name}'. Please adjust your selection.")
        sys.exit(1)

    if selection.listing is not None and selection.category is not None:
        if as_json:
            log.print_dict([summary.model_dump(mode="json") for summary in selection.listing])
        else:
            print_listing(selection.category, selection.listing, config)
        return

    if selection.type is not None:
        if as_json:
            log.print_dict(selection.type.model_dump(mode="json", by_alias=True))
        else:
            print_type(selection.type, config)


@cli.command
@schema_option
@click.argument("reference")
@json_option
def resolve(schemas: list[Path] | None, reference: str, as_json: bool) -> None:
    """Resolve a type reference such as '[Post!]!' to the type it points at."""
    schema = load_schema_or_exit(schemas)
    link = resolve_link(schema, reference)

    if link is None:
        log.warning(f"Type reference '{reference}' does not name a type of the schema.")
        sys.exit(1)

    wrappers = [wrapper.value for wrapper in link.reference.wrappers]
    result = {
        "name": link.name,
        "category": link.category.value,
        "wrappers": wrappers,
        "link": link.query_string,
    }

    if as_json:
        log.print_dict(result)
        return

    log.key_value("Type", escape(link.name))
    log.key_value("Category", link.category.label)
    log.key_value("Wrappers", ", ".join(wrappers) or "none")
    log.key_value("Link", escape(f"?{link.query_string}"))


if __name__ == "__main__":
    cli()
