import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from schema_explorer import __version__
from schema_explorer.cli import cli
from tests.conftest import SchemaData

BLOG = str(SchemaData.BLOG)


@pytest.fixture(scope="module")
def runner() -> CliRunner:
    return CliRunner()


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0, result.output
    assert __version__ in result.output


def test_counts_json(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["counts", "-s", BLOG, "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "query": 1,
        "mutation": 1,
        "subscription": 1,
        "object": 3,
        "interface": 2,
        "enum": 2,
        "scalar": 1,
        "union": 1,
        "input-object": 1,
    }


def test_counts_table(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["counts", "-s", BLOG])
    assert result.exit_code == 0, result.output
    assert "Input object" in result.output
    assert "Total: 13" in result.output


def test_counts_directory(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["counts", "-s", str(SchemaData.SPLIT_DIR), "--json"])
    assert result.exit_code == 0, result.output
    counts = json.loads(result.output)
    assert counts["query"] == 1
    assert counts["object"] == 2


def test_counts_invalid_schema(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["counts", "-s", str(SchemaData.INVALID)])
    assert result.exit_code == 1
    assert "Could not retrieve schema" in result.output


def test_counts_empty_directory(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["counts", "-s", str(tmp_path)])
    assert result.exit_code == 1
    assert "Could not retrieve schema" in result.output


def test_list_json(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["list", "-s", BLOG, "-c", "scalar", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [{"name": "DateTime", "description": "An ISO-8601 encoded date and time."}]


def test_list_table(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["list", "-s", BLOG, "-c", "INTERFACE"])
    assert result.exit_code == 0, result.output
    assert "Node" in result.output
    assert "Timestamped" in result.output


def test_list_invalid_category(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["list", "-s", BLOG, "-c", "table"])
    assert result.exit_code == 2


def test_show_defaults_to_query(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["show", "-s", BLOG, "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["name"] == "Query"
    assert data["category"] == "query"
    assert [field["name"] for field in data["fields"]] == ["node", "search", "me"]


def test_show_type_json(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["show", "-s", BLOG, "-t", "User", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["interfaces"] == ["Node"]
    fields = {field["name"]: field for field in data["fields"]}
    assert fields["handle"]["deprecationReason"] == ""
    assert fields["name"]["deprecationReason"] is None
    assert fields["posts"]["type"] == "[Post!]!"
    assert [arg["name"] for arg in fields["posts"]["args"]] == ["first", "after", "orderBy"]


def test_show_type_table(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["show", "-s", BLOG, "-c", "object", "-t", "User"])
    assert result.exit_code == 0, result.output
    assert "User implements Node" in result.output
    assert "Input" in result.output
    assert "posts" in result.output


def test_show_category_listing(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["show", "-s", BLOG, "-c", "enum", "--json"])
    assert result.exit_code == 0, result.output
    assert {summary["name"] for summary in json.loads(result.output)} == {"PostStatus", "PostOrder"}


def test_show_root_category_opens_root_type(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["show", "-s", str(SchemaData.CUSTOM_ROOTS), "-c", "mutation", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["name"] == "RootMutation"
    assert data["category"] == "mutation"


def test_show_unknown_type(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["show", "-s", BLOG, "-t", "Missing"])
    assert result.exit_code == 1
    assert "No data found" in result.output


def test_show_with_config(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--config", str(SchemaData.CONFIG), "show", "-s", BLOG, "--json"])
    assert result.exit_code == 0, result.output
    # defaultCategory: object, sortListings: true
    assert [summary["name"] for summary in json.loads(result.output)] == ["Comment", "Post", "User"]


def test_show_hides_deprecated_with_config(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--config", str(SchemaData.CONFIG), "show", "-s", BLOG, "-t", "PostStatus"])
    assert result.exit_code == 0, result.output
    assert "PUBLISHED" in result.output
    assert "ARCHIVED" not in result.output


def test_invalid_config(runner: CliRunner, tmp_path: Path) -> None:
    config_path = tmp_path / "explorer.yaml"
    config_path.write_text("defaultCategory: table\n")
    result = runner.invoke(cli, ["--config", str(config_path), "counts", "-s", BLOG])
    assert result.exit_code == 1
    assert "Invalid config file" in result.output


def test_resolve_json(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["resolve", "-s", BLOG, ": [Post!]!", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "name": "Post",
        "category": "object",
        "wrappers": ["non-null", "list", "non-null"],
        "link": "category=object&typename=Post",
    }


def test_resolve_builtin_scalar(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["resolve", "-s", BLOG, "Float!"])
    assert result.exit_code == 0, result.output
    assert "Scalar" in result.output


def test_resolve_unknown(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["resolve", "-s", BLOG, "Missing"])
    assert result.exit_code == 1
    assert "does not name a type" in result.output


def test_log_file(runner: CliRunner, tmp_path: Path) -> None:
    log_file = tmp_path / "explorer.log"
    result = runner.invoke(cli, ["--log-file", str(log_file), "show", "-s", BLOG, "-t", "Missing"])
    assert result.exit_code == 1
    assert "No data found" in log_file.read_text()
