"""Tests for schema loading, configuration and the command line."""

import asyncio
import json

import httpx
import pytest
from typer.testing import CliRunner

from yuidts.cli import app
from yuidts.config import GeneratorConfig, load_config
from yuidts.errors import ConfigError, SchemaError
from yuidts.loader import load_schema
from yuidts.parser import parse, parse_file

DATA = {
    "project": {"name": "p5"},
    "files": {},
    "classes": {
        "p5": {"name": "p5", "file": "src\\core\\main.js", "is_constructor": 1},
        "p5.Vector": {"file": "src/math/p5.Vector.js", "is_constructor": 1, "params": [{"name": "x", "type": "Number", "optional": 1}]},
    },
    "classitems": [
        {"file": "src\\core\\environment.js", "line": 12, "name": "frameCount", "itemtype": "property", "class": "p5", "type": "Number"},
        {"file": "src/math/p5.Vector.js", "line": 40, "class": "p5.Vector"},
        {"file": "src/math/p5.Vector.js", "line": 50, "name": "mag", "itemtype": "method", "class": "p5.Vector", "return": {"type": "Number"}},
    ],
}


def test_parse_yuidoc_json():
    schema = parse(json.dumps(DATA))
    assert schema.class_names == ["p5", "p5.Vector"]
    assert schema.classes["p5.Vector"].name == "p5.Vector"
    assert schema.classes["p5"].file == "src/core/main.js"
    assert schema.classes["p5.Vector"].params[0].optional is True
    assert [item.name for item in schema.items_for("p5.Vector")] == ["mag"]
    assert schema.items_for("p5.Vector")[0].return_.type == "Number"
    assert schema.classitems[0].file == "src/core/environment.js"


def test_parse_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(DATA), encoding="utf-8")
    assert parse_file(path).class_names == ["p5", "p5.Vector"]

    with pytest.raises(SchemaError, match="missing.json"):
        parse_file(tmp_path / "missing.json")


def test_parse_rejects_invalid_documents():
    with pytest.raises(SchemaError):
        parse("{not json")
    with pytest.raises(SchemaError):
        parse("[]")
    with pytest.raises(SchemaError):
        parse(json.dumps({"classes": {"p5": {"params": "nope"}}}))


def test_load_schema_from_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(DATA), encoding="utf-8")
    schema = asyncio.run(load_schema(path))
    assert "p5.Vector" in schema.classes

    with pytest.raises(SchemaError):
        asyncio.run(load_schema(tmp_path / "missing.json"))


def test_load_schema_from_url():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url == "https://example.com/reference/data.json"
        return httpx.Response(200, json=DATA)

    async def fetch():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await load_schema("https://example.com/reference/data.json", client=client)

    schema = asyncio.run(fetch())
    assert schema.items_for("p5")[0].name == "frameCount"


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"root_name": "lib", "aliases": ["lib"]}), encoding="utf-8")
    config = load_config(path)

    assert config.subclass_pattern.match("lib.Thing").group(1) == "Thing"
    assert config.type_map["P5"] == "lib"
    assert config.external_types == GeneratorConfig().external_types
    assert config.module_filename == "lib.d.ts"

    path.write_text(json.dumps({"aliases": "lib"}), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_cli(tmp_path):
    schema = tmp_path / "data.json"
    schema.write_text(json.dumps(DATA), encoding="utf-8")
    out = tmp_path / "types"

    result = CliRunner().invoke(app, [str(schema), str(tmp_path), str(out)])

    assert result.exit_code == 0
    assert "class Vector {" in (out / "p5.d.ts").read_text(encoding="utf-8")
    assert (out / "p5.global-mode.d.ts").exists()


def test_cli_fails_on_malformed_class(tmp_path):
    schema = tmp_path / "data.json"
    schema.write_text(json.dumps({"classes": {"Frob": {}}, "classitems": []}), encoding="utf-8")

    result = CliRunner().invoke(app, [str(schema), str(tmp_path), str(tmp_path / "types")])

    assert result.exit_code == 1
    assert not (tmp_path / "types").exists()
