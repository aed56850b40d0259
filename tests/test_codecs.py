from __future__ import annotations

import io
import json
from collections import OrderedDict

import pytest
import yaml

from persistable import JsonAdapter, PathLocation, YamlAdapter


def test_json_write_is_compact(store):
    JsonAdapter().write(store, {"test": "value", "n": [1, 2]})
    assert store.getvalue() == '{"test":"value","n":[1,2]}'


def test_json_keeps_non_ascii_text(store):
    JsonAdapter().write(store, {"city": "Zürich"})
    assert store.getvalue() == '{"city":"Zürich"}'


def test_json_load_accepts_str_bytes_and_streams():
    adapter = JsonAdapter()
    assert adapter.load('{"a":1}') == {"a": 1}
    assert adapter.load(b'{"a":1}') == {"a": 1}
    assert adapter.load(io.BytesIO(b'{"a":1}')) == {"a": 1}


def test_json_load_malformed_propagates():
    with pytest.raises(json.JSONDecodeError):
        JsonAdapter().load(io.StringIO("{not json"))


def test_yaml_write_is_block_style(store):
    YamlAdapter().write(store, {"test": "value"})
    assert store.getvalue() == "---\ntest: value\n"


def test_yaml_write_keeps_insertion_order(store):
    YamlAdapter().write(store, {"b": 1, "a": 2})
    assert store.getvalue() == "---\nb: 1\na: 2\n"


def test_yaml_write_emits_plain_maps_for_subclasses(store):
    class Host(dict):
        pass

    YamlAdapter().write(store, Host(outer=OrderedDict(inner="x")))
    text = store.getvalue()
    assert "!!" not in text
    assert yaml.safe_load(text) == {"outer": {"inner": "x"}}


def test_yaml_load_malformed_propagates():
    with pytest.raises(yaml.YAMLError):
        YamlAdapter().load(io.StringIO("a: [unclosed"))


def test_codecs_read_path_locations(tmp_path):
    path = tmp_path / "data.yml"
    path.write_text("---\ntest: value\n", encoding="utf-8")
    assert YamlAdapter().load(PathLocation(path)) == {"test": "value"}
    assert YamlAdapter().load(path) == {"test": "value"}


def test_write_returns_the_target(store):
    assert JsonAdapter().write(store, {}) is store
    assert YamlAdapter().write(store, {}) is store


def test_yaml_empty_document_loads_as_empty_mapping():
    assert YamlAdapter().load(io.StringIO("")) == {}
    assert YamlAdapter().load("---\n") == {}
