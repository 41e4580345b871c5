from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

from fastconf import DeserializationError, SerializationError, Style
from fastconf.backends import available_backends, backend_for_extension, get_backend


@dataclass
class Window:
    width: int = 1280
    height: int = 720
    fullscreen: bool = False


@dataclass
class Profile:
    name: str = "player"
    volume: float = 0.8
    tags: List[str] = field(default_factory=lambda: ["a", "b"])
    window: Window = field(default_factory=Window)
    bindings: Dict[str, str] = field(default_factory=lambda: {"jump": "SPACE", "fire": "CTRL"})


@dataclass
class NullableProfile:
    name: str = "player"
    nickname: Optional[str] = None


STYLES = [
    Style(),
    Style.compact(),
    Style(indent=4),
    Style(indent=1, indent_char="\t"),
    Style(sort_keys=True),
    Style(newline="\r\n"),
    Style(pretty=False, newline="\r\n", sort_keys=True),
]


@pytest.mark.parametrize("style", STYLES, ids=repr)
def test_round_trip_for_every_style(backend, style):
    record = Profile(name="ünïcode", volume=0.25, tags=["x"], window=Window(800, 600, True))
    payload = backend.serialize(record, style)
    assert isinstance(payload, bytes)
    assert backend.deserialize(payload, Profile) == record


def test_round_trip_nested_empty_containers(backend):
    record = Profile(tags=[], bindings={})
    assert backend.deserialize(backend.serialize(record), Profile) == record


def test_extension_is_canonical_suffix(backend):
    assert backend.extension == backend.extensions[0]
    assert backend_for_extension(backend.extension) is backend


def test_backends_are_shared_singletons():
    assert get_backend("json") is get_backend("json")
    assert available_backends()["json"] is get_backend("json")


def test_json_is_always_available():
    assert "json" in available_backends()


def test_json_pretty_and_compact_output():
    backend = get_backend("json")
    pretty = backend.serialize({"b": 1, "a": [1, 2]}, Style(indent=4, sort_keys=True), dict).decode()
    assert pretty == '{\n    "a": [\n        1,\n        2\n    ],\n    "b": 1\n}\n'
    compact = backend.serialize({"b": 1, "a": [1, 2]}, Style.compact(), dict).decode()
    assert compact == '{"b":1,"a":[1,2]}'


def test_newline_style_is_applied():
    payload = get_backend("json").serialize(Window(), Style(newline="\r\n"))
    assert b"\r\n" in payload
    assert b"\n" not in payload.replace(b"\r\n", b"")


def test_json_parse_error_keeps_position():
    with pytest.raises(DeserializationError) as exc:
        get_backend("json").deserialize(b'{\n  "width": 1,\n  "height": \n}', Window)
    err = exc.value
    assert err.format == "json"
    assert err.lineno == 4
    assert err.colno == 1
    assert "line 4" in str(err)


def test_shape_mismatch_is_deserialization_error():
    backend = get_backend("json")
    with pytest.raises(DeserializationError) as exc:
        backend.deserialize(json.dumps({"width": "wide", "height": 2}).encode(), Window)
    assert "width" in str(exc.value)

    @dataclass
    class Required:
        token: str

    with pytest.raises(DeserializationError):
        backend.deserialize(b"{}", Required)


def test_non_utf8_payload_is_deserialization_error():
    with pytest.raises(DeserializationError):
        get_backend("json").deserialize(b"\xff\xfe\x00garbage", Window)


def test_unencodable_record_is_serialization_error():
    class Opaque:
        pass

    with pytest.raises(SerializationError):
        get_backend("json").serialize({"x": Opaque()}, record_type=dict)


def test_nullable_fields_round_trip_where_supported(backend):
    if backend.name == "toml":
        pytest.skip("TOML has no null value")
    record = NullableProfile(nickname=None)
    assert backend.deserialize(backend.serialize(record), NullableProfile) == record


# TOML


def test_toml_rejects_null():
    pytest.importorskip("tomli_w")
    with pytest.raises(SerializationError) as exc:
        get_backend("toml").serialize(NullableProfile())
    assert exc.value.format == "toml"


def test_toml_rejects_non_table_root():
    pytest.importorskip("tomli_w")
    with pytest.raises(SerializationError):
        get_backend("toml").serialize([1, 2, 3], record_type=list)


def test_toml_ignores_indentation_options():
    pytest.importorskip("tomli_w")
    backend = get_backend("toml")
    assert backend.supports_style is False
    record = Profile()
    assert backend.serialize(record, Style(indent=8, indent_char="\t")) == backend.serialize(record, Style())
    assert backend.serialize(record, Style.compact()) == backend.serialize(record, Style())


def test_toml_parse_error_reports_line():
    pytest.importorskip("tomli_w")
    with pytest.raises(DeserializationError) as exc:
        get_backend("toml").deserialize(b'width = 1\nheight = = 2\n', Window)
    assert exc.value.format == "toml"
    assert exc.value.lineno == 2


# YAML


def test_yaml_accepts_yml_alias():
    pytest.importorskip("yaml")
    assert backend_for_extension("yml") is get_backend("yaml")


def test_yaml_compact_is_flow_style():
    pytest.importorskip("yaml")
    text = get_backend("yaml").serialize(Window(), Style.compact()).decode()
    assert text.startswith("{")
    assert text.count("\n") == 1


def test_yaml_parse_error_reports_position():
    pytest.importorskip("yaml")
    with pytest.raises(DeserializationError) as exc:
        get_backend("yaml").deserialize(b"width: 1\nheight: [1, 2\n", Window)
    assert exc.value.format == "yaml"
    assert exc.value.lineno is not None


def test_yaml_empty_document_is_mismatch():
    pytest.importorskip("yaml")

    @dataclass
    class Required:
        token: str

    with pytest.raises(DeserializationError):
        get_backend("yaml").deserialize(b"", Required)


# JSON5


def test_json5_reads_comments_and_trailing_commas():
    pytest.importorskip("json5")
    text = b"""// window settings
    {
        width: 640,
        height: 480, /* inline */
        fullscreen: true,
    }
    """
    assert get_backend("json5").deserialize(text, Window) == Window(640, 480, True)


def test_json5_parse_error():
    pytest.importorskip("json5")
    with pytest.raises(DeserializationError) as exc:
        get_backend("json5").deserialize(b"{width: }", Window)
    assert exc.value.format == "json5"


def test_with_options_derives_a_new_style():
    base = Style(indent=4)
    tabbed = base.with_options(indent=1, indent_char="\t")
    assert base.indent == 4 and base.indent_char == " "
    assert tabbed == Style(indent=1, indent_char="\t")
    text = get_backend("json").serialize({"a": 1}, tabbed, dict).decode()
    assert text == '{\n\t"a": 1\n}\n'
    with pytest.raises(ValueError):
        base.with_options(newline="\r")


def test_unsupported_record_type_is_wrapped():
    class Handle:
        pass

    backend = get_backend("json")
    with pytest.raises(SerializationError):
        backend.serialize(Handle())
    with pytest.raises(DeserializationError):
        backend.deserialize(b"{}", Handle)
