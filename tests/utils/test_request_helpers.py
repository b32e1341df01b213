import pytest
from httpx import URL

from httpforge import Field, FileReadError, InvalidHostError, InvalidJSONFragment
from httpforge._utils import (
    dump_json,
    merge_query,
    override_authority,
    parse_json_fragment,
    read_file_field,
    resolve_field_text,
    resolve_field_value,
)


class TestFiles:
    def test_read_exact_bytes(self, write_file):
        content = b"\x00\xffbinary\r\n"
        file_name = write_file(content)

        assert read_file_field(Field(name="f", value=file_name, is_file=True)) == content

    def test_literal_value_untouched(self):
        assert resolve_field_value(Field(name="f", value="/etc/passwd")) == "/etc/passwd"

    def test_text_replaces_invalid_utf8(self, write_file):
        file_name = write_file(b"ok \xff")

        text = resolve_field_text(Field(name="f", value=file_name, is_file=True))

        assert text == "ok �"

    def test_directory_is_read_error(self, tmp_path):
        with pytest.raises(FileReadError) as exc_info:
            read_file_field(Field(name="f", value=str(tmp_path), is_file=True))

        assert exc_info.value.path == str(tmp_path)


class TestJson:
    @pytest.mark.parametrize(
        "fragment, expected",
        [
            ("true", True),
            ("null", None),
            ("42", 42),
            ("1.5", 1.5),
            ('"text"', "text"),
            ('[1, null, "hello"]', [1, None, "hello"]),
            ('{"a": {"b": false}}', {"a": {"b": False}}),
        ],
    )
    def test_parse_fragment(self, fragment, expected):
        assert parse_json_fragment(Field(name="x", value=fragment)) == expected

    @pytest.mark.parametrize(
        "fragment",
        [
            "{not json",
            "",
            "tru",
            "[1,",
            "NaN",
            "Infinity",
            "-Infinity",
            "1e400",
            "[1, NaN]",
            "{\"a\": [1e400]}",
        ],
    )
    def test_invalid_fragment(self, fragment):
        with pytest.raises(InvalidJSONFragment) as exc_info:
            parse_json_fragment(Field(name="x", value=fragment))

        assert exc_info.value.field_name == "x"

    def test_dump_is_compact(self):
        assert dump_json({"a": "1", "b": True}) == b'{"a":"1","b":true}'


class TestUrl:
    def test_merge_query_encodes_space(self):
        url = merge_query(URL("https://localhost:8080/foo"), [Field(name="q", value="hello world")])

        assert str(url) == "https://localhost:8080/foo?q=hello+world"

    def test_merge_query_keeps_duplicates(self):
        url = merge_query(
            URL("http://localhost/?a=1"),
            [Field(name="a", value="1"), Field(name="a", value="2")],
        )

        assert url.query == b"a=1&a=1&a=2"

    def test_merge_query_file_parameter(self, write_file):
        file_name = write_file("x y")

        url = merge_query(
            URL("http://localhost/"), [Field(name="v", value=file_name, is_file=True)]
        )

        assert url.query == b"v=x+y"

    def test_override_authority(self):
        url = override_authority(URL("https://localhost:8080/foo?q=1"), "example.com:9000")

        assert str(url) == "https://example.com:9000/foo?q=1"

    def test_override_authority_without_port(self):
        url = override_authority(URL("http://localhost:8080/foo"), "example.com")

        assert str(url) == "http://example.com/foo"

    def test_override_authority_strips_whitespace(self):
        url = override_authority(URL("https://localhost/foo"), "example.com:8080\n")

        assert str(url) == "https://example.com:8080/foo"

    def test_override_authority_idna(self):
        url = override_authority(URL("https://localhost/foo"), "bücher.de")

        assert url.raw_host == b"xn--bcher-kva.de"
        assert url.host == "bücher.de"

    @pytest.mark.parametrize("host", ["example.com:abc", "", "example.com/path"])
    def test_override_authority_invalid(self, host):
        with pytest.raises(InvalidHostError) as exc_info:
            override_authority(URL("https://localhost/foo"), host)

        assert exc_info.value.host == host
