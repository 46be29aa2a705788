"""
Unit tests for the status code table.
"""

import threading

import pytest

from wshttp.http.status_codes import (
    FALLBACK_PHRASE,
    HTTPStatus,
    StatusCodeTable,
    UnknownStatusCode,
    http_status_codes,
)


class TestStatusCodeTable:
    """Tests for StatusCodeTable class."""

    def test_default_phrases(self, status_table: StatusCodeTable):
        """Test the seeded entries."""
        assert dict(status_table) == {
            200: "OK",
            400: "Bad Request",
            403: "Forbidden",
            404: "Not Found",
            426: "Upgrade Required",
        }

    def test_shared_table_has_defaults(self):
        """Test that the shared table is seeded too."""
        assert http_status_codes[426] == "Upgrade Required"

    def test_setitem_registers(self, status_table: StatusCodeTable):
        """Test registering a code with item assignment."""
        status_table[201] = "Created"

        assert status_table[201] == "Created"
        assert 201 in status_table
        assert len(status_table) == 6

    def test_register_chaining(self, status_table: StatusCodeTable):
        """Test method chaining for register()."""
        status_table.register(101, "Switching Protocols").register(503, "Service Unavailable")

        assert status_table.phrase(101) == "Switching Protocols"
        assert status_table.phrase(503) == "Service Unavailable"

    def test_register_overwrites(self, status_table: StatusCodeTable):
        """Test replacing a default phrase."""
        status_table[404] = "Nope"
        assert status_table[404] == "Nope"

    def test_extra_codes_in_constructor(self):
        """Test seeding extra codes at construction."""
        table = StatusCodeTable({101: "Switching Protocols"})

        assert table[101] == "Switching Protocols"
        assert table[200] == "OK"

    def test_tables_are_independent(self, status_table: StatusCodeTable):
        """Test that a private table does not touch the shared one."""
        status_table[299] = "Private"

        assert 299 not in http_status_codes

    def test_no_deletion(self, status_table: StatusCodeTable):
        """Test that entries cannot be removed."""
        with pytest.raises(TypeError):
            del status_table[200]

    def test_string_codes_read_and_write_alike(self, status_table: StatusCodeTable):
        """Test that keys are converted to int on lookup as on registration."""
        status_table["201"] = "Created"

        assert status_table["201"] == "Created"
        assert status_table[201] == "Created"
        assert "201" in status_table
        assert status_table.phrase("201", strict=True) == "Created"

    def test_non_numeric_key(self, status_table: StatusCodeTable):
        """Test that keys which are not codes behave as missing."""
        assert "abc" not in status_table
        assert status_table.get(None) is None
        with pytest.raises(UnknownStatusCode):
            status_table.phrase("abc", strict=True)

    def test_missing_lookup(self, status_table: StatusCodeTable):
        """Test mapping behavior for unknown codes."""
        assert status_table.get(599) is None
        with pytest.raises(KeyError):
            status_table[599]

    def test_phrase_fallback(self, status_table: StatusCodeTable, caplog):
        """Test the fallback phrase and its warning."""
        with caplog.at_level("WARNING", logger="wshttp.http.status_codes"):
            assert status_table.phrase(599) == FALLBACK_PHRASE

        assert "599" in caplog.text

    def test_phrase_strict(self, status_table: StatusCodeTable):
        """Test UnknownStatusCode in strict mode."""
        with pytest.raises(UnknownStatusCode) as exc_info:
            status_table.phrase(599, strict=True)

        assert exc_info.value.code == 599
        assert isinstance(exc_info.value, LookupError)

    def test_concurrent_registration(self, status_table: StatusCodeTable):
        """Test registering codes from several threads."""
        def register_range(start: int):
            for code in range(start, start + 50):
                status_table.register(code, f"Code {code}")

        threads = [threading.Thread(target=register_range, args=(s,)) for s in (500, 550, 600, 650)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(status_table) == 5 + 200
        assert status_table[649] == "Code 649"


class TestHTTPStatus:
    """Tests for HTTPStatus enum."""

    def test_status_phrases(self):
        """Test that all statuses have phrases."""
        assert HTTPStatus.OK.phrase == "OK"
        assert HTTPStatus.UPGRADE_REQUIRED.phrase == "Upgrade Required"

    def test_usable_as_int_key(self, status_table: StatusCodeTable):
        """Test that enum members index the table like plain ints."""
        assert HTTPStatus.NOT_FOUND == 404
        assert status_table[HTTPStatus.NOT_FOUND] == "Not Found"
