"""Tests for TableFiler statement generation against a recording driver."""

from __future__ import annotations

import pytest

from dbfiler.database import ConfigurationError, DriverError
from dbfiler.filer import Filer, InsertStyle, Skipped, TableFiler

from conftest import RecordingDriver


@pytest.mark.unit
class TestConstruction:
    """Tests for TableFiler construction."""

    def test_missing_driver_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            TableFiler(None, table="users", where={"id": 7})  # type: ignore[arg-type]

    def test_table_and_predicate_are_optional(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver)
        assert filer.table is None
        assert filer.where is None

    def test_satisfies_filer_protocol(self, driver: RecordingDriver) -> None:
        assert isinstance(TableFiler(driver, table="users"), Filer)

    def test_construction_issues_no_driver_calls(self, driver: RecordingDriver) -> None:
        TableFiler(driver, table="users", where={"id": 7})
        assert driver.calls == []


@pytest.mark.unit
class TestLoad:
    """Tests for TableFiler.load."""

    def test_select_statement(self) -> None:
        driver = RecordingDriver(rows=[{"name": "Ana", "age": 30}])
        filer = TableFiler(driver, table="users", where={"id": 7})

        row = filer.load("name", "age")

        assert driver.executed == ["SELECT name,age FROM users WHERE id=7"]
        assert row == {"name": "Ana", "age": 30}

    def test_where_contains_every_predicate_key(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users", where={"id": 7, "tenant": "acme"})
        filer.load("name")
        assert driver.executed == ["SELECT name FROM users WHERE id=7 AND tenant='acme'"]

    def test_no_rows_returns_empty_dict(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users", where={"id": 7})
        row = filer.load("name")
        assert row == {}
        assert not isinstance(row, Skipped)

    def test_empty_field_list_is_passed_through(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users", where={"id": 7})
        filer.load()
        assert driver.executed == ["SELECT  FROM users WHERE id=7"]

    @pytest.mark.parametrize("where", [None, {}])
    def test_without_predicate_is_skipped(self, driver: RecordingDriver, where) -> None:
        filer = TableFiler(driver, table="users", where=where)
        row = filer.load("name")
        assert isinstance(row, Skipped)
        assert row == {}
        assert driver.calls == []

    def test_without_table_is_skipped(self, driver: RecordingDriver) -> None:
        row = TableFiler(driver, where={"id": 7}).load("name")
        assert isinstance(row, Skipped)
        assert row.reason == "no table configured"
        assert driver.calls == []

    def test_predicate_is_recompiled_on_every_call(self, driver: RecordingDriver) -> None:
        where = {"id": 7}
        filer = TableFiler(driver, table="users", where=where)
        filer.load("name")
        where["id"] = 8
        filer.load("name")
        filer.where = {"email": "b@example.com"}
        filer.load("name")
        assert driver.executed == [
            "SELECT name FROM users WHERE id=7",
            "SELECT name FROM users WHERE id=8",
            "SELECT name FROM users WHERE email='b@example.com'",
        ]


@pytest.mark.unit
class TestStore:
    """Tests for TableFiler.store."""

    def test_update_statement(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users", where={"id": 7})
        assert filer.store({"name": "a", "age": 31}) is True
        assert driver.executed == ["UPDATE users SET name='a',age=31 WHERE id=7"]

    def test_values_are_quoted(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users", where={"id": 7})
        filer.store({"name": "it's"})
        assert driver.executed == ["UPDATE users SET name='it''s' WHERE id=7"]

    @pytest.mark.parametrize("where", [None, {}])
    def test_without_predicate_is_skipped(self, driver: RecordingDriver, where) -> None:
        result = TableFiler(driver, table="users", where=where).store({"name": "a"})
        assert isinstance(result, Skipped)
        assert not result
        assert driver.calls == []

    def test_without_table_is_skipped(self, driver: RecordingDriver) -> None:
        result = TableFiler(driver, where={"id": 7}).store({"name": "a"})
        assert not result
        assert driver.calls == []

    def test_empty_values_is_skipped(self, driver: RecordingDriver) -> None:
        result = TableFiler(driver, table="users", where={"id": 7}).store({})
        assert isinstance(result, Skipped)
        assert driver.calls == []


@pytest.mark.unit
class TestInsert:
    """Tests for TableFiler.insert."""

    def test_values_form_by_default(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users")
        handle = filer.insert({"name": "b", "age": 5})
        assert driver.executed == ["INSERT INTO users (name,age) VALUES ('b',5)"]
        assert handle.lastrowid == 42

    def test_does_not_need_predicate(self, driver: RecordingDriver) -> None:
        handle = TableFiler(driver, table="users").insert({"name": "b"})
        assert not isinstance(handle, Skipped)
        assert len(driver.executed) == 1

    def test_set_form(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users", insert_style=InsertStyle.SET)
        filer.insert({"name": "b", "age": 5})
        assert driver.executed == ["INSERT INTO users SET name='b',age=5"]

    def test_empty_values_use_default_values(self, driver: RecordingDriver) -> None:
        TableFiler(driver, table="users").insert({})
        assert driver.executed == ["INSERT INTO users DEFAULT VALUES"]

    def test_predicate_is_ignored(self, driver: RecordingDriver) -> None:
        TableFiler(driver, table="users", where={"id": 7}).insert({"name": "b"})
        assert driver.executed == ["INSERT INTO users (name) VALUES ('b')"]

    def test_without_table_is_skipped(self, driver: RecordingDriver) -> None:
        assert isinstance(TableFiler(driver).insert({"name": "b"}), Skipped)
        assert driver.calls == []


@pytest.mark.unit
class TestDelete:
    """Tests for TableFiler.delete."""

    def test_delete_statement(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users", where={"id": 7})
        assert filer.delete() is True
        assert driver.executed == ["DELETE FROM users WHERE id=7"]
        assert driver.quoted == [7]

    @pytest.mark.parametrize("where", [None, {}])
    def test_without_predicate_is_skipped(self, driver: RecordingDriver, where) -> None:
        result = TableFiler(driver, table="users", where=where).delete()
        assert isinstance(result, Skipped)
        assert result.reason == "no predicate configured"
        assert driver.calls == []


@pytest.mark.unit
class TestTransactions:
    """Tests for the transaction pass-throughs."""

    @pytest.mark.parametrize("method", ["begin", "commit", "rollback"])
    def test_pass_through_called_once(self, driver: RecordingDriver, method: str) -> None:
        filer = TableFiler(driver, table="users")
        assert getattr(filer, method)() is True
        assert driver.calls == [method]

    def test_transaction_commits_on_success(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users", where={"id": 7})
        with filer.transaction() as tx:
            tx.delete()
        assert driver.calls == ["begin", "quote", "execute", "commit"]

    def test_transaction_rolls_back_and_reraises(self, driver: RecordingDriver) -> None:
        filer = TableFiler(driver, table="users")
        with pytest.raises(RuntimeError, match="boom"):
            with filer.transaction():
                raise RuntimeError("boom")
        assert driver.calls == ["begin", "rollback"]


@pytest.mark.unit
def test_driver_errors_propagate_unchanged(driver: RecordingDriver) -> None:
    error = DriverError("no such table: users")

    def failing_execute(sql: str):
        raise error

    driver.execute = failing_execute  # type: ignore[method-assign]
    filer = TableFiler(driver, table="users", where={"id": 7})
    with pytest.raises(DriverError) as excinfo:
        filer.delete()
    assert excinfo.value is error
