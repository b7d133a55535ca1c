"""Tests for the shared logic layer."""

from unittest.mock import MagicMock

import pytest

from tassist.adapters.json_storage import JsonPersonStore
from tassist.config import Config
from tassist.core.exceptions import CommandException, DataLoadingError, ParseException
from tassist.core.model import ModelManager
from tassist.logic import LogicManager, format_person_list, get_store, load_model

ADD_AMY = "add n/Amy Bee p/11111111 e/amy@example.com s/A1111111A"


@pytest.fixture
def store(tmp_path):
    return JsonPersonStore(tmp_path / "addressbook.json")


class TestGetStore:
    def test_uses_configured_file(self, tmp_path):
        config = Config(data_file=str(tmp_path / "book.json"))
        assert get_store(config).path == tmp_path / "book.json"


class TestLoadModel:
    def test_missing_file_starts_empty(self, store):
        assert load_model(store).persons == ()

    def test_loads_saved_persons(self, store, alice, bob):
        store.save([alice, bob])
        assert load_model(store).persons == (alice, bob)

    def test_bad_data_starts_empty(self):
        store = MagicMock()
        store.load.side_effect = DataLoadingError("corrupt")
        assert load_model(store).persons == ()


class TestLogicManager:
    def test_executes_and_saves(self, store):
        logic = LogicManager(ModelManager(), store)
        result = logic.execute(ADD_AMY)

        assert result.feedback.startswith("New person added: Amy Bee")
        assert [p.name.value for p in store.load()] == ["Amy Bee"]

    def test_parse_error_does_not_save(self, model):
        store = MagicMock()
        logic = LogicManager(model, store)
        with pytest.raises(ParseException):
            logic.execute("delete zero")
        store.save.assert_not_called()

    def test_command_error_leaves_model_unchanged(self, model):
        before = model.persons
        logic = LogicManager(model)
        with pytest.raises(CommandException):
            logic.execute("delete 10")
        assert model.persons == before

    def test_save_failure_is_reported(self, model):
        store = MagicMock()
        store.save.side_effect = OSError("disk full")
        logic = LogicManager(model, store)
        with pytest.raises(CommandException, match="Could not save data due to the following error: disk full"):
            logic.execute("list")

    def test_filtered_list_follows_find(self, model, bob):
        logic = LogicManager(model)
        logic.execute("find bob")
        assert logic.get_filtered_person_list() == [bob]

    def test_works_without_store(self):
        logic = LogicManager(ModelManager())
        logic.execute(ADD_AMY)
        assert len(logic.get_filtered_person_list()) == 1


class TestFormatPersonList:
    def test_numbers_from_one(self, alice, bob):
        lines = format_person_list([alice, bob]).splitlines()
        assert lines[0].startswith("1. Alice Pauline; Phone: 94351253")
        assert lines[1].startswith("2. Bob Choo;")

    def test_empty(self):
        assert format_person_list([]) == ""
