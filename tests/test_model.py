"""Tests for the person entity and the in-memory model."""

import pytest

from tassist.core.fields import Name, Phone, Progress, StudentId, Tag
from tassist.core.model import DuplicatePersonError, ModelManager, PersonNotFoundError, UniquePersonList
from tassist.core.person import format_person
from tassist.ports.model import PREDICATE_SHOW_ALL_PERSONS


class TestPerson:
    def test_same_person_by_student_id(self, alice, bob):
        renamed = alice.with_changes(name=Name("Someone Else"), phone=Phone("999"))
        assert alice.is_same_person(renamed)
        assert not alice.is_same_person(bob)
        assert not alice.is_same_person(None)

    def test_same_name_different_student_id_is_not_same(self, alice):
        other = alice.with_changes(student_id=StudentId("A9999999Z"))
        assert not alice.is_same_person(other)

    def test_equality_compares_all_fields(self, alice):
        assert alice == alice.with_changes()
        assert alice != alice.with_changes(progress=Progress(41))
        assert alice != alice.with_changes(tags=frozenset())

    def test_tags_are_frozen(self, bob):
        assert isinstance(bob.tags, frozenset)
        assert hash(bob) == hash(bob.with_changes())

    def test_format_person_full(self, alice):
        assert format_person(alice) == (
            "Alice Pauline; Phone: 94351253; Email: alice@example.com; Student ID: A0000001B; "
            "Github: https://github.com/alice; Class: T01; Progress: 40%; Tags: [friends]"
        )

    def test_format_person_omits_absent_optional_fields(self, bob):
        assert format_person(bob) == (
            "Bob Choo; Phone: 22222222; Email: bob@example.com; Student ID: A0000002C; "
            "Tags: [friends][owesMoney]"
        )


class TestUniquePersonList:
    def test_add_rejects_same_person(self, alice):
        persons = UniquePersonList([alice])
        with pytest.raises(DuplicatePersonError):
            persons.add(alice.with_changes(name=Name("Other")))

    def test_set_person_same_identity_replaces_in_place(self, alice, bob):
        persons = UniquePersonList([alice, bob])
        edited = alice.with_changes(phone=Phone("111"))
        persons.set_person(alice, edited)
        assert list(persons) == [edited, bob]

    def test_set_person_to_existing_identity_rejected(self, alice, bob):
        persons = UniquePersonList([alice, bob])
        with pytest.raises(DuplicatePersonError):
            persons.set_person(alice, alice.with_changes(student_id=bob.student_id))

    def test_set_person_missing_target(self, alice, bob):
        persons = UniquePersonList([alice])
        with pytest.raises(PersonNotFoundError):
            persons.set_person(bob, bob)

    def test_remove_missing(self, alice):
        with pytest.raises(PersonNotFoundError):
            UniquePersonList().remove(alice)

    def test_set_persons_rejects_duplicates(self, alice):
        with pytest.raises(DuplicatePersonError):
            UniquePersonList([alice, alice.with_changes(name=Name("Copy"))])


class TestModelManager:
    def test_filtered_list_defaults_to_all(self, model, alice, bob, carl):
        assert model.get_filtered_person_list() == [alice, bob, carl]

    def test_filter_keeps_backing_order(self, model, alice, carl):
        model.update_filtered_person_list(lambda p: p.name.value != "Bob Choo")
        assert model.get_filtered_person_list() == [alice, carl]

    def test_filtered_list_is_a_copy(self, model):
        model.get_filtered_person_list().clear()
        assert len(model.get_filtered_person_list()) == 3

    def test_add_resets_filter(self, model, carl):
        model.update_filtered_person_list(lambda p: False)
        new = carl.with_changes(student_id=StudentId("A1234567X"))
        model.add_person(new)
        assert model.get_filtered_person_list()[-1] == new
        assert len(model.get_filtered_person_list()) == 4

    def test_has_person(self, model, alice):
        assert model.has_person(alice.with_changes(tags={Tag("other")}))

    def test_delete_person(self, model, alice, bob, carl):
        model.delete_person(bob)
        assert model.persons == (alice, carl)

    def test_set_persons_empty(self, model):
        model.set_persons([])
        assert model.get_filtered_person_list() == []

    def test_show_all_predicate(self, alice):
        assert PREDICATE_SHOW_ALL_PERSONS(alice) is True

    def test_empty_model(self):
        assert ModelManager().get_filtered_person_list() == []
