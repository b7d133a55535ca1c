"""Shared fixtures: a few typical students and a populated model."""

import pytest

from tassist.core.fields import Email, Github, Name, Phone, Progress, StudentId, Tag, TutorialClass
from tassist.core.model import ModelManager
from tassist.core.person import Person


@pytest.fixture
def alice():
    return Person(
        name=Name("Alice Pauline"),
        phone=Phone("94351253"),
        email=Email("alice@example.com"),
        student_id=StudentId("A0000001B"),
        github=Github("https://github.com/alice"),
        tutorial_class=TutorialClass("T01"),
        progress=Progress(40),
        tags={Tag("friends")},
    )


@pytest.fixture
def bob():
    return Person(
        name=Name("Bob Choo"),
        phone=Phone("22222222"),
        email=Email("bob@example.com"),
        student_id=StudentId("A0000002C"),
        tags={Tag("owesMoney"), Tag("friends")},
    )


@pytest.fixture
def carl():
    return Person(
        name=Name("Carl Kurz"),
        phone=Phone("95352563"),
        email=Email("heinz@example.com"),
        student_id=StudentId("A0000003D"),
    )


@pytest.fixture
def model(alice, bob, carl):
    return ModelManager([alice, bob, carl])
