"""Ports - interfaces/protocols for collaborators of the command pipeline."""

from .model import Model, PersonPredicate, PREDICATE_SHOW_ALL_PERSONS
from .person_store import PersonStore

__all__ = [
    "Model",
    "PersonPredicate",
    "PREDICATE_SHOW_ALL_PERSONS",
    "PersonStore",
]
