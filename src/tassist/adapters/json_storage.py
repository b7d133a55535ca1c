"""JSON file storage adapter for the person list."""

import json
import logging
from pathlib import Path
from typing import Iterable

from tassist.core.exceptions import DataLoadingError, InvalidFieldError
from tassist.core.fields import Email, Github, Name, Phone, Progress, StudentId, Tag, TutorialClass
from tassist.core.model import persons_are_unique
from tassist.core.person import Person

logger = logging.getLogger(__name__)

MISSING_FIELD_MESSAGE_FORMAT = "{} field is missing!"
MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."
MESSAGE_INVALID_TAGS = "Tags field should be a list of tag names."


def person_to_dict(person: Person) -> dict:
    """Serialize a person to a JSON-compatible dict."""
    return {
        "name": person.name.value,
        "phone": person.phone.value,
        "email": person.email.value,
        "studentId": person.student_id.value,
        "github": person.github.value if person.github else None,
        "class": person.tutorial_class.value if person.tutorial_class else None,
        "progress": person.progress.value if person.progress is not None else None,
        "tags": sorted(t.value for t in person.tags),
    }


def person_from_dict(data: dict) -> Person:
    """
    Build a person from stored data.

    Raises DataLoadingError naming the missing field, or carrying the field's
    constraint message if a stored value is invalid.
    """
    if not isinstance(data, dict):
        raise DataLoadingError(f"Expected a person object, got {type(data).__name__}")

    required = [
        ("name", Name),
        ("phone", Phone),
        ("email", Email),
        ("studentId", StudentId),
    ]
    values = {}
    for key, field_type in required:
        raw = data.get(key)
        if raw is None:
            raise DataLoadingError(MISSING_FIELD_MESSAGE_FORMAT.format(field_type.__name__))
        values[key] = raw

    tags = data.get("tags", [])
    if not isinstance(tags, list):
        raise DataLoadingError(MESSAGE_INVALID_TAGS)

    try:
        progress = data.get("progress")
        return Person(
            name=Name(values["name"]),
            phone=Phone(values["phone"]),
            email=Email(values["email"]),
            student_id=StudentId(values["studentId"]),
            github=Github(data["github"]) if data.get("github") else None,
            tutorial_class=TutorialClass(data["class"]) if data.get("class") else None,
            progress=Progress(progress) if progress is not None else None,
            tags=frozenset(Tag(t) for t in tags),
        )
    except InvalidFieldError as e:
        raise DataLoadingError(str(e)) from e


class JsonPersonStore:
    """
    JSON file person storage.

    Implements PersonStore protocol. The whole list lives in one file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> list[Person] | None:
        """Load persons. Returns None if the file does not exist yet."""
        if not self.path.exists():
            logger.info(f"Data file {self.path} not found")
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise DataLoadingError(f"Could not read data file {self.path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("persons", []), list):
            raise DataLoadingError(f"Data file {self.path} is not in the expected format")

        persons = [person_from_dict(item) for item in data.get("persons", [])]
        if not persons_are_unique(persons):
            raise DataLoadingError(MESSAGE_DUPLICATE_PERSON)
        return persons

    def save(self, persons: Iterable[Person]) -> None:
        """Write/overwrite the stored person list."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"persons": [person_to_dict(p) for p in persons]}
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
