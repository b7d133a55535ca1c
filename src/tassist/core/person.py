"""Person entity - pure domain logic, no I/O."""

from dataclasses import dataclass, field, replace

from .fields import Email, Github, Name, Phone, Progress, StudentId, Tag, TutorialClass


@dataclass(frozen=True)
class Person:
    """A student record. Equality compares every field."""

    name: Name
    phone: Phone
    email: Email
    student_id: StudentId
    github: Github | None = None
    tutorial_class: TutorialClass | None = None
    progress: Progress | None = None
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        # Accept any iterable of tags but always store a frozenset
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: "Person | None") -> bool:
        """
        Whether two records describe the same student.

        Student IDs are unique per student, so this is the duplicate-detection
        key; the other fields may legitimately differ.
        """
        if other is self:
            return True
        return other is not None and other.student_id == self.student_id

    def with_changes(self, **changes) -> "Person":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


def format_person(person: Person) -> str:
    """Format a person for display in command feedback."""
    parts = [
        str(person.name),
        f"Phone: {person.phone}",
        f"Email: {person.email}",
        f"Student ID: {person.student_id}",
    ]
    if person.github is not None:
        parts.append(f"Github: {person.github}")
    if person.tutorial_class is not None:
        parts.append(f"Class: {person.tutorial_class}")
    if person.progress is not None:
        parts.append(f"Progress: {person.progress}%")
    tags = "".join(f"[{t.value}]" for t in sorted(person.tags, key=lambda t: t.value))
    parts.append(f"Tags: {tags}")
    return "; ".join(parts)
