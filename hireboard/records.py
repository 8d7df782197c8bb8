"""Applicant (hiree) and employer (hirer) records and their flat-file storage."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

PathLike = Union[str, Path]

SKILLS = ("Driving", "Cooking", "Construction", "Cleaning", "Beautician")
CUSTOM_SKILL_CHOICE = len(SKILLS) + 1

ID_SPAN = 1111
ID_BASE = 9999


class RecordError(ValueError):
    """Raised when a stored record is malformed or cannot be written."""


def _check_word(value: str, field: str) -> str:
    if not value or any(ch.isspace() for ch in value):
        raise RecordError(f"{field} must be a single non-empty word: {value!r}")
    return value


def _to_int(value: str, field: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise RecordError(f"{field} is not a number: {value!r}") from None


@dataclass
class Hiree:
    """An applicant looking for work."""

    name: str
    age: int
    gender: str
    uid: int
    skill: str
    phone: int

    def to_line(self) -> str:
        """Return the record as one line of the applicants file."""
        for field in ("name", "gender", "skill"):
            _check_word(getattr(self, field), field)
        return f"{self.name} {self.age} {self.gender} {self.uid} {self.skill} {self.phone}\n"


@dataclass
class Hirer:
    """An employer account."""

    name: str
    age: int
    email: str
    password: str

    def to_line(self) -> str:
        """Return the record as one line of the employers file."""
        for field in ("name", "email", "password"):
            _check_word(getattr(self, field), field)
        return f"{self.name} {self.age} {self.email} {self.password}\n"


def _records(text: str, width: int) -> Iterator[list[str]]:
    # One record is read for every line break in the file.
    tokens = iter(text.split())
    for _ in range(text.count("\n")):
        fields = list(islice(tokens, width))
        if len(fields) < width:
            raise RecordError(f"incomplete record: expected {width} fields, got {len(fields)}")
        yield fields


def parse_hirees(text: str) -> list[Hiree]:
    """Parse the contents of an applicants file."""
    return [
        Hiree(
            name=name,
            age=_to_int(age, "age"),
            gender=gender,
            uid=_to_int(uid, "uid"),
            skill=skill,
            phone=_to_int(phone, "phone"),
        )
        for name, age, gender, uid, skill, phone in _records(text, 6)
    ]


def parse_hirers(text: str) -> list[Hirer]:
    """Parse the contents of an employers file."""
    return [
        Hirer(name=name, age=_to_int(age, "age"), email=email, password=secret)
        for name, age, email, secret in _records(text, 4)
    ]


def read_hirees(path: PathLike) -> list[Hiree]:
    """Read every applicant stored at ``path``."""
    return parse_hirees(Path(path).read_text())


def read_hirers(path: PathLike) -> list[Hirer]:
    """Read every employer stored at ``path``."""
    return parse_hirers(Path(path).read_text())


def append_hiree(path: PathLike, hiree: Hiree) -> None:
    """Append one applicant to the file at ``path``."""
    line = hiree.to_line()
    with open(path, "a") as handle:
        handle.write(line)


def append_hirer(path: PathLike, hirer: Hirer) -> None:
    """Append one employer to the file at ``path``."""
    line = hirer.to_line()
    with open(path, "a") as handle:
        handle.write(line)


def generate_id(rng: Optional[random.Random] = None) -> int:
    """Return a random applicant id between 9999 and 11109 inclusive."""
    source = rng if rng is not None else random
    return source.randrange(ID_SPAN) + ID_BASE


def skill_for_choice(choice: int, custom: Optional[str] = None) -> str:
    """Map a menu choice (1-6) to a skill name; choice 6 uses ``custom``."""
    if 1 <= choice <= len(SKILLS):
        return SKILLS[choice - 1]
    if choice == CUSTOM_SKILL_CHOICE:
        if custom is None:
            raise ValueError("a custom skill must be given for choice 6")
        return _check_word(custom, "skill")
    raise ValueError(f"Invalid choice: {choice}")


def filter_by_skill(hirees: Iterable[Hiree], skill: str) -> list[Hiree]:
    """Return the applicants whose skill is exactly ``skill``."""
    return [hiree for hiree in hirees if hiree.skill == skill]


def find_hiree(hirees: Iterable[Hiree], name: str, uid: int, phone: int) -> Optional[Hiree]:
    """Return the first applicant matching name, id and phone, or None."""
    return next(
        (h for h in hirees if h.name == name and h.uid == uid and h.phone == phone),
        None,
    )


def find_hirer(hirers: Iterable[Hirer], email: str, password: str) -> Optional[Hirer]:
    """Return the first employer matching email and password, or None."""
    return next((h for h in hirers if h.email == email and h.password == password), None)