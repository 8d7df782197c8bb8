"""Scan the applicants file for a name, reporting how far the scan got."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import Optional, Sequence, Union

from hireboard.records import Hiree, RecordError

_WORD_PATTERN = re.compile(rb"\S+")


@dataclass
class SearchResult:
    """Records scanned up to and including a match, and the byte offset reached."""

    records: list[Hiree] = field(default_factory=list)
    found: bool = False
    position: int = 0

    @property
    def lines(self) -> int:
        return len(self.records)


def _hiree_from(fields: Sequence[str]) -> Hiree:
    name, age, gender, uid, skill, phone = fields
    try:
        return Hiree(name, int(age), gender, int(uid), skill, int(phone))
    except ValueError:
        raise RecordError(f"malformed record: {' '.join(fields)!r}") from None


def search_by_name(path: Union[str, Path], name: str) -> SearchResult:
    """Read applicants in order until one named ``name`` is found."""
    data = Path(path).read_bytes()
    words = ((m.group().decode(), m.end()) for m in _WORD_PATTERN.finditer(data))
    result = SearchResult()
    for _ in range(data.count(b"\n")):
        chunk = list(islice(words, 6))
        if len(chunk) < 6:
            raise RecordError("incomplete record")
        hiree = _hiree_from([text for text, _ in chunk])
        result.position = chunk[-1][1]
        result.records.append(hiree)
        if hiree.name == name:
            result.found = True
            break
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Search the applicants file by name.")
    parser.add_argument("name", nargs="?", help="name to search for")
    parser.add_argument("--file", default="hiree.txt", help="applicants file")
    args = parser.parse_args(argv)

    name = args.name
    if name is None:
        print("\nEnter name to search")
        name = input().strip()

    try:
        result = search_by_name(args.file, name)
    except OSError:
        print("\nFile did not open")
        return 1
    except RecordError as exc:
        print(f"\n{exc}")
        return 1

    for hiree in result.records:
        print(
            f"Name : {hiree.name}, Age : {hiree.age}, Gender : {hiree.gender}, "
            f"Contact Number : {hiree.phone}"
        )
    if result.found:
        print("\nTrue")
    print(f"Number of lines : {result.lines}")
    print(f"Number of Characters : {result.position}")
    return 0