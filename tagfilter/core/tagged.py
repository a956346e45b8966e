"""
Tagged values and tagged value sets.

A TaggedValue pairs an opaque payload with a list of string tags. A
TaggedValueSet is an ordered, immutable collection of them that supports
"any-of" tag filtering:

    >>> values = TaggedValueSet([
    ...     TaggedValue(1, "one"),
    ...     TaggedValue(3, "three", "third"),
    ...     TaggedValue(23, "twenty-three", "third"),
    ... ])
    >>> values.select("one", "third").remove("twenty-three").values()
    [1, 3]

Every operation returns a new set. Entries are immutable, so derived sets
share them with the set they came from.
"""

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, List, Set, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, init=False)
class TaggedValue(Generic[T]):
    """A value with the tags it was constructed with, stored verbatim."""
    value: T
    tags: Tuple[str, ...]

    def __init__(self, value: T, *tags: str):
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "tags", tuple(tags))

    def has_any(self, tags: Set[str]) -> bool:
        """Check whether any of this value's tags is in ``tags``."""
        return any(tag in tags for tag in self.tags)

    def __repr__(self) -> str:
        return f"TaggedValue({self.value!r}, tags={list(self.tags)!r})"


class TaggedValueSet(Generic[T]):
    """
    Ordered collection of TaggedValue entries.

    Insertion order is kept and is the order of values() and iteration.
    Sets are never modified after construction: select(), remove() and
    join() build a new set.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[TaggedValue[T]] = ()):
        self._entries: Tuple[TaggedValue[T], ...] = tuple(entries)

    def select(self, *tags: str) -> "TaggedValueSet[T]":
        """
        Keep the entries that carry at least one of ``tags``.

        Selecting with no tags matches nothing and returns an empty set.
        """
        if not tags:
            return TaggedValueSet()
        wanted = set(tags)
        return TaggedValueSet(e for e in self._entries if e.has_any(wanted))

    def remove(self, *tags: str) -> "TaggedValueSet[T]":
        """
        Drop the entries that carry at least one of ``tags``.

        Removing with no tags removes nothing.
        """
        if not tags:
            return TaggedValueSet(self._entries)
        unwanted = set(tags)
        return TaggedValueSet(e for e in self._entries if not e.has_any(unwanted))

    def join(self, *others: TaggedValue[T]) -> "TaggedValueSet[T]":
        """
        Append ``others`` after this set's entries, skipping duplicates.

        An entry is a duplicate when its value equals the value of an entry
        already in the result; the entry already present keeps its tags.
        Values only need to support ``==``, so this is a linear scan.
        """
        joined: List[TaggedValue[T]] = list(self._entries)
        seen: List[T] = [e.value for e in joined]
        for entry in others:
            if entry.value in seen:
                continue
            joined.append(entry)
            seen.append(entry.value)
        return TaggedValueSet(joined)

    def values(self) -> List[T]:
        """Return the payloads in set order."""
        return [e.value for e in self._entries]

    def tags(self) -> List[str]:
        """Return every tag in the set, deduplicated, in first-seen order."""
        seen: Set[str] = set()
        ordered: List[str] = []
        for entry in self._entries:
            for tag in entry.tags:
                if tag not in seen:
                    seen.add(tag)
                    ordered.append(tag)
        return ordered

    def __iter__(self) -> Iterator[TaggedValue[T]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __getitem__(self, index: Union[int, slice]) -> Union[TaggedValue[T], "TaggedValueSet[T]"]:
        """Return one entry, or a new set for a slice."""
        if isinstance(index, slice):
            return TaggedValueSet(self._entries[index])
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaggedValueSet):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"TaggedValueSet({list(self._entries)!r})"
