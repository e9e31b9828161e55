"""Separately chained hash map and hash set with a caller-supplied hash function."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, MutableMapping, MutableSet
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

HashFn = Callable[[Any], int]

_INITIAL_BUCKETS = 10
_RESIZE_LOAD_FACTOR = 0.75
_WORD = 2**64


def hash_int(value: int) -> int:
    """Hash an integer as its unsigned 64-bit reinterpretation.

    Negative numbers become very large hashes.
    """
    return value % _WORD


@dataclass(slots=True)
class _Entry(Generic[K, V]):
    key: K
    value: V


class HashMap(MutableMapping[K, V], Generic[K, V]):
    """Mapping stored in buckets chosen by ``hash_fn(key) % bucket_count``.

    The bucket array starts with ten buckets and doubles whenever the number
    of entries per bucket exceeds 0.75. Iteration order follows the buckets.
    """

    def __init__(self, hash_fn: HashFn = hash_int) -> None:
        self._hash_fn = hash_fn
        self._buckets: list[list[_Entry[K, V]]] = [[] for _ in range(_INITIAL_BUCKETS)]
        self._count = 0
        self._version = 0

    def _bucket(self, key: K) -> list[_Entry[K, V]]:
        return self._buckets[self._hash_fn(key) % len(self._buckets)]

    @staticmethod
    def _find(bucket: list[_Entry[K, V]], key: K) -> _Entry[K, V] | None:
        return next((entry for entry in bucket if entry.key == key), None)

    def _insert(self, bucket: list[_Entry[K, V]], key: K, value: V) -> None:
        bucket.append(_Entry(key, value))
        self._count += 1
        self._version += 1
        if self._count / len(self._buckets) > _RESIZE_LOAD_FACTOR:
            self.ensure_capacity(len(self._buckets) * 2)

    def __getitem__(self, key: K) -> V:
        entry = self._find(self._bucket(key), key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: K, value: V) -> None:
        bucket = self._bucket(key)
        entry = self._find(bucket, key)
        if entry is None:
            self._insert(bucket, key, value)
        else:
            entry.value = value

    def __delitem__(self, key: K) -> None:
        bucket = self._bucket(key)
        for index, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[index]
                self._count -= 1
                self._version += 1
                return
        raise KeyError(key)

    def __iter__(self) -> Iterator[K]:
        version = self._version
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key
                if self._version != version:
                    raise RuntimeError("hash map changed size during iteration")

    def __len__(self) -> int:
        return self._count

    def try_add(self, key: K, value: V) -> bool:
        """Add ``key`` with ``value`` unless it is already present; report whether it was added."""
        bucket = self._bucket(key)
        if self._find(bucket, key) is not None:
            return False
        self._insert(bucket, key, value)
        return True

    def get_or_add_default(self, key: K, default: V) -> V:
        """Return the value for ``key``, first storing ``default`` if the key is missing."""
        bucket = self._bucket(key)
        entry = self._find(bucket, key)
        if entry is not None:
            return entry.value
        self._insert(bucket, key, default)
        return default

    def ensure_capacity(self, capacity: int) -> None:
        """Double the bucket array until it holds at least ``capacity`` buckets."""
        new_len = len(self._buckets)
        while new_len != 0 and new_len < capacity:
            new_len *= 2
        if new_len <= len(self._buckets):
            return

        new_buckets: list[list[_Entry[K, V]]] = [[] for _ in range(new_len)]
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[self._hash_fn(entry.key) % new_len].append(entry)
        self._buckets = new_buckets
        self._version += 1

    def bucket_count(self) -> int:
        """Current number of buckets."""
        return len(self._buckets)

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{items}}})"


class HashSet(MutableSet[K], Generic[K]):
    """Set of values kept as the keys of a :class:`HashMap`."""

    def __init__(self, hash_fn: HashFn = hash_int) -> None:
        self._map: HashMap[K, bool] = HashMap(hash_fn)

    @classmethod
    def _from_iterable(cls, iterable: Iterable[K]) -> HashSet[K]:
        result: HashSet[K] = cls()
        for value in iterable:
            result.add(value)
        return result

    def __contains__(self, value: object) -> bool:
        return value in self._map

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def add(self, value: K) -> None:
        self._map.try_add(value, True)

    def discard(self, value: K) -> None:
        self.try_remove(value)

    def try_add(self, value: K) -> bool:
        """Add ``value``; report whether it was not already present."""
        return self._map.try_add(value, True)

    def try_remove(self, value: K) -> bool:
        """Remove ``value``; report whether it was present."""
        try:
            del self._map[value]
        except KeyError:
            return False
        return True

    def ensure_capacity(self, capacity: int) -> None:
        """Grow the underlying bucket array to at least ``capacity`` buckets."""
        self._map.ensure_capacity(capacity)

    def bucket_count(self) -> int:
        """Current number of buckets."""
        return self._map.bucket_count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({{{', '.join(repr(value) for value in self)}}})"


__all__: list[str] = ["HashMap", "HashSet", "hash_int", "Hashable"]