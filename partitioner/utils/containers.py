from collections.abc import Iterable, Mapping
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def flatten_partitions(groups: Iterable[Iterable[T]]) -> list[T]:
	return [
		element
		for group in groups
		for element in group
	]


def merge_partitions(groups: Iterable[Mapping[K, V]]) -> dict[K, V]:
	merged: dict[K, V] = {}
	for index, group in enumerate(groups):
		for key, value in group.items():
			if key in merged:
				raise ValueError(f"Key {key!r} of group {index} already present in an earlier group")
			merged[key] = value
	return merged
