import logging
from collections.abc import Iterable, Mapping
from logging import Logger
from operator import itemgetter
from typing import Any, Callable, NoReturn, TypeVar

from partitioner.logger import get_logger

logger: Logger = get_logger(__name__)

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')
ItemType = TypeVar('ItemType')

Predicate = Callable[[Any], bool]


class PartitionException(Exception):
	pass


class PartitionPreconditionException(PartitionException, TypeError):
	@classmethod
	def for_missing_source(cls) -> 'PartitionPreconditionException':
		return cls("Can't partition a missing source: got None")

	@classmethod
	def for_non_mapping_source(cls, source: Any) -> 'PartitionPreconditionException':
		return cls(f"Can't partition by key or value: {type(source).__name__} is not a Mapping")

	@classmethod
	def for_non_iterable_source(cls, source: Any) -> 'PartitionPreconditionException':
		return cls(f"Can't partition elements: {type(source).__name__} is not iterable")

	@classmethod
	def for_missing_predicates(cls) -> 'PartitionPreconditionException':
		return cls("Can't partition without a predicate collection: got None")

	@classmethod
	def for_bare_predicate(cls, predicate: Callable) -> 'PartitionPreconditionException':
		return cls(f"Expected a collection of predicates, got a single callable {predicate!r}")

	@classmethod
	def for_non_iterable_predicates(cls, predicates: Any) -> 'PartitionPreconditionException':
		return cls(f"Expected a collection of predicates, got {type(predicates).__name__}")

	@classmethod
	def for_invalid_predicate(cls, index: int, predicate: Any) -> 'PartitionPreconditionException':
		return cls(f"Predicate at index {index} is not callable: {predicate!r}")


def _fail(exception: PartitionPreconditionException) -> NoReturn:
	logger.error(str(exception))
	raise exception


def _validate_predicates(predicates: Iterable[Predicate]) -> tuple[Predicate, ...]:
	if predicates is None:
		_fail(PartitionPreconditionException.for_missing_predicates())
	if callable(predicates):
		_fail(PartitionPreconditionException.for_bare_predicate(predicates))
	if not isinstance(predicates, Iterable):
		_fail(PartitionPreconditionException.for_non_iterable_predicates(predicates))

	validated: tuple[Predicate, ...] = tuple(predicates)
	for index, predicate in enumerate(validated):
		if not callable(predicate):
			_fail(PartitionPreconditionException.for_invalid_predicate(index, predicate))
	return validated


def _validate_mapping(source: Mapping) -> None:
	if source is None:
		_fail(PartitionPreconditionException.for_missing_source())
	if not isinstance(source, Mapping):
		_fail(PartitionPreconditionException.for_non_mapping_source(source))


def _validate_iterable(source: Iterable) -> None:
	if source is None:
		_fail(PartitionPreconditionException.for_missing_source())
	if not isinstance(source, Iterable):
		_fail(PartitionPreconditionException.for_non_iterable_source(source))


def _classify(
		items: Iterable[ItemType],
		predicates: tuple[Predicate, ...],
		extractor: Callable[[ItemType], Any],
		keep_empty_remainder: bool = False
) -> list[list[ItemType]]:
	"""
	Put every item in the group of the first predicate that accepts ``extractor(item)``.

	Groups come back in predicate order, followed by the unmatched items. The unmatched
	group is dropped when empty unless ``keep_empty_remainder`` is set.
	"""
	groups: list[list[ItemType]] = [[] for _ in predicates]
	remainder: list[ItemType] = []

	for item in items:
		tested: Any = extractor(item)
		for group, predicate in zip(groups, predicates):
			if predicate(tested):
				group.append(item)
				break
		else:
			remainder.append(item)

	if remainder or keep_empty_remainder:
		groups.append(remainder)
	return groups


def _log_result(shape: str, predicate_count: int, groups: list[list]) -> None:
	if not logger.isEnabledFor(logging.DEBUG):
		return
	sizes: list[int] = [len(group) for group in groups]
	has_remainder: bool = len(groups) > predicate_count
	logger.debug(
		f"Partitioned {sum(sizes)} items {shape} with {predicate_count} predicates: {sizes=}, {has_remainder=}"
	)


def _identity(item: T) -> T:
	return item


def _partition_mapping(
		source: Mapping[K, V], predicates: Iterable[Predicate], extractor: Callable[[tuple[K, V]], Any], shape: str
) -> list[dict[K, V]]:
	_validate_mapping(source)
	validated: tuple[Predicate, ...] = _validate_predicates(predicates)

	groups: list[list[tuple[K, V]]] = _classify(source.items(), validated, extractor)
	_log_result(shape, len(validated), groups)
	return [dict(group) for group in groups]


def partition_by_value(source: Mapping[K, V], predicates: Iterable[Callable[[V], bool]]) -> list[dict[K, V]]:
	"""
	Split ``source`` into one dict per predicate, testing each entry's value.

	An entry lands in the dict of the first predicate its value satisfies. Entries no
	predicate accepts are collected in one extra trailing dict, present only if non-empty.
	"""
	return _partition_mapping(source, predicates, itemgetter(1), 'by value')


def partition_by_key(source: Mapping[K, V], predicates: Iterable[Callable[[K], bool]]) -> list[dict[K, V]]:
	"""Same as :func:`partition_by_value`, but predicates are tested against keys."""
	return _partition_mapping(source, predicates, itemgetter(0), 'by key')


def partition_elements(source: Iterable[T], predicates: Iterable[Callable[[T], bool]]) -> list[list[T]]:
	"""
	Split the elements of ``source`` into one list per predicate, plus a trailing list
	of unmatched elements when there are any. ``source`` is iterated exactly once.
	"""
	_validate_iterable(source)
	validated: tuple[Predicate, ...] = _validate_predicates(predicates)

	groups: list[list[T]] = _classify(source, validated, _identity)
	_log_result('by element', len(validated), groups)
	return groups


def partition_by_values(source: Mapping[K, V], predicates: Iterable[Callable[[V], bool]]) -> list[dict[K, V]]:
	return partition_by_value(source, predicates)


def partition_by_keys(source: Mapping[K, V], predicates: Iterable[Callable[[K], bool]]) -> list[dict[K, V]]:
	return partition_by_key(source, predicates)


def binary_partition(elements: Iterable[T], predicate: Callable[[T], bool]) -> tuple[list[T], list[T]]:
	_validate_iterable(elements)
	validated: tuple[Predicate, ...] = _validate_predicates([predicate])

	elements_true, elements_false = _classify(elements, validated, _identity, keep_empty_remainder=True)
	return elements_true, elements_false
