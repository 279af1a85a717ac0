from .config import LoggingConfig
from .logger import get_logger, logger_set_up
from .partitioner import (
	PartitionException,
	PartitionPreconditionException,
	binary_partition,
	partition_by_key,
	partition_by_keys,
	partition_by_value,
	partition_by_values,
	partition_elements,
)
from .utils.containers import flatten_partitions, merge_partitions

__all__ = [
	'LoggingConfig',
	'PartitionException',
	'PartitionPreconditionException',
	'binary_partition',
	'flatten_partitions',
	'get_logger',
	'logger_set_up',
	'merge_partitions',
	'partition_by_key',
	'partition_by_keys',
	'partition_by_value',
	'partition_by_values',
	'partition_elements',
]
