import logging

import pytest

from partitioner import LoggingConfig, partition_elements
from partitioner.logger import ROOT_LOGGER_NAME, get_logger, get_root_logger, logger_set_up


@pytest.fixture
def clean_root_logger():
	root_logger = get_root_logger()
	handlers = list(root_logger.handlers)
	level = root_logger.level
	yield root_logger
	for handler in root_logger.handlers:
		if handler not in handlers:
			handler.close()
	root_logger.handlers = handlers
	root_logger.setLevel(level)


# ----------------
# -- get_logger --
# ----------------
def test_get_logger_nests_under_root():
	assert get_logger('client').name == f'{ROOT_LOGGER_NAME}.client'


def test_get_logger_keeps_package_names():
	assert get_logger('partitioner.partitioner').name == 'partitioner.partitioner'
	assert get_logger(ROOT_LOGGER_NAME) is get_root_logger()


def test_library_only_installs_null_handler():
	assert any(isinstance(h, logging.NullHandler) for h in get_root_logger().handlers)


# -------------------
# -- logger_set_up --
# -------------------
def test_logger_set_up_writes_to_stdout(clean_root_logger, capsys):
	logger_set_up(LoggingConfig(level='DEBUG'))

	partition_elements([1, 2, 3], [lambda n: n > 1])

	out = capsys.readouterr().out
	assert '[DEBUG]' in out
	assert 'Partitioned 3 items by element' in out


def test_logger_set_up_writes_to_file(clean_root_logger, tmp_path):
	log_file = tmp_path / 'partitioner.log'
	logger_set_up(LoggingConfig(level='DEBUG', log_to_file=True, file_name=str(log_file)))

	partition_elements([1, 2, 3], [lambda n: n > 1])
	for handler in clean_root_logger.handlers:
		handler.flush()

	content = log_file.read_text(encoding='utf8')
	assert 'sizes=[2, 1]' in content
	assert 'partitioner.py' in content


def test_logger_set_up_without_file(clean_root_logger, tmp_path):
	log_file = tmp_path / 'partitioner.log'
	logger_set_up(LoggingConfig(file_name=str(log_file)))

	assert not log_file.exists()
	assert clean_root_logger.level == logging.INFO


def test_logger_set_up_reads_env(clean_root_logger, monkeypatch):
	monkeypatch.setenv('PARTITIONER_LOG_LEVEL', 'WARNING')
	monkeypatch.delenv('PARTITIONER_LOG_TO_FILE', raising=False)

	logger_set_up()

	assert clean_root_logger.level == logging.WARNING
