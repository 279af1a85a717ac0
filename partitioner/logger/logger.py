import logging
import sys
from logging import Logger
from logging.handlers import RotatingFileHandler

from partitioner.config import LoggingConfig

ROOT_LOGGER_NAME: str = 'partitioner'


def get_root_logger() -> Logger:
	return logging.getLogger(ROOT_LOGGER_NAME)


def get_logger(name: str) -> Logger:
	if name == ROOT_LOGGER_NAME or name.startswith(f'{ROOT_LOGGER_NAME}.'):
		return logging.getLogger(name)
	return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


def logger_set_up(config: LoggingConfig | None = None) -> None:
	"""
	Attach output handlers to the library's root logger.

	Importing the package only installs a NullHandler; applications call this once
	to see the partitioner's logs on stdout and, if configured, in a rotating file.
	"""
	if config is None:
		config = LoggingConfig.from_env()

	root_logger: Logger = get_root_logger()
	root_logger.setLevel(config.level)

	detailed_formatter: logging.Formatter = logging.Formatter(
		'[${levelname}]\t[${asctime}]\t[${pathname}:${funcName}():${lineno}]: ${message}',
		datefmt='%Y-%m-%d %H:%M:%S', style='$'
	)
	basic_formatter: logging.Formatter = logging.Formatter(
		'[${levelname}]\t[${asctime}]: ${message}',
		datefmt='%Y-%m-%d %H:%M:%S', style='$'
	)

	stdout_handler: logging.StreamHandler = logging.StreamHandler(sys.stdout)
	stdout_handler.setLevel(config.level)
	stdout_handler.setFormatter(basic_formatter)
	root_logger.addHandler(stdout_handler)

	if config.log_to_file:
		file_handler: RotatingFileHandler = RotatingFileHandler(
			config.file_name, encoding="utf8",
			maxBytes=config.file_max_bytes,
			backupCount=config.file_backup_count
		)
		file_handler.setLevel(logging.DEBUG)
		file_handler.setFormatter(detailed_formatter)
		root_logger.addHandler(file_handler)


get_root_logger().addHandler(logging.NullHandler())
