import os
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr

LogLevel = Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class LoggingConfig(BaseModel):
	_LEVEL_ENV_VAR: ClassVar[str] = 'PARTITIONER_LOG_LEVEL'
	_TO_FILE_ENV_VAR: ClassVar[str] = 'PARTITIONER_LOG_TO_FILE'
	_TRUTHY_VALUES: ClassVar[frozenset[str]] = frozenset({'1', 'true', 'yes', 'on'})

	level: LogLevel = 'INFO'
	log_to_file: StrictBool = False
	file_name: StrictStr = 'partitioner.log'
	file_max_bytes: StrictInt = Field(default=1 * 1024 ** 2, gt=0)  # 1MiB
	file_backup_count: StrictInt = Field(default=10, ge=0)

	@classmethod
	def from_file(cls, path: str | os.PathLike) -> 'LoggingConfig':
		with open(Path(path), encoding='utf8') as f:
			return cls.model_validate_json(f.read())

	@classmethod
	def from_env(cls) -> 'LoggingConfig':
		raw: dict[str, str | bool] = {}

		level: str | None = os.getenv(cls._LEVEL_ENV_VAR)
		if level:
			raw['level'] = level.strip().upper()

		to_file: str | None = os.getenv(cls._TO_FILE_ENV_VAR)
		if to_file is not None:
			raw['log_to_file'] = to_file.strip().lower() in cls._TRUTHY_VALUES

		return cls.model_validate(raw)
