import logging
from logging import StreamHandler, FileHandler, Logger
from pathlib import Path


class ModuleLogger:
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    # specify the formatting of the log records
    FORMATTER = logging.Formatter(
        '[%(asctime)s | %(name)s | %(levelname)s] %(message)s'
    )

    @classmethod
    def create_console_handler(cls, log_level: int | None = None) -> StreamHandler:
        # Create a log handler that logs records to the console
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(cls.FORMATTER)
        console_handler.setLevel(log_level or cls.DEBUG)
        return console_handler

    @classmethod
    def create_file_handler(cls, file_path: Path | str, log_level: int | None = None) -> FileHandler:
        # Create a log handler that logs records to a file.
        file_handler = logging.FileHandler(file_path, mode='a', encoding='utf-8')
        file_handler.setFormatter(cls.FORMATTER)
        file_handler.setLevel(log_level or cls.DEBUG)
        return file_handler

    @classmethod
    def get_logger(
        cls,
        logger_name: str,
        file_path: Path | str | None = None,
        log_level: int = logging.WARNING
    ) -> Logger:
        """Returns a logger with `logger_name`. If a logger with `logger_name`
        already exists, this same logger will be returned. Otherwise, a new
        logger is returned with a console handler and, if `file_path` is not
        None, also a file handler that logs the same messages to the file.
        Only messages with a priority equal or higher than `log_level` will be
        logged.
        """
        logger = logging.getLogger(logger_name)
        if not logger.handlers:
            # if a logger with the same `logger_name` is called multiple times,
            # don't add its handlers again
            logger.addHandler(cls.create_console_handler())
            if file_path is not None:
                logger.addHandler(cls.create_file_handler(file_path))
            logger.setLevel(log_level)
        return logger

    @staticmethod
    def set_level(log_level: int, prefix: str = 'ductflow') -> list[str]:
        """Sets `log_level` on every logger that was already created and whose
        name starts with `prefix`. Returns the names of the loggers that were
        changed.
        """
        changed = []
        for name, logger in logging.Logger.manager.loggerDict.items():
            if isinstance(logger, Logger) and name.startswith(prefix):
                logger.setLevel(log_level)
                changed.append(name)
        return sorted(changed)
