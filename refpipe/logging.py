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
        '[%(process)s | %(name)s | %(levelname)s] %(message)s'
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
        log_level: int = logging.DEBUG
    ) -> Logger:
        """Returns a logger with `logger_name`. If a logger with `logger_name`
        already exists, this same logger will be returned. Otherwise, a new
        logger is returned. If a new logger and `file_path` is not None, a
        logger will be returned with a console and file handler, that will log
        the same messages both to the console and to the file. Only messages
        with a priority equal or higher than `log_level` will be logged.
        """
        logger = logging.getLogger(logger_name)
        if not logger.handlers:
            # if a logger with the same `logger_name` is called multiple times,
            # don't add its handlers again
            console_handler = cls.create_console_handler(log_level)
            logger.addHandler(console_handler)
            if file_path is not None:
                file_handler = cls.create_file_handler(file_path, log_level)
                logger.addHandler(file_handler)
            logger.setLevel(log_level)
        return logger

    @classmethod
    def set_level(cls, log_level: int, prefix: str = 'refpipe') -> None:
        """Sets the level of all loggers whose name starts with `prefix`, and
        the level of their handlers.
        """
        for name in list(logging.Logger.manager.loggerDict):
            if name == prefix or name.startswith(prefix + '.'):
                logger = logging.getLogger(name)
                logger.setLevel(log_level)
                for handler in logger.handlers:
                    handler.setLevel(log_level)
