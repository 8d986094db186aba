import logging
import os
import re
from logging.handlers import RotatingFileHandler


def make_path(*filepaths):
    return os.path.join(os.path.abspath(os.path.dirname(__file__)), *filepaths)


def setup_logger(logger_name, log_file=False, stdout=True, file_rotate_size=1 * 1024 * 1024, max_files=3, log_level=logging.INFO):
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    # re-importing configs must not stack handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter('%(message)s')

    if stdout:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=file_rotate_size, backupCount=max_files)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def table_name_for(class_name: str) -> str:
    """UserProfile -> user_profiles"""
    snake = re.sub(r'(?<!^)(?=[A-Z])', '_', class_name).lower()
    return f'{snake}s'
