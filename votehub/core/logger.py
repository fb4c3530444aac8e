# votehub/core/logger.py
from loguru import logger
import sys
import os

from votehub.config import settings

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

def setup_logging(log_dir: str | None = None, debug: bool | None = None) -> str:
    """콘솔 + 파일 sink 설정 (설정 값이 기본), 로그 디렉토리 반환"""
    log_dir = log_dir or settings.log_dir
    debug = settings.debug if debug is None else debug
    os.makedirs(log_dir, exist_ok=True)

    logger.remove()

    logger.add(sys.stdout, colorize=True, format=CONSOLE_FORMAT, level="DEBUG" if debug else "INFO")

    # 전체 로그 (10MB 단위, 30일 보관)
    logger.add(
        os.path.join(log_dir, "votehub.log"),
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        format=FILE_FORMAT,
        level="DEBUG"
    )

    # 에러만
    logger.add(
        os.path.join(log_dir, "error.log"),
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        format=FILE_FORMAT,
        level="ERROR"
    )

    return log_dir
