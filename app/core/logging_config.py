# app/core/logging_config.py

"""
애플리케이션의 루트 로거를 설정하는 모듈입니다.

`setup_logging`은 콘솔 핸들러와 (선택적으로) 파일 핸들러를 루트 로거에 연결합니다.
각 모듈은 `logging.getLogger(__name__)`으로 자신의 로거를 얻어 사용합니다.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    루트 로거를 설정합니다.

    이미 핸들러가 연결되어 있으면 (예: pytest, uvicorn 재시작) 레벨만 갱신하고 반환합니다.
    """
    root_logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(numeric_level)

    if root_logger.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
