# app/core/logging_config.py

"""
애플리케이션 로깅 설정 모듈입니다.

루트 로거에 콘솔 핸들러를 한 번만 붙이고, 설정된 레벨을 적용합니다.
각 모듈은 `logging.getLogger(__name__)`로 자신의 로거를 생성해 사용합니다.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거를 설정합니다.
    이미 핸들러가 있다면 (테스트, uvicorn 재시작 등) 레벨만 갱신합니다.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
