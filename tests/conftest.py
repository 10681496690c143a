# tests/conftest.py
from __future__ import annotations

import os

# Settings는 import 시점에 생성되므로, 패키지 import 전에 환경변수를 고정한다.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from loguru import logger

from mullerroot.services.target import target_function


@pytest.fixture(autouse=True)
def _reset_loguru_sinks():
    """CLI/앱이 추가한 loguru sink가 다음 테스트로 새지 않도록 정리."""
    yield
    logger.remove()


@pytest.fixture()
def f():
    """고정 대상 함수 f(x) = x^6 - 2"""
    return target_function
