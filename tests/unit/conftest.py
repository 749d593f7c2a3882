"""Fixtures shared by the unit tests."""

import dataclasses

import pytest

from simstats.core.utils import get_config


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 每个测试结束后恢复全局配置，避免 configure(...) 的修改泄漏到其他测试
    saved = dataclasses.asdict(get_config())
    yield
    get_config().update(**saved)
