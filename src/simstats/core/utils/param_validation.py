"""
Reusable validation helpers.
"""
# 说明：参数验证相关的辅助函数，用于在库内部统一进行轻量级参数检查与数值转换。
# 职责：
# - ParamValidationError：专门用于参数校验失败的异常类型
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_type：检查参数是否属于指定类型集合，并在失败时给出带 label 的错误提示
# - ensure_number：将输入转换为 float，并可选地拒绝 NaN / 无穷值
# - ensure_sample：样本值校验，非严格模式下丢弃 NaN 并记录告警

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, Optional, Tuple, Type

from .logging import get_logger

_logger = get_logger(__name__)


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    # 检查 value 是否为 expected 集合中的任意类型，否则抛出带字段标签的 ParamValidationError
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"{label} must be instance of {names}")


def ensure_number(
    value: Any,
    *,
    label: str = "value",
    allow_nan: bool = False,
    allow_infinite: bool = True,
    error: Type[Exception] = ParamValidationError,
) -> float:
    """Coerce a real scalar to float, rejecting NaN (and optionally infinities)."""
    # bool 是 int 的子类，这里显式排除，避免 True/False 被当作样本值
    if isinstance(value, bool) or not isinstance(value, Real):
        raise error(f"{label} must be a real number, got {type(value).__name__}")
    numeric = float(value)
    if not allow_nan and math.isnan(numeric):
        raise error(f"{label} must not be NaN")
    if not allow_infinite and math.isinf(numeric):
        raise error(f"{label} must be finite")
    return numeric


def ensure_positive_int(value: Any, *, label: str = "value", error: Type[Exception] = ParamValidationError) -> int:
    # 正整数校验：排除 bool，并兼容 numpy 整数类型（通过 numbers.Integral）
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise error(f"{label} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise error(f"{label} must be positive, got {value}")
    return int(value)


def ensure_sample(value: Any, *, strict: bool = True, label: str = "sample") -> Optional[float]:
    """
    Coerce an observation to float.

    A NaN observation raises in strict mode; otherwise it is dropped with a
    warning and ``None`` is returned. Infinities are kept.
    """
    numeric = ensure_number(value, label=label, allow_nan=True)
    if math.isnan(numeric):
        # 先转换为 float 再判断，numpy 标量（如 float32）与 Python float 一视同仁
        if strict:
            raise ParamValidationError(f"{label} must not be NaN")
        _logger.warning("dropping NaN %s (strict_validation disabled)", label)
        return None
    return numeric
