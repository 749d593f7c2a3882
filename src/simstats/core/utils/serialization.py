"""
Serialization helpers for statistics summaries.

Provides JSON helpers with basic versioned payloads so exported reports can
evolve without breaking consumers.
"""
# 说明：序列化辅助工具，统一 JSON 编解码行为并内置简单的版本封装。
# 职责：
# - serialize_to_json / deserialize_from_json：提供带可选版本包装的 JSON 序列化/反序列化接口
# - 内部 _prepare：递归处理 dataclass、自定义对象（实现 to_dict）、numpy 标量/数组与容器类型
# 约定：
# - JSON 标准不支持 inf/NaN：哨兵极值（空累加器的 min/max）统一导出为 null

from __future__ import annotations

import json
import math
from dataclasses import asdict, is_dataclass
from typing import Any, Optional

import numpy as np


def _prepare(obj: Any) -> Any:
    # 将对象递归转换为可 JSON 序列化的基础结构
    if hasattr(obj, "to_dict"):
        return _prepare(obj.to_dict())
    if is_dataclass(obj) and not isinstance(obj, type):
        return _prepare(asdict(obj))
    if isinstance(obj, np.ndarray):
        return _prepare(obj.tolist())
    if isinstance(obj, np.generic):
        return _prepare(obj.item())
    if isinstance(obj, dict):
        return {str(key): _prepare(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_prepare(item) for item in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    return obj


def serialize_to_json(obj: Any, *, version: Optional[str] = None, indent: Optional[int] = None) -> str:
    # 将对象序列化为 JSON 字符串，支持可选 version 包装
    payload = _prepare(obj)
    if version is not None:
        payload = {"version": version, "payload": payload}
    return json.dumps(payload, ensure_ascii=False, indent=indent, allow_nan=False)


def deserialize_from_json(text: str) -> Any:
    # 简单 JSON 反序列化包装，返回原始 Python 结构
    return json.loads(text)
