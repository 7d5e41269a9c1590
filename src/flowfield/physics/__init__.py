"""流れ場 モジュール"""

from .flow_field import FlowField, build_angles

__all__ = [
    "FlowField",
    "build_angles",
]
