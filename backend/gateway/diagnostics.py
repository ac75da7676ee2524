"""Structural summaries of provider payloads for debug logging.

Enabled with ``logging.log_payloads: true``.  Summaries list each top-level
field with its type, list lengths and the first few values of any vector,
which is usually enough to see what an SDK response actually contains
without dumping thousands of floats into the log.
"""
import logging
from typing import Any, List

logger = logging.getLogger(__name__)

SAMPLE_VALUES = 3


def _type_name(value: Any) -> str:
    return type(value).__name__


def _to_plain(data: Any) -> Any:
    # SDK responses are pydantic models; results are dataclasses.
    if hasattr(data, "model_dump"):
        return data.model_dump()
    if hasattr(data, "__dataclass_fields__"):
        return {name: getattr(data, name) for name in data.__dataclass_fields__}
    return data


def describe_payload(data: Any, label: str = "DATA") -> str:
    """Return a multi-line description of *data*'s shape."""
    lines: List[str] = [f"=== {label} ===", f"type: {_type_name(data)}"]
    plain = _to_plain(data)

    if isinstance(plain, dict):
        for key, value in plain.items():
            value = _to_plain(value)
            line = f"  {key}: {_type_name(value)}"
            if isinstance(value, list):
                line += f" len={len(value)}"
                if value and isinstance(value[0], (int, float)):
                    sample = ", ".join(repr(v) for v in value[:SAMPLE_VALUES])
                    line += f" sample=[{sample}, ...]"
                elif value:
                    line += f" first={_type_name(_to_plain(value[0]))}"
            elif isinstance(value, dict):
                line += f" keys=[{', '.join(value)}]"
            lines.append(line)
    elif isinstance(plain, list):
        lines.append(f"  len={len(plain)}")
        if plain:
            lines.append(f"  first={_type_name(_to_plain(plain[0]))}")

    return "\n".join(lines)


def log_payload(data: Any, label: str) -> None:
    """Log :func:`describe_payload` output at DEBUG level."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("\n%s", describe_payload(data, label))
