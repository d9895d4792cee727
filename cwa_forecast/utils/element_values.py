# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, Callable, Optional, Tuple

"""
Extração tolerante de valores escalares de uma entrada de tempo do CWA.


- Cada revisão do dataset guarda o valor num lugar diferente
  (`parameter.parameterName`, `elementValue[0].value`, ...).
- `VALUE_PROBES` é a cadeia ordenada de extratores puros; o primeiro valor não vazio vence.
- `extract_scalar(entry)` nunca lança: entrada malformada → None.
"""

_PARAMETER_KEYS = ("parameterName", "parameterValue")
_ELEMENT_VALUE_KEYS = ("value", "measures", "description")


def _is_empty(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return True
    if isinstance(value, str):
        return not value.strip()
    return isinstance(value, (dict, list, tuple))


def _first_of(d: dict, keys: Tuple[str, ...]) -> Any:
    for key in keys:
        v = d.get(key)
        if not _is_empty(v):
            return v
    return None


def _first_item(value: Any) -> Any:
    if isinstance(value, list):
        return value[0] if value else None
    return value


def from_parameter(entry: dict) -> Any:
    """`parameter: {parameterName, parameterValue}` (F-C0032, F-D0047 antigo)."""
    p = _first_item(entry.get("parameter"))
    if isinstance(p, dict):
        return _first_of(p, _PARAMETER_KEYS)
    return p


def from_element_value(entry: dict) -> Any:
    """`elementValue: [{value, measures}]`; aceita também dict único ou escalar."""
    ev = _first_item(entry.get("elementValue"))
    if isinstance(ev, dict):
        return _first_of(ev, _ELEMENT_VALUE_KEYS)
    return ev


def from_inline_value(entry: dict) -> Any:
    return entry.get("value")


VALUE_PROBES: Tuple[Callable[[dict], Any], ...] = (
    from_parameter,
    from_element_value,
    from_inline_value,
)


def extract_scalar(entry: Any) -> Optional[str]:
    if not isinstance(entry, dict):
        return None
    for probe in VALUE_PROBES:
        v = probe(entry)
        if not _is_empty(v):
            return v.strip() if isinstance(v, str) else str(v)
    return None
