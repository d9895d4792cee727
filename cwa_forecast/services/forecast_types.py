# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

"""
Tipos internos da normalização de previsões CWA.


- `AttributeSample` / `PlaceRecord`: visão tipada do subtree da localidade.
- `ForecastPeriod`: unidade normalizada (todos os campos str|None).
- Resultados: `ForecastSuccess`, `PlaceNotFound`, `EmptyRecord`, `UpstreamFailure`.
- Tudo imutável e criado por request; nada é compartilhado entre requests.
"""


def _text(value: Any) -> Optional[str]:
    """Só aceita texto ou número; o resto vira None."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, (int, float)):
        return str(value)
    return None


@dataclass(frozen=True)
class AttributeSample:
    start_time: Optional[str]
    end_time: Optional[str]
    raw: Any

    @classmethod
    def from_upstream(cls, entry: Any) -> "AttributeSample":
        if not isinstance(entry, dict):
            return cls(start_time=None, end_time=None, raw=entry)
        # elementos pontuais (ex.: T horário) usam dataTime
        start = _text(entry.get("startTime")) or _text(entry.get("dataTime"))
        return cls(start_time=start, end_time=_text(entry.get("endTime")), raw=entry)


@dataclass(frozen=True)
class PlaceRecord:
    place_name: Optional[str]
    attribute_series: Dict[str, Tuple[AttributeSample, ...]]
    shape: Optional[str] = None

    @classmethod
    def from_upstream(cls, place: Dict[str, Any], shape: Optional[str] = None) -> "PlaceRecord":
        """
        Agrupa `weatherElement[]` por `elementName`.
        Nome repetido sobrescreve o anterior; entrada sem nome é ignorada.
        """
        series: Dict[str, Tuple[AttributeSample, ...]] = {}
        elements = place.get("weatherElement")
        if not isinstance(elements, list):
            elements = []
        for el in elements:
            if not isinstance(el, dict):
                continue
            name = el.get("elementName")
            if not isinstance(name, str) or not name:
                continue
            times = el.get("time")
            if not isinstance(times, list):
                times = []
            series[name] = tuple(AttributeSample.from_upstream(t) for t in times)
        return cls(place_name=_text(place.get("locationName")), attribute_series=series, shape=shape)


@dataclass(frozen=True)
class ForecastPeriod:
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    weather_condition: Optional[str] = None
    precipitation_probability: Optional[str] = None
    min_temperature: Optional[str] = None
    max_temperature: Optional[str] = None
    comfort_index: Optional[str] = None
    wind_speed: Optional[str] = None


@dataclass(frozen=True)
class ForecastSuccess:
    place_name: Optional[str]
    forecasts: Tuple[ForecastPeriod, ...]
    dataset_id: Optional[str] = None
    dataset_description: Optional[str] = None
    misaligned_attributes: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PlaceNotFound:
    requested_place_name: Optional[str]
    # None: nenhum container reconhecido
    available_place_names: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class EmptyRecord:
    place_name: Optional[str]


@dataclass(frozen=True)
class UpstreamFailure:
    message: str
    status_code: Optional[int] = None


ForecastOutcome = Union[ForecastSuccess, PlaceNotFound, EmptyRecord, UpstreamFailure]
