# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
from cwa_forecast.services.forecast_types import AttributeSample, ForecastPeriod, PlaceRecord
from cwa_forecast.utils.datasets import (
    ATTRIBUTE_ALIASES,
    WEATHER_CONDITION,
    DatasetProfile,
    profile_for,
)
from cwa_forecast.utils.element_values import extract_scalar

"""
Normalização das séries de atributos de uma localidade CWA.


- Resolve o nome upstream de cada atributo lógico (aliases por dataset).
- Usa a série de Wx como eixo de tempo; total de períodos = maior série presente.
- Campos ausentes/malformados viram None; nunca lança por atributo.
- Lança `EmptyRecordError` só quando a localidade não tem nenhuma série.
"""


class ForecastNormalizationError(ValueError):
    """Erro de normalização do payload do CWA."""


class EmptyRecordError(ForecastNormalizationError):
    def __init__(self, place_name: Optional[str]):
        super().__init__(f"Place record has no attribute series: {place_name!r}")
        self.place_name = place_name


Series = Dict[str, Tuple[AttributeSample, ...]]


def resolve_attribute(series: Series, attribute: str, profile: DatasetProfile) -> Optional[str]:
    """Primeiro nome candidato com série não vazia."""
    for name in profile.candidates(attribute):
        if series.get(name):
            return name
    return None


def time_axis_name(series: Series, profile: DatasetProfile) -> Optional[str]:
    """
    Série que fornece startTime/endTime: Wx (ou alias); senão a maior série,
    a primeira na ordem do registro em caso de empate.
    """
    primary = resolve_attribute(series, WEATHER_CONDITION, profile)
    if primary:
        return primary
    best: Optional[str] = None
    for name, samples in series.items():
        if samples and (best is None or len(samples) > len(series[best])):
            best = name
    return best


def _value_at(samples: Optional[Sequence[AttributeSample]], i: int) -> Optional[str]:
    if not samples or i >= len(samples):
        return None
    return extract_scalar(samples[i].raw)


def find_misaligned(series: Series, axis_name: Optional[str]) -> Tuple[str, ...]:
    """
    Atributos cuja série não bate com o eixo: tamanho diferente ou startTime
    divergente no mesmo índice. Séries vazias não entram em nenhum período e são ignoradas.
    """
    if not axis_name:
        return ()
    axis = series.get(axis_name) or ()
    out: List[str] = []
    for name, samples in series.items():
        if name == axis_name or not samples:
            continue
        if len(samples) != len(axis):
            out.append(name)
            continue
        for a, s in zip(axis, samples):
            if a.start_time and s.start_time and a.start_time != s.start_time:
                out.append(name)
                break
    return tuple(sorted(out))


def normalize_place(record: PlaceRecord, dataset_id: Optional[str] = None) -> List[ForecastPeriod]:
    """
    Converte o PlaceRecord numa lista de ForecastPeriod (ordem do eixo de tempo).

    Entrada:
      - record: saída de `locate_place`
      - dataset_id: escolhe os nomes preferidos (PoP vs PoP12h, MinT vs TMin...)

    Erros:
      - EmptyRecordError: nenhuma série com amostras.
    """
    series = record.attribute_series
    time_len = max((len(s) for s in series.values()), default=0)
    if time_len == 0:
        raise EmptyRecordError(record.place_name)

    profile = profile_for(dataset_id)
    names = {attr: resolve_attribute(series, attr, profile) for attr in ATTRIBUTE_ALIASES}
    axis = series.get(time_axis_name(series, profile) or "", ())

    out: List[ForecastPeriod] = []
    for i in range(time_len):
        meta = axis[i] if i < len(axis) else None
        values = {attr: _value_at(series.get(name), i) if name else None for attr, name in names.items()}
        out.append(ForecastPeriod(
            start_time=meta.start_time if meta else None,
            end_time=meta.end_time if meta else None,
            **values,
        ))
    return out
