# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Union
from cwa_forecast.services.forecast_types import PlaceNotFound, PlaceRecord
from cwa_forecast.utils.datasets import SHAPE_FLAT, SHAPE_SINGLE, SHAPE_WRAPPED, profile_for

"""
Localização da localidade dentro do payload bruto do CWA.


- Tenta os formatos de container conhecidos na ordem do perfil do dataset.
- Filtra por `locationName` exato quando `place_name` é informado.
- Retorna `PlaceRecord` ou `PlaceNotFound` (nunca lança para payload estranho).
- `describe_dataset(raw)` extrai a descrição/atualização do dataset.
"""


def _records(raw: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(raw, dict):
        return None
    records = raw.get("records")
    return records if isinstance(records, dict) else None


def _is_place(value: Any) -> bool:
    return isinstance(value, dict) and "weatherElement" in value


def _flat_candidates(records: Dict[str, Any]) -> Optional[List[Any]]:
    loc = records.get("location")
    return loc if isinstance(loc, list) else None


def _wrapped_candidates(records: Dict[str, Any]) -> Optional[List[Any]]:
    locs = records.get("locations")
    if not isinstance(locs, list) or not locs or not isinstance(locs[0], dict):
        return None
    inner = locs[0].get("location")
    return inner if isinstance(inner, list) else None


def _single_candidate(records: Dict[str, Any]) -> Optional[List[Any]]:
    loc = records.get("location")
    if _is_place(loc):
        return [loc]
    locs = records.get("locations")
    if isinstance(locs, list) and len(locs) == 1:
        locs = locs[0]
    if _is_place(locs):
        return [locs]
    if isinstance(locs, dict) and _is_place(locs.get("location")):
        return [locs["location"]]
    return None


CONTAINER_PROBES: Dict[str, Callable[[Dict[str, Any]], Optional[List[Any]]]] = {
    SHAPE_FLAT: _flat_candidates,
    SHAPE_WRAPPED: _wrapped_candidates,
    SHAPE_SINGLE: _single_candidate,
}


def _place_names(places: List[Dict[str, Any]]) -> tuple[str, ...]:
    return tuple(p["locationName"] for p in places if isinstance(p.get("locationName"), str))


def locate_place(
    raw: Any,
    dataset_id: Optional[str] = None,
    place_name: Optional[str] = None,
) -> Union[PlaceRecord, PlaceNotFound]:
    """
    Entrada:
      - raw: payload bruto (dict retornado pelo client)
      - dataset_id: define qual formato tentar primeiro
      - place_name: filtro exato por `locationName` (None → primeira entrada)

    Saída:
      - PlaceRecord da localidade, ou
      - PlaceNotFound(requested, available) quando não há container, o container
        está vazio ou nenhum nome bate.
    """
    if isinstance(place_name, str) and not place_name.strip():
        place_name = None
    records = _records(raw)
    if records is None:
        return PlaceNotFound(requested_place_name=place_name)

    seen_container = False
    for shape in profile_for(dataset_id).shape_order:
        candidates = CONTAINER_PROBES[shape](records)
        if candidates is None:
            continue
        seen_container = True

        if shape == SHAPE_SINGLE:
            return PlaceRecord.from_upstream(candidates[0], shape=shape)

        places = [c for c in candidates if isinstance(c, dict)]
        if not places:
            # container vazio: ainda vale tentar o próximo formato
            continue

        if place_name is None:
            return PlaceRecord.from_upstream(places[0], shape=shape)

        for place in places:
            if place.get("locationName") == place_name:
                return PlaceRecord.from_upstream(place, shape=shape)

        return PlaceNotFound(
            requested_place_name=place_name,
            available_place_names=_place_names(places),
        )

    return PlaceNotFound(
        requested_place_name=place_name,
        available_place_names=() if seen_container else None,
    )


def describe_dataset(raw: Any) -> Optional[str]:
    """`datasetDescription` em records, em records.locations[0] ou em datasetInfo."""
    records = _records(raw)
    if records is None:
        return None
    holders: List[Any] = [records]
    locs = records.get("locations")
    if isinstance(locs, list) and locs:
        holders.append(locs[0])
    holders.append(records.get("datasetInfo"))
    for holder in holders:
        if isinstance(holder, dict):
            desc = holder.get("datasetDescription")
            if isinstance(desc, str) and desc.strip():
                return desc.strip()
    return None
