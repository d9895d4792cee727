# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, Optional, Union
import logging
from cwa_forecast.services.forecast_locate import describe_dataset, locate_place
from cwa_forecast.services.forecast_normalize import (
    EmptyRecordError,
    find_misaligned,
    normalize_place,
    time_axis_name,
)
from cwa_forecast.services.forecast_types import (
    EmptyRecord,
    ForecastSuccess,
    PlaceNotFound,
)
from cwa_forecast.utils.datasets import profile_for

"""
Motor de normalização (payload bruto → resultado).


- Compõe `locate_place` → `normalize_place`; função pura (só loga).
- Retorna ForecastSuccess | PlaceNotFound | EmptyRecord.
- Sinaliza atributos desalinhados com o eixo de tempo em vez de confiar na posição.
"""

log = logging.getLogger("weather")


def normalize_forecast(
    raw: Any,
    dataset_id: Optional[str] = None,
    place_name: Optional[str] = None,
) -> Union[ForecastSuccess, PlaceNotFound, EmptyRecord]:
    located = locate_place(raw, dataset_id, place_name)
    if isinstance(located, PlaceNotFound):
        log.info(
            "forecast_place_not_found",
            extra={
                "dataset_id": dataset_id,
                "place_name": place_name,
                "available": located.available_place_names,
            },
        )
        return located

    try:
        forecasts = normalize_place(located, dataset_id)
    except EmptyRecordError as e:
        log.info("forecast_empty_record", extra={"dataset_id": dataset_id, "place_name": e.place_name})
        return EmptyRecord(place_name=e.place_name)

    series = located.attribute_series
    misaligned = find_misaligned(series, time_axis_name(series, profile_for(dataset_id)))
    if misaligned:
        log.warning(
            "forecast_series_misaligned",
            extra={
                "dataset_id": dataset_id,
                "place_name": located.place_name,
                "attributes": list(misaligned),
            },
        )

    log.info(
        "forecast_normalized",
        extra={
            "dataset_id": dataset_id,
            "place_name": located.place_name,
            "shape": located.shape,
            "periods": len(forecasts),
        },
    )

    return ForecastSuccess(
        place_name=located.place_name,
        forecasts=tuple(forecasts),
        dataset_id=dataset_id,
        dataset_description=describe_dataset(raw),
        misaligned_attributes=misaligned,
    )
