# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from dataclasses import asdict
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel
from cwa_forecast.api.deps import get_settings
from cwa_forecast.clients.cwa import CwaConfigError
from cwa_forecast.core.config import Settings
from cwa_forecast.services.forecast_service import fetch_forecast
from cwa_forecast.services.forecast_types import (
    EmptyRecord,
    ForecastOutcome,
    ForecastSuccess,
    PlaceNotFound,
    UpstreamFailure,
)
import logging

"""
Previsão normalizada do CWA.


- `GET /forecast/{dataset_id}` consulta livre (dataset + locationName opcional).
- `GET /weather/yilan[/{town}]` previsão semanal de Yilan (F-D0047-003, default 宜蘭市).
- Mapeia resultados: NotFound/EmptyRecord → 404, falha upstream → status do provider ou 502.
"""

log = logging.getLogger("weather")

router = APIRouter()

# Schemas
class ForecastPeriodOut(BaseModel):
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    weather_condition: Optional[str] = None
    precipitation_probability: Optional[str] = None
    min_temperature: Optional[str] = None
    max_temperature: Optional[str] = None
    comfort_index: Optional[str] = None
    wind_speed: Optional[str] = None

class ForecastOut(BaseModel):
    success: bool = True
    dataset: Optional[str] = None
    city: Optional[str] = None
    update_time: Optional[str] = None
    misaligned_attributes: List[str] = []
    forecasts: List[ForecastPeriodOut]


def _to_response(outcome: ForecastOutcome, requested: Optional[str]) -> ForecastOut:
    if isinstance(outcome, ForecastSuccess):
        return ForecastOut(
            dataset=outcome.dataset_id,
            city=outcome.place_name,
            update_time=outcome.dataset_description,
            misaligned_attributes=list(outcome.misaligned_attributes),
            forecasts=[ForecastPeriodOut(**asdict(p)) for p in outcome.forecasts],
        )

    if isinstance(outcome, PlaceNotFound):
        available = outcome.available_place_names
        raise HTTPException(
            status_code=404,
            detail={
                "success": False,
                "error": "place_not_found",
                "message": f"查無資料：無法取得 {requested or ''} 天氣預報。請確認該地點名稱是否正確或 CWA API 資料暫時未更新。",
                "available_place_names": list(available) if available is not None else None,
            },
        )

    if isinstance(outcome, EmptyRecord):
        raise HTTPException(
            status_code=404,
            detail={
                "success": False,
                "error": "empty_record",
                "message": f"{outcome.place_name or requested or ''} 目前沒有任何預報資料。",
            },
        )

    if isinstance(outcome, UpstreamFailure):
        # só repassa status de erro do provider
        status = outcome.status_code if outcome.status_code and outcome.status_code >= 400 else 502
        raise HTTPException(
            status_code=status,
            detail={
                "success": False,
                "error": "upstream_failure",
                "message": outcome.message,
            },
        )

    raise HTTPException(status_code=500, detail="Unexpected forecast outcome")


async def _forecast(dataset_id: str, place_name: Optional[str], config: Settings) -> ForecastOut:
    # "?location_name=" vazio equivale a sem filtro
    place_name = (place_name or "").strip() or None
    try:
        outcome = await fetch_forecast(dataset_id, place_name, config=config)
    except CwaConfigError as e:
        log.error("cwa_config_error", extra={"dataset_id": dataset_id, "error": str(e)})
        raise HTTPException(
            status_code=500,
            detail={
                "success": False,
                "error": "config_error",
                "message": "缺少 CWA_API_KEY，請在 .env 中設定 CWA_API_KEY",
            },
        )
    return _to_response(outcome, place_name)


# Endpoints
@router.get("/forecast/{dataset_id}", response_model=ForecastOut, summary="Previsão normalizada por dataset CWA")
async def forecast_by_dataset(
    dataset_id: str = Path(..., description="ex.: F-D0047-003, F-C0032-001"),
    location_name: Optional[str] = Query(None, description="locationName exato (opcional)"),
    config: Settings = Depends(get_settings),
) -> ForecastOut:
    return await _forecast(dataset_id, location_name, config)

@router.get("/weather/yilan", response_model=ForecastOut, summary="Semana em Yilan (distrito default)")
async def yilan_weekly_default(config: Settings = Depends(get_settings)) -> ForecastOut:
    return await _forecast(config.CWA_DEFAULT_DATASET, config.CWA_DEFAULT_TOWN, config)

@router.get("/weather/yilan/{town}", response_model=ForecastOut, summary="Semana em Yilan por distrito")
async def yilan_weekly(
    town: str = Path(..., description="ex.: 宜蘭市, 羅東鎮"),
    config: Settings = Depends(get_settings),
) -> ForecastOut:
    return await _forecast(config.CWA_DEFAULT_DATASET, town, config)
