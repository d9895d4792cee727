# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from time import perf_counter
from typing import Optional
import logging
from cwa_forecast.clients.cwa import CwaConfigError, CwaHttpError, fetch_dataset_raw
from cwa_forecast.core.config import Settings
from cwa_forecast.services.forecast_engine import normalize_forecast
from cwa_forecast.services.forecast_types import ForecastOutcome, UpstreamFailure

"""
Serviço de previsão: busca no CWA e normaliza.


- Valida configuração antes de qualquer chamada (CwaConfigError).
- Aguarda o client; falhas de transporte viram `UpstreamFailure` (sem retry).
- Entrega o payload ao motor puro `normalize_forecast`.
"""

log = logging.getLogger("weather")


async def fetch_forecast(
    dataset_id: str,
    place_name: Optional[str],
    *,
    config: Settings,
) -> ForecastOutcome:
    if not config.CWA_API_KEY:
        raise CwaConfigError("missing CWA_API_KEY")

    log.info("cwa_fetch_start", extra={"dataset_id": dataset_id, "place_name": place_name})
    t0 = perf_counter()

    try:
        raw = await fetch_dataset_raw(
            dataset_id,
            place_name,
            api_key=config.CWA_API_KEY,
            base_url=config.CWA_API_BASE_URL,
            timeout_s=config.CWA_TIMEOUT_S,
        )
    except CwaHttpError as e:
        log.error(
            "cwa_fetch_failed",
            extra={
                "dataset_id": dataset_id,
                "place_name": place_name,
                "status_code": e.status_code,
                "error": e.message[:400],
            },
        )
        return UpstreamFailure(message=e.message, status_code=e.status_code)

    outcome = normalize_forecast(raw, dataset_id, place_name)
    log.debug(
        "cwa_fetch_done",
        extra={"dataset_id": dataset_id, "elapsed_ms": int((perf_counter() - t0) * 1000)},
    )
    return outcome
