# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import APIRouter
from cwa_forecast.api.v1 import forecast as forecast_api

"""
Roteador principal da API v1.


- Agrega e inclui sub-routers; importado por `main.py` como `/api/v1`.
"""

router_v1 = APIRouter(tags=["v1"])

# Sub-rotas
router_v1.include_router(forecast_api.router, prefix="", tags=["forecast"])
