# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from cwa_forecast.core.config import settings
from cwa_forecast.api.v1.router import router_v1
import logging
import uvicorn

"""
Adaptador CWA – FastAPI entrypoint.

- Cria a instância principal do FastAPI (title/version) e monta /api/v1.
- Configura CORS conforme settings (origens).
- Expõe /health e / (índice de endpoints).
- `run()` sobe o uvicorn em HOST/PORT.
"""

logging.basicConfig(level=settings.LOG_LEVEL)

start_server = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
)

start_server.include_router(router_v1, prefix="/api/v1")

def _normalize_cors(origins_setting) -> list[str]:
    """Settings.CORS_ORIGINS já vem como tupla (CSV do .env); limpa vazios/espaços."""
    return [o.strip() for o in (origins_setting or ()) if o and o.strip()]

origins = _normalize_cors(getattr(settings, "CORS_ORIGINS", []))

if not origins:
    origins = ["http://localhost:3000", "http://127.0.0.1:3000"]

start_server.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

logging.getLogger("weather").info("cors_enabled", extra={"origins": origins})

@start_server.get("/health", tags=["Health"])
def health():
    return {"status": "ok", "env": settings.APP_ENV, "timestamp": datetime.now(timezone.utc).isoformat()}

@start_server.get("/", tags=["Health"])
def index():
    return {
        "service": settings.APP_NAME,
        "endpoints": {
            "weekly": "/api/v1/weather/yilan/{town}",
            "forecast": "/api/v1/forecast/{dataset_id}?location_name=...",
            "health": "/health",
        },
        "default": f"/api/v1/weather/yilan/{settings.CWA_DEFAULT_TOWN}",
    }

def run() -> None:
    uvicorn.run(start_server, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
