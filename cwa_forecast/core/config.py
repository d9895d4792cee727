# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import os
from dataclasses import dataclass
from dotenv import load_dotenv

"""
Central de configurações (Settings) do adaptador CWA.


- Carrega variáveis do .env (app/env/log/cors/cwa).
- Fornece defaults seguros e tipados via dataclass.
- Expõe `settings` como singleton; o serviço recebe a instância explicitamente.
"""

load_dotenv()

@dataclass
class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "CWA Forecast Adapter")
    APP_ENV: str = os.getenv("APP_ENV", "local")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "3000"))

    CORS_ORIGINS: tuple[str, ...] = tuple(
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()
    )

    CWA_API_KEY: str = os.getenv("CWA_API_KEY", "")
    CWA_API_BASE_URL: str = os.getenv("CWA_API_BASE_URL", "https://opendata.cwa.gov.tw/api")
    CWA_TIMEOUT_S: int = int(os.getenv("CWA_TIMEOUT_S", "8"))

    # previsão semanal por distrito de Yilan
    CWA_DEFAULT_DATASET: str = os.getenv("CWA_DEFAULT_DATASET", "F-D0047-003")
    CWA_DEFAULT_TOWN: str = os.getenv("CWA_DEFAULT_TOWN", "宜蘭市")

settings = Settings()
