# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from cwa_forecast.core.config import Settings, settings

"""
Dependências reutilizáveis da API.


- `get_settings()` injeta a configuração (sobrescrita em testes via dependency_overrides).
"""

def get_settings() -> Settings:
    return settings
