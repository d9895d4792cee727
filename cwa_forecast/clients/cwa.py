# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, Dict, Optional
import httpx
from cwa_forecast.core.config import settings

"""
Client HTTP (CWA open data – datastore por dataset).


- Define exceções `CwaConfigError` (sem credencial) e `CwaHttpError` (transporte/status).
- `fetch_dataset_raw(dataset_id, location_name, *, api_key, base_url, timeout_s)` retorna JSON bruto.
- Sem retries: um timeout expirado vira `CwaHttpError` sem status.
"""


class CwaConfigError(RuntimeError):
    """Configuração ausente (ex.: CWA_API_KEY) antes de chamar o provider."""


class CwaHttpError(RuntimeError):
    """Erro HTTP/transporte ao consultar o CWA."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return resp.text or resp.reason_phrase


async def fetch_dataset_raw(
    dataset_id: str,
    location_name: Optional[str] = None,
    *,
    api_key: str,
    base_url: str = settings.CWA_API_BASE_URL,
    timeout_s: float = settings.CWA_TIMEOUT_S,
) -> Dict[str, Any]:
    """
    Chama o datastore do CWA e retorna o JSON **bruto** (sem normalizar).

    Parâmetros:
      - dataset_id: ex. 'F-D0047-003', 'F-C0032-001'
      - location_name: filtro server-side (opcional)
      - api_key: valor do parâmetro Authorization
      - timeout_s: segundos para timeout HTTP

    Erros:
      - CwaConfigError: api_key vazia (nenhuma chamada é feita).
      - CwaHttpError: status não 2xx, falha de rede/timeout, corpo não-JSON
        ou corpo com `success: "false"`.
    """
    if not api_key:
        raise CwaConfigError("missing CWA_API_KEY")

    url = f"{base_url.rstrip('/')}/v1/rest/datastore/{dataset_id}"
    params = {"Authorization": api_key, "format": "JSON"}
    if location_name:
        params["locationName"] = location_name

    try:
        async with httpx.AsyncClient(timeout=timeout_s) as client:
            resp = await client.get(url, params=params)
    except httpx.TimeoutException as e:
        raise CwaHttpError(f"CWA request timed out after {timeout_s}s") from e
    except httpx.RequestError as e:
        raise CwaHttpError(f"CWA request failed: {e}") from e

    if resp.is_error:
        raise CwaHttpError(_error_message(resp), status_code=resp.status_code)

    try:
        data = resp.json()
    except ValueError as e:
        raise CwaHttpError("CWA response is not valid JSON") from e

    if not isinstance(data, dict):
        raise CwaHttpError("CWA response is not a JSON object")

    # o CWA às vezes responde 200 com success="false"
    if str(data.get("success", "true")).lower() == "false":
        raise CwaHttpError(str(data.get("message") or "CWA reported success=false"))

    return data
