# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

"""
Perfis de datasets do CWA.


- `SHAPE_*`: formatos de container conhecidos para a lista de localidades.
- `ATTRIBUTE_ALIASES`: nomes upstream aceitos por atributo lógico (ordem fixa).
- `profile_for(dataset_id)` devolve o perfil (ordem de formatos + nomes preferidos).
- Dataset desconhecido → perfil default (ordem padrão, só aliases globais).
"""

SHAPE_FLAT = "flat"          # records.location[]
SHAPE_WRAPPED = "wrapped"    # records.locations[0].location[]
SHAPE_SINGLE = "single"      # um único registro, sem filtro por nome

DEFAULT_SHAPE_ORDER: Tuple[str, ...] = (SHAPE_FLAT, SHAPE_WRAPPED, SHAPE_SINGLE)

WEATHER_CONDITION = "weather_condition"
PRECIPITATION_PROBABILITY = "precipitation_probability"
MIN_TEMPERATURE = "min_temperature"
MAX_TEMPERATURE = "max_temperature"
COMFORT_INDEX = "comfort_index"
WIND_SPEED = "wind_speed"

ATTRIBUTE_ALIASES: Dict[str, Tuple[str, ...]] = {
    WEATHER_CONDITION:         ("Wx", "WeatherDescription"),
    PRECIPITATION_PROBABILITY: ("PoP", "PoP12h", "PoP6h"),
    MIN_TEMPERATURE:           ("MinT", "TMin"),
    # F-D0047 antigo só trazia "T"
    MAX_TEMPERATURE:           ("MaxT", "TMax", "T"),
    COMFORT_INDEX:             ("CI", "MaxCI", "MinCI"),
    WIND_SPEED:                ("WS",),
}


@dataclass(frozen=True)
class DatasetProfile:
    name: str
    shape_order: Tuple[str, ...] = DEFAULT_SHAPE_ORDER
    preferred: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    def candidates(self, attribute: str) -> Tuple[str, ...]:
        """Nomes preferidos do dataset primeiro, depois os aliases globais restantes."""
        first = self.preferred.get(attribute, ())
        rest = tuple(n for n in ATTRIBUTE_ALIASES.get(attribute, ()) if n not in first)
        return first + rest


DEFAULT_PROFILE = DatasetProfile(name="default")

# chave: prefixo do dataset id
DATASET_PROFILES: Dict[str, DatasetProfile] = {
    "F-C0032-": DatasetProfile(
        name="county-36h",
        shape_order=(SHAPE_FLAT, SHAPE_WRAPPED, SHAPE_SINGLE),
        preferred={
            PRECIPITATION_PROBABILITY: ("PoP",),
            MIN_TEMPERATURE: ("MinT",),
            MAX_TEMPERATURE: ("MaxT",),
        },
    ),
    "F-D0047-": DatasetProfile(
        name="township",
        shape_order=(SHAPE_WRAPPED, SHAPE_FLAT, SHAPE_SINGLE),
        preferred={
            PRECIPITATION_PROBABILITY: ("PoP12h", "PoP6h", "PoP"),
            MIN_TEMPERATURE: ("MinT",),
            MAX_TEMPERATURE: ("MaxT",),
        },
    ),
}


def profile_for(dataset_id: Optional[str]) -> DatasetProfile:
    if not dataset_id:
        return DEFAULT_PROFILE
    key = dataset_id.strip().upper()
    for prefix, profile in DATASET_PROFILES.items():
        if key.startswith(prefix):
            return profile
    return DEFAULT_PROFILE
