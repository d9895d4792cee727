"""Shared test fixtures."""

import pytest

from cwa_payloads import ev_entry, element, flat_payload, param_entry, place, wrapped_payload
from cwa_forecast.core.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        CWA_API_KEY="CWA-TEST-KEY",
        CWA_API_BASE_URL="https://test-cwa.example.com/api",
        CWA_TIMEOUT_S=1,
        CWA_DEFAULT_DATASET="F-D0047-003",
        CWA_DEFAULT_TOWN="宜蘭市",
    )


@pytest.fixture
def yilan_36h_payload() -> dict:
    """F-C0032-001 style: flat location list, values under parameter.parameterName."""
    return flat_payload(
        place("宜蘭縣", [
            element("Wx", [param_entry(i, w) for i, w in enumerate(["晴", "多雲", "陰"])]),
            element("PoP", [param_entry(i, p) for i, p in enumerate(["0", "10", "30"])]),
            element("MinT", [param_entry(i, t) for i, t in enumerate(["18", "17", "19"])]),
            element("MaxT", [param_entry(i, t) for i, t in enumerate(["25", "24", "26"])]),
            element("CI", [param_entry(i, c) for i, c in enumerate(["舒適", "稍有寒意", "舒適"])]),
        ]),
        place("臺北市", [
            element("Wx", [param_entry(0, "陣雨")]),
        ]),
    )


@pytest.fixture
def yilan_weekly_payload() -> dict:
    """F-D0047-003 style: wrapped location list, values under elementValue[0].value."""
    return wrapped_payload(
        place("宜蘭市", [
            element("Wx", [ev_entry(i, w) for i, w in enumerate(["晴", "多雲", "陰", "短暫雨"])]),
            element("PoP12h", [ev_entry(i, p, "百分比") for i, p in enumerate(["0", "10", "20", "60"])]),
            element("MinT", [ev_entry(i, t, "攝氏度") for i, t in enumerate(["16", "17", "18", "17"])]),
            element("MaxT", [ev_entry(i, t, "攝氏度") for i, t in enumerate(["22", "23", "24", "21"])]),
            element("WS", [ev_entry(i, s, "公尺/秒") for i, s in enumerate(["2", "3", "3", "5"])]),
        ]),
        place("羅東鎮", [
            element("Wx", [ev_entry(0, "晴")]),
        ]),
    )
