"""Tests for locating the place record inside the raw CWA payload."""

from cwa_payloads import element, flat_payload, param_entry, place, single_payload, wrapped_payload
from cwa_forecast.services.forecast_locate import describe_dataset, locate_place
from cwa_forecast.services.forecast_types import PlaceNotFound, PlaceRecord
from cwa_forecast.utils.datasets import (
    SHAPE_FLAT,
    SHAPE_SINGLE,
    SHAPE_WRAPPED,
    profile_for,
)


def _wx_place(name: str) -> dict:
    return place(name, [element("Wx", [param_entry(0, "晴")])])


class TestDatasetProfiles:
    def test_township_tries_wrapped_first(self):
        assert profile_for("F-D0047-003").shape_order[0] == SHAPE_WRAPPED

    def test_county_tries_flat_first(self):
        assert profile_for("F-C0032-001").shape_order[0] == SHAPE_FLAT

    def test_unknown_uses_default_order(self):
        assert profile_for("O-A0001-001").shape_order == (SHAPE_FLAT, SHAPE_WRAPPED, SHAPE_SINGLE)
        assert profile_for(None).name == "default"

    def test_candidates_put_preferred_first(self):
        assert profile_for("F-D0047-091").candidates("precipitation_probability") == ("PoP12h", "PoP6h", "PoP")
        assert profile_for(None).candidates("min_temperature") == ("MinT", "TMin")


class TestContainerShapes:
    def test_flat_list(self):
        raw = flat_payload(_wx_place("宜蘭縣"), _wx_place("花蓮縣"))
        record = locate_place(raw, "F-C0032-001", "花蓮縣")
        assert isinstance(record, PlaceRecord)
        assert record.place_name == "花蓮縣"
        assert record.shape == SHAPE_FLAT
        assert list(record.attribute_series) == ["Wx"]

    def test_wrapped_list(self):
        raw = wrapped_payload(_wx_place("宜蘭市"), _wx_place("羅東鎮"))
        record = locate_place(raw, "F-D0047-003", "羅東鎮")
        assert isinstance(record, PlaceRecord)
        assert record.place_name == "羅東鎮"
        assert record.shape == SHAPE_WRAPPED

    def test_wrapped_list_with_unknown_dataset(self):
        raw = wrapped_payload(_wx_place("宜蘭市"))
        record = locate_place(raw, None, "宜蘭市")
        assert isinstance(record, PlaceRecord)
        assert record.shape == SHAPE_WRAPPED

    def test_single_entry_ignores_name(self):
        raw = single_payload(_wx_place("宜蘭縣"))
        record = locate_place(raw, "F-D0047-003", "宜蘭市")
        assert isinstance(record, PlaceRecord)
        assert record.place_name == "宜蘭縣"
        assert record.shape == SHAPE_SINGLE

    def test_single_location_mapping(self):
        raw = {"records": {"location": _wx_place("宜蘭縣")}}
        record = locate_place(raw, None, None)
        assert isinstance(record, PlaceRecord)
        assert record.shape == SHAPE_SINGLE

    def test_no_name_selects_first(self):
        raw = flat_payload(_wx_place("宜蘭縣"), _wx_place("花蓮縣"))
        record = locate_place(raw, "F-C0032-001")
        assert record.place_name == "宜蘭縣"

    def test_blank_name_selects_first(self):
        raw = flat_payload(_wx_place("宜蘭縣"), _wx_place("花蓮縣"))
        for blank in ("", "   "):
            record = locate_place(raw, "F-C0032-001", blank)
            assert isinstance(record, PlaceRecord)
            assert record.place_name == "宜蘭縣"


class TestNotFound:
    def test_name_mismatch_lists_available(self):
        raw = flat_payload(_wx_place("宜蘭市"))
        result = locate_place(raw, "F-D0047-003", "不存在")
        assert result == PlaceNotFound(requested_place_name="不存在", available_place_names=("宜蘭市",))

    def test_exact_match_only(self):
        raw = flat_payload(_wx_place("臺北市"))
        result = locate_place(raw, None, "台北市")
        assert isinstance(result, PlaceNotFound)

    def test_empty_container(self):
        raw = wrapped_payload()
        result = locate_place(raw, "F-D0047-003", "宜蘭市")
        assert isinstance(result, PlaceNotFound)
        assert result.available_place_names == ()

    def test_unrecognized_payload(self):
        for raw in (None, [], {}, {"records": []}, {"records": {"foo": 1}}, {"result": {}}):
            result = locate_place(raw, "F-D0047-003", "宜蘭市")
            assert isinstance(result, PlaceNotFound)
            assert result.available_place_names is None

    def test_non_mapping_candidates_skipped(self):
        raw = {"records": {"location": [None, "x", _wx_place("宜蘭縣")]}}
        record = locate_place(raw, None, "宜蘭縣")
        assert isinstance(record, PlaceRecord)


class TestPlaceRecord:
    def test_groups_series_and_tolerates_junk(self):
        raw = flat_payload(place("宜蘭縣", [
            element("Wx", [param_entry(0, "晴"), param_entry(1, "雨")]),
            {"description": "no name"},
            "junk",
            {"elementName": "PoP", "time": None},
            {"elementName": ["Wx"], "time": []},
            {"elementName": {"name": "WS"}, "time": [param_entry(0, "3")]},
            {"elementName": 7, "time": []},
            element("Wx", [param_entry(0, "陰")]),
        ]))
        record = locate_place(raw, None, "宜蘭縣")
        assert set(record.attribute_series) == {"Wx", "PoP"}
        # the later Wx overwrites the earlier one
        assert len(record.attribute_series["Wx"]) == 1
        assert record.attribute_series["PoP"] == ()

    def test_data_time_used_as_start(self):
        raw = flat_payload(place("宜蘭縣", [
            element("T", [{"dataTime": "2025-01-01 12:00:00", "elementValue": [{"value": "20"}]}]),
        ]))
        record = locate_place(raw, None, None)
        sample = record.attribute_series["T"][0]
        assert sample.start_time == "2025-01-01 12:00:00"
        assert sample.end_time is None


class TestDescribeDataset:
    def test_flat(self):
        assert describe_dataset(flat_payload()) == "三十六小時天氣預報"

    def test_wrapped(self):
        assert describe_dataset(wrapped_payload()) == "宜蘭縣未來1週天氣預報"

    def test_dataset_info(self):
        raw = {"records": {"datasetInfo": {"datasetDescription": "一週天氣預報"}}}
        assert describe_dataset(raw) == "一週天氣預報"

    def test_missing(self):
        assert describe_dataset({"records": {}}) is None
        assert describe_dataset("nope") is None


class TestNonTextFields:
    def test_times_and_names_are_text_or_none(self):
        raw = flat_payload({
            "locationName": ["宜蘭縣"],
            "weatherElement": [element("Wx", [
                {"startTime": 1700000000, "endTime": None, "parameter": {"parameterName": "晴"}},
                {"startTime": {"iso": "x"}, "endTime": True, "dataTime": "2025-01-01 12:00:00"},
            ])],
        })
        record = locate_place(raw, None, None)
        first, second = record.attribute_series["Wx"]
        assert (first.start_time, first.end_time) == ("1700000000", None)
        assert (second.start_time, second.end_time) == ("2025-01-01 12:00:00", None)
        assert record.place_name is None
