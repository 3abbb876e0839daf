"""Tests for dataset loading and the query facade."""

import json
import logging

import pytest

from bandscope.adapters.bandplan import BandPlanAdapter, compute_stats, find_defects
from bandscope.models import FilterCriteria, Permission


@pytest.fixture
def adapter(data_file):
    return BandPlanAdapter(data_file=str(data_file))


def names(result):
    return [detail.band.band for detail in result.bands]


class TestLoading:
    def test_loads_dataset_file(self, adapter):
        assert len(adapter.bands) == 6
        assert adapter.version == "test"
        assert adapter.source == "fixtures"

    def test_data_file_from_environment(self, data_file, monkeypatch):
        monkeypatch.setenv("BANDSCOPE_DATA_FILE", str(data_file))
        assert len(BandPlanAdapter().bands) == 6

    def test_packaged_dataset(self, monkeypatch):
        monkeypatch.delenv("BANDSCOPE_DATA_FILE", raising=False)
        adapter = BandPlanAdapter()
        assert adapter.bands
        assert adapter.version == "1.0"

    def test_top_level_list(self, tmp_path):
        path = tmp_path / "bands.json"
        path.write_text(json.dumps([{"band": "2m", "frequency": "144 - 146 MHz"}]))
        adapter = BandPlanAdapter(data_file=str(path))
        assert [b.band for b in adapter.bands] == ["2m"]
        assert adapter.version == "unknown"

    def test_missing_file_gives_empty_dataset(self, tmp_path):
        adapter = BandPlanAdapter(data_file=str(tmp_path / "missing.json"))
        assert adapter.bands == []
        assert adapter.search().count == 0
        assert adapter.get_summary() is None

    @pytest.mark.parametrize("content", ["{not json", '{"bands": 3}', "42"])
    def test_malformed_file_gives_empty_dataset(self, tmp_path, content):
        path = tmp_path / "bands.json"
        path.write_text(content)
        assert BandPlanAdapter(data_file=str(path)).bands == []

    def test_invalid_record_is_skipped(self, tmp_path, caplog):
        caplog.set_level(logging.WARNING, logger="bandscope")
        path = tmp_path / "bands.json"
        path.write_text(
            json.dumps(
                [
                    {"frequency": "144 - 146 MHz"},
                    {"band": "2m", "frequency": "144 - 146 MHz"},
                ]
            )
        )
        adapter = BandPlanAdapter(data_file=str(path))
        assert [b.band for b in adapter.bands] == ["2m"]
        assert "band_record_invalid" in caplog.text

    def test_unmatchable_bands_are_logged_and_kept(self, data_file, caplog):
        caplog.set_level(logging.WARNING, logger="bandscope")
        adapter = BandPlanAdapter(data_file=str(data_file))
        assert "band_range_unparseable" in caplog.text
        assert "Satelliti meteo" in [b.band for b in adapter.bands]


class TestSearch:
    def test_frequency_lookup(self, adapter):
        result = adapter.lookup_frequency(27_205)
        assert result.frequency == 27_205
        assert result.frequencyDisplay == "27.205 MHz"
        assert names(result) == ["11m CB"]
        detail = result.bands[0]
        assert detail.channel == "CB channel 25"
        assert detail.verdict.permission == Permission.ALLOWED
        assert detail.modes == ["AM", "FM"]

    def test_segment_modes_at_frequency(self, adapter):
        detail = adapter.lookup_frequency(14_050).bands[0]
        assert detail.modes == ["CW"]
        assert detail.segmentNote == "CW only"
        assert detail.channel is None

    def test_without_frequency_uses_band_modes(self, adapter):
        result = adapter.search(criteria=FilterCriteria(bandName="20m"))
        assert result.frequency is None
        assert result.frequencyDisplay is None
        assert result.bands[0].modes == ["CW", "SSB"]
        assert result.bands[0].segmentNote is None

    def test_out_of_domain_frequency_is_no_selection(self, adapter):
        result = adapter.search(frequency=3_000_001)
        assert result.frequency is None
        assert result.count == 6
        assert result.query == {"frequency": 3_000_001}

    def test_filters_apply_within_frequency_scope(self, adapter):
        result = adapter.search(frequency=433_500, criteria=FilterCriteria(usage="libero"))
        assert names(result) == ["70cm ISM"]
        assert result.query == {"frequency": 433_500, "usage": "libero"}

    def test_stats_follow_the_result_set(self, adapter):
        result = adapter.search(frequency=433_500)
        assert result.stats.total == 2
        assert result.stats.amateur == 1
        assert result.stats.free == 1

    def test_repeated_queries_do_not_narrow_the_dataset(self, adapter):
        adapter.lookup_frequency(14_200)
        assert adapter.search().count == 6


def test_filter_options(adapter):
    options = adapter.get_filter_options()
    assert options.bands == ["11m CB", "13cm ISM", "20m", "70cm", "70cm ISM", "Satelliti meteo"]
    assert options.usages == ["libero", "radioamatoriale", "ricezione"]
    assert options.countries == ["DE", "FR", "IT", "US"]


def test_summary(adapter):
    summary = adapter.get_summary()
    assert summary.totalBands == 6
    assert summary.unparseableBands == 1
    assert summary.stats.amateur == 2
    assert summary.stats.free == 3
    assert summary.frequencyRange["min"] == 14.0
    assert summary.frequencyRange["max"] == pytest.approx(2500)


def test_compute_stats_is_case_insensitive(make_band):
    stats = compute_stats([make_band(usage="LIBERO"), make_band(usage="Radioamatoriale"), make_band(usage="x")])
    assert (stats.total, stats.amateur, stats.free) == (3, 1, 1)


def test_find_defects(make_band):
    bands = [
        make_band(band="ok", segments=[{"start": 14000, "end": 14350, "modes": ["CW"]}]),
        make_band(band="bad text", frequency="14 MHz"),
        make_band(band="upside down", frequency="14.35 - 14.0 MHz"),
        make_band(
            band="segments",
            segments=[
                {"start": 14100, "end": 14050, "modes": []},
                {"start": 14300, "end": 14400, "modes": []},
            ],
        ),
    ]
    problems = [(d["band"], d["problem"], d.get("segment")) for d in find_defects(bands)]
    assert problems == [
        ("bad text", "unparseable", None),
        ("upside down", "inverted", None),
        ("segments", "segment_inverted", 0),
        ("segments", "segment_outside", 1),
    ]
