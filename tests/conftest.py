"""Shared fixtures for the bandscope tests."""

import json

import pytest

from bandscope.models import Band


@pytest.fixture
def make_band():
    """Build a Band with sensible defaults for the fields a test ignores."""

    def _make(**fields) -> Band:
        record = {
            "band": "20m",
            "frequency": "14.0 - 14.35 MHz",
            "assignment": "Servizio di radioamatore",
            "usage": "radioamatoriale",
            "transmission": True,
        }
        record.update(fields)
        return Band(**record)

    return _make


@pytest.fixture
def bands(make_band):
    """A small dataset with overlapping, channelized and unparseable bands."""
    return [
        make_band(
            band="20m",
            modes=["CW", "SSB"],
            segments=[
                {"start": 14000, "end": 14070, "modes": ["CW"], "note": "CW only"},
                {"start": 14070, "end": 14099, "modes": ["Digital"]},
            ],
            countries=["IT", "DE"],
        ),
        make_band(
            band="11m CB",
            frequency="26.965 - 27.405 MHz",
            assignment="Banda cittadina",
            usage="libero",
            modes=["AM", "FM"],
            countries=["IT", "FR"],
        ),
        make_band(
            band="70cm",
            frequency="430 - 440 MHz",
            usage="radioamatoriale",
            countries=["IT"],
        ),
        make_band(
            band="70cm ISM",
            frequency="433.05 - 434.79 MHz",
            assignment="LPD",
            usage="libero",
        ),
        make_band(
            band="Satelliti meteo",
            frequency="137.1 / 137.9125 MHz",
            usage="ricezione",
            transmission=False,
        ),
        make_band(
            band="13cm ISM",
            frequency="2.4 - 2.5 GHz",
            assignment="Wi-Fi",
            usage="Libero",
            countries=["us"],
        ),
    ]


@pytest.fixture
def data_file(tmp_path, bands):
    """Write the ``bands`` fixture to a dataset file and return its path."""
    path = tmp_path / "bands.json"
    path.write_text(
        json.dumps(
            {
                "version": "test",
                "source": "fixtures",
                "bands": [band.model_dump(exclude_none=True) for band in bands],
            }
        ),
        encoding="utf-8",
    )
    return path
