"""Tests for ingestion layer."""

import json
from pathlib import Path

import pytest

from miqaat.exceptions import IngestionError, UnsupportedFormatError
from miqaat.ingestion import setup_reader_registry
from miqaat.ingestion.base import ReaderRegistry
from miqaat.ingestion.csv_reader import CSVReader
from miqaat.ingestion.json_reader import JSONReader
from miqaat.models.miqaat import MiqaatType, Phase

CSV_HEADER = "id,name,description,date,month,location,type,date_night,month_night,priority,important,phase\n"


def test_reader_registry():
    """Test ReaderRegistry registration and retrieval."""
    registry = ReaderRegistry()
    json_reader = JSONReader()
    registry.register(json_reader, [".JSON"])

    assert registry.get_reader(Path("export.json")) is json_reader

    with pytest.raises(UnsupportedFormatError):
        registry.get_reader(Path("calendar.docx"))


def test_setup_reader_registry():
    registry = setup_reader_registry()
    assert registry.extensions == ["csv", "json"]
    assert isinstance(registry.get_reader(Path("a.json")), JSONReader)
    assert isinstance(registry.get_reader(Path("a.csv")), CSVReader)


def test_json_reader_list(tmp_path):
    path = tmp_path / "miqaats.json"
    path.write_text(json.dumps([{"name": "Ashura", "date": 10, "month": 1, "type": "shahadat"}]))

    result = JSONReader().read(path)
    assert len(result.miqaats) == 1
    assert result.miqaats[0].type == MiqaatType.SHAHADAT
    assert result.daily_duas == []


def test_json_reader_object(tmp_path):
    path = tmp_path / "export.json"
    path.write_text(
        json.dumps(
            {
                "miqaats": [{"name": "Ashura", "date": 10, "month": 1}],
                "daily_duas": [{"library_id": 4, "date": 1, "month": 9}],
            }
        )
    )

    result = JSONReader().read(path)
    assert [m.name for m in result.miqaats] == ["Ashura"]
    assert result.daily_duas[0].library_id == 4


def test_json_reader_unrecognized(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"events": []}))
    with pytest.raises(IngestionError):
        JSONReader().read(path)


def test_json_reader_invalid_record(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"name": "Bad", "month": 14}]))
    with pytest.raises(IngestionError):
        JSONReader().read(path)


def test_json_reader_malformed(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(IngestionError):
        JSONReader().read(path)


def test_csv_reader(tmp_path):
    path = tmp_path / "miqaat.csv"
    path.write_text(
        CSV_HEADER
        + "1,Ashura,Shahadat of Imam Husain,10,1,NULL,SHAHADAT,10,1,1,true,DAY\n"
        + "2,Pehli Raat,,NULL,NULL,,PEHLI_RAAT,1,9,,false,NIGHT\n"
    )

    result = CSVReader().read(path)
    assert result.skipped == 0
    ashura, pehli_raat = result.miqaats
    assert ashura.description == "Shahadat of Imam Husain"
    assert ashura.location is None
    assert ashura.important is True
    assert ashura.priority == 1
    assert pehli_raat.date is None
    assert pehli_raat.has_night_slot
    assert pehli_raat.phase == Phase.NIGHT


def test_csv_reader_lenient_values(tmp_path):
    path = tmp_path / "miqaat.csv"
    path.write_text(CSV_HEADER + "1,Majlis,,ten,1,,PICNIC,,,,yes,EVENING\n")

    miqaat = CSVReader().read(path).miqaats[0]
    assert miqaat.date is None
    assert miqaat.type is None
    assert miqaat.phase == Phase.DAY
    assert miqaat.important is False


def test_csv_reader_skips_bad_rows(tmp_path):
    path = tmp_path / "miqaat.csv"
    path.write_text(
        CSV_HEADER
        + "1,,,10,1,,,,,,,\n"
        + "2,Too Late,,31,1,,,,,,,\n"
        + "3,Fine,,5,3,,URS,,,,,\n"
    )

    result = CSVReader().read(path)
    assert [m.name for m in result.miqaats] == ["Fine"]
    assert result.skipped == 2


def test_csv_reader_empty(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text(CSV_HEADER)
    with pytest.raises(IngestionError):
        CSVReader().read(path)
