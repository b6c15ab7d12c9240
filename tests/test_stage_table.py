"""Tests for loading the brewing stage table."""
import tempfile
from pathlib import Path
import pytest
from brewhouse.sequencer.stages import (
    DEFAULT_STAGES,
    StageTableError,
    load_stage_definitions,
    parse_stage_table,
)


def test_default_table_without_path():
    stages = load_stage_definitions(None)

    assert stages is DEFAULT_STAGES
    assert [s.id for s in stages] == [
        "milling", "mashing", "lautering", "boiling", "cooling", "fermentation", "conditioning",
    ]
    assert stages[1].temperature == 152
    assert stages[-1].duration == 20160


def test_load_from_yaml_file():
    content = """
stages:
  - id: strike
    name: Strike Water
    description: Heat strike water
    duration: 20
    temperature: 165
  - id: mash
    name: Mash
    duration: 60
    notes: Stir at 30 minutes
"""
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "stages.yaml"
        path.write_text(content, encoding="utf-8")

        stages = load_stage_definitions(str(path))

    assert len(stages) == 2
    assert stages[0].id == "strike"
    assert stages[0].temperature == 165
    assert stages[1].description == ""
    assert stages[1].notes == "Stir at 30 minutes"


def test_bare_list_is_accepted():
    stages = parse_stage_table([{"id": "boil", "name": "Boil", "duration": 90}])
    assert stages[0].duration == 90


def test_missing_file_raises():
    with pytest.raises(StageTableError):
        load_stage_definitions("/nonexistent/stages.yaml")


def test_invalid_yaml_raises():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "stages.yaml"
        path.write_text("stages: [unclosed", encoding="utf-8")
        with pytest.raises(StageTableError):
            load_stage_definitions(str(path))


@pytest.mark.parametrize("data", [
    None,
    [],
    {"stages": []},
    [{"id": "boil", "name": "Boil"}],
    [{"id": "boil", "name": "Boil", "duration": -5}],
    [{"id": "boil", "name": "Boil", "duration": "ninety"}],
    [{"id": "boil", "name": "Boil", "duration": 90, "temperature": "hot"}],
    [{"id": "boil", "name": "Boil", "duration": 90}, {"id": "boil", "name": "Again", "duration": 10}],
    ["boil"],
])
def test_bad_tables_rejected(data):
    with pytest.raises(StageTableError):
        parse_stage_table(data)
