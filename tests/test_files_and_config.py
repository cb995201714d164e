import json
from pathlib import Path

import pytest

from tshresults.exceptions import FileLoadException, InvalidConfigurationException
from tshresults.files import division_from_path, find_report_files, read_report_lines
from tshresults.models.conversion_config import ConversionConfig, load_configuration


def test_division_is_upper_case_base_name():
    assert division_from_path(Path("reports") / "premier.t") == "PREMIER"
    assert division_from_path("notes.txt") == "NOTES.TXT"


def test_explicit_files_are_kept_in_order():
    assert find_report_files(["b.t", "a.t"]) == [Path("b.t"), Path("a.t")]


def test_report_files_are_discovered_by_extension(tmp_path):
    for name in ("b.t", "a.t", "notes.txt"):
        (tmp_path / name).write_text("", encoding="utf-8")

    found = find_report_files(None, directory=tmp_path)

    assert [p.name for p in found] == ["a.t", "b.t"]


def test_read_report_lines_splits_on_newlines(tmp_path):
    path = tmp_path / "a.t"
    path.write_text("one\ntwo\n", encoding="utf-8")

    assert read_report_lines(path) == ["one", "two", ""]


def test_missing_report_file(tmp_path):
    with pytest.raises(FileLoadException):
        read_report_lines(tmp_path / "missing.t")


def test_config_round_trip():
    config = ConversionConfig(output_format="JSON", keep_going=True)

    assert config.output_format == "json"
    assert ConversionConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "values",
    [
        {"output_format": "xml"},
        {"log_level": "LOUD"},
        {"colour": "red"},
        {"output_format": None},
        {"log_level": 10},
        {"extension": 1},
        {"encoding": None},
        {"keep_going": "yes"},
        {"strict_rounds": 1},
    ],
)
def test_invalid_config_values(values):
    with pytest.raises(InvalidConfigurationException):
        ConversionConfig.from_dict(values)


def test_load_configuration_from_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"strict_rounds": True}), encoding="utf-8")

    assert load_configuration(path) == {"strict_rounds": True}
    assert load_configuration(None) == {}


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_load_configuration_rejects_bad_files(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(InvalidConfigurationException):
        load_configuration(path)
