import json

import pytest

from tshresults.cli import main

REPORT = "\n".join(
    [
        "Smith, Ann 1500 2; 412; board 3; p12 2;",
        "Jones, Bob 1400 1; 388; board 3; p12 1;",
        "",
    ]
)

BAD_REPORT = "Smith, Ann 1500 2; 412; board three; p12 2;\n"


@pytest.fixture
def report_dir(tmp_path, monkeypatch):
    (tmp_path / "a.t").write_text(REPORT, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_no_arguments_converts_report_files_here(report_dir, capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "A,1,Bob Jones,388,Ann Smith,412\n"


def test_bare_file_arguments_convert(report_dir, capsys):
    assert main(["a.t"]) == 0
    assert capsys.readouterr().out.splitlines() == ["A,1,Bob Jones,388,Ann Smith,412"]


def test_convert_to_json_file(report_dir):
    assert main(["convert", "a.t", "--format", "json", "--output", "out.json"]) == 0

    data = json.loads((report_dir / "out.json").read_text(encoding="utf-8"))
    assert data == [
        {
            "division": "A",
            "round": 1,
            "player1": "Bob Jones",
            "score1": 388,
            "player2": "Ann Smith",
            "score2": 412,
        }
    ]


def test_fatal_error_gives_exit_status_and_no_rows(report_dir, capsys):
    (report_dir / "b.t").write_text(BAD_REPORT, encoding="utf-8")

    assert main(["convert", "b.t", "a.t", "-q"]) == 1
    assert capsys.readouterr().out == ""


def test_keep_going_converts_remaining_files(report_dir, capsys):
    (report_dir / "b.t").write_text(BAD_REPORT, encoding="utf-8")

    assert main(["convert", "b.t", "a.t", "--keep-going", "-q"]) == 1
    assert capsys.readouterr().out == "A,1,Bob Jones,388,Ann Smith,412\n"


def test_check_prints_round_summary(report_dir, capsys):
    assert main(["check", "a.t", "-q"]) == 0

    out = capsys.readouterr().out
    assert "Division A" in out
    assert "Games: 1" in out
    assert "Round   1: 1 games, 0 byes, 2 players" in out


def test_config_file_sets_format(report_dir, capsys):
    (report_dir / "config.json").write_text(
        json.dumps({"output_format": "json", "log_level": "error"}), encoding="utf-8"
    )

    assert main(["convert", "a.t", "--config", "config.json"]) == 0
    assert json.loads(capsys.readouterr().out)[0]["player1"] == "Bob Jones"


def test_no_report_files_is_not_an_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert main(["-q"]) == 0
    assert capsys.readouterr().out == ""


def test_options_before_command_name(report_dir, capsys):
    assert main(["-q", "check", "a.t"]) == 0
    assert "Division A" in capsys.readouterr().out


def test_option_values_before_command_name(report_dir, capsys):
    (report_dir / "config.json").write_text(
        json.dumps({"log_level": "error"}), encoding="utf-8"
    )

    assert main(["--config", "config.json", "check", "a.t"]) == 0
    assert "Games: 1" in capsys.readouterr().out


def test_failed_batch_keeps_existing_output_file(report_dir, capsys):
    (report_dir / "b.t").write_text(BAD_REPORT, encoding="utf-8")
    (report_dir / "out.csv").write_text("previous results\n", encoding="utf-8")

    assert main(["convert", "b.t", "--output", "out.csv", "-q"]) == 1
    assert (report_dir / "out.csv").read_text(encoding="utf-8") == "previous results\n"


def test_invalid_config_value_gives_exit_status(report_dir):
    (report_dir / "config.json").write_text(
        json.dumps({"output_format": None}), encoding="utf-8"
    )

    assert main(["convert", "a.t", "--config", "config.json"]) == 1
