import json
import logging

import pytest

from monster_sweeper.__main__ import build_config, build_parser, main


def read_records(capsys):
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


def test_script_run_prints_records_and_summary(tmp_path, capsys):
    script = tmp_path / "cmds.txt"
    script.write_text("3 0\nhelp\nbogus\na\n\nexit\n0 0\n", encoding="utf-8")

    assert main(["--seed", "7", "--script", str(script)]) == 0
    records = read_records(capsys)

    assert records[0]["command"] == "move"
    assert records[0]["position"] == [3, 0]
    assert records[1]["command"] == "help"
    assert "error" in records[2]
    assert records[3]["command"] == "attack"
    assert records[4]["command"] == "quit"
    # input after quit is not processed
    assert len(records) == 6
    summary = records[-1]["summary"]
    assert summary["status"] == "quit"
    assert summary["stats"]["moves"] == 1


def test_same_seed_same_output(tmp_path, capsys):
    script = tmp_path / "cmds.txt"
    script.write_text("5 5\na\n15 15\na\n", encoding="utf-8")
    main(["--seed", "run-1", "--script", str(script)])
    first = capsys.readouterr().out
    main(["--seed", "run-1", "--script", str(script)])
    assert capsys.readouterr().out == first


def test_overrides_applied():
    args = build_parser().parse_args(["--width", "8", "--height", "4", "--max-floor", "2", "--seed", "12"])
    cfg = build_config(args)
    assert (cfg.floor.width, cfg.floor.height, cfg.floor.max_floor) == (8, 4, 2)
    assert cfg.seed == 12


def test_invalid_config_exit_code():
    assert main(["--width", "0", "--script", "unused.txt"]) == 2


@pytest.mark.parametrize("seed", ["--5", "²", "-x"])
def test_non_integer_seeds_are_string_seeds(seed):
    args = build_parser().parse_args([f"--seed={seed}"])
    assert build_config(args).seed == seed


def test_negative_integer_seed():
    args = build_parser().parse_args(["--seed=-5"])
    assert build_config(args).seed == -5


def test_dash_prefixed_seed_runs(tmp_path, capsys):
    script = tmp_path / "cmds.txt"
    script.write_text("1 1\n", encoding="utf-8")
    assert main(["--seed=--5", "--script", str(script)]) == 0
    assert read_records(capsys)[-1]["summary"]["player"]["position"] == [1, 1]


def test_missing_script_exit_code(tmp_path, caplog):
    missing = tmp_path / "absent.txt"
    with caplog.at_level(logging.ERROR, logger="monster_sweeper.__main__"):
        assert main(["--script", str(missing)]) == 2
    assert any("absent.txt" in r.getMessage() for r in caplog.records)
