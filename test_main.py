"""Tests for the configuration model and the command line runner."""

import json

import pytest
from pydantic import ValidationError

import main
from config_models import DeckConfiguration, load_configuration


def test_default_configuration():
    config = DeckConfiguration()
    assert config.tile_count == 108
    assert config.tile_quantity == 3
    assert config.shuffle_seed == 1337


def test_load_configuration(tmp_path):
    path = tmp_path / "deck.json"
    path.write_text(json.dumps({"tile_count": 30, "tile_quantity": 1}))

    config = load_configuration(path)
    assert config.tile_count == 30
    assert config.tile_quantity == 1
    assert config.shuffle_seed == 1337


def test_load_configuration_rejects_unknown_keys(tmp_path):
    path = tmp_path / "deck.json"
    path.write_text(json.dumps({"tile_colours": 7}))

    with pytest.raises(ValidationError):
        load_configuration(path)


def test_command_line_overrides_file(tmp_path):
    path = tmp_path / "deck.json"
    path.write_text(json.dumps({"tile_count": 30, "tile_quantity": 1, "shuffle_seed": 7}))

    args = main.parse_args(["--config", str(path), "--count", "12", "--seed", "99"])
    config = main.resolve_configuration(args)
    assert config == DeckConfiguration(tile_count=12, tile_quantity=1, shuffle_seed=99)


def test_main_prints_queue(capsys):
    assert main.main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith("This is the queue:\n[(")
    assert out.count("(") == 108
    assert "Unknown" not in out


def test_main_output_is_reproducible(capsys):
    main.main([])
    first = capsys.readouterr().out
    main.main([])
    assert capsys.readouterr().out == first


def test_main_small_queue(capsys):
    assert main.main(["--count", "2", "--quantity", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("(") == 2
    assert "(Red Circle)" in out
    assert "(Red 4ptStar)" in out


def test_main_reports_bad_configuration(tmp_path, capsys):
    path = tmp_path / "deck.json"
    path.write_text("{not json")

    assert main.main(["--config", str(path)]) == 1
    assert "Error loading configuration" in capsys.readouterr().out


def test_main_reports_missing_configuration(tmp_path, capsys):
    assert main.main(["--config", str(tmp_path / "missing.json")]) == 1
    assert "Error loading configuration" in capsys.readouterr().out


def test_main_reports_undecodable_configuration(tmp_path, capsys):
    path = tmp_path / "deck.json"
    path.write_bytes(b'{"tile_count": 1\xff}')

    assert main.main(["--config", str(path)]) == 1
    assert "Error loading configuration" in capsys.readouterr().out
