"""Tests for the uuid-to-pokemon command line."""

import uuid
from unittest.mock import patch

import pytest

from uuid_pokemon.cli.main import main, parse_uuids, run, run_decode


def test_prints_uuid_and_label(capsys):
    """Each UUID is printed with its label, tab separated."""
    result = run([
        "00000000-0000-0000-0000-000000000000",
        "43654e77-0aa4-4551-b545-b0ec6f895f53",
    ])

    out, err = capsys.readouterr()
    assert result == 0
    assert out.splitlines() == [
        "00000000-0000-0000-0000-000000000000\tBusy bulbasaur",
        "43654e77-0aa4-4551-b545-b0ec6f895f53\tAmusing furret",
    ]
    assert err == ""


def test_uppercase_and_braced_uuids_accepted(capsys):
    """Any form uuid.UUID parses is accepted and printed canonically."""
    result = run(["{CA5DA036-8C9E-473D-9392-03BE3E928A21}"])

    out, _ = capsys.readouterr()
    assert result == 0
    assert out == "ca5da036-8c9e-473d-9392-03be3e928a21\tGreat mienshao\n"


def test_no_arguments_generates_random_uuid(capsys):
    """With no arguments a fresh UUID is generated."""
    fixed = uuid.UUID("ca5da036-8c9e-473d-9392-03be3e928a21")
    with patch("uuid_pokemon.cli.main.uuid.uuid4", return_value=fixed):
        result = run([])

    out, _ = capsys.readouterr()
    assert result == 0
    assert out == f"{fixed}\tGreat mienshao\n"


def test_invalid_uuid_fails_without_output(capsys):
    """Any invalid argument suppresses all output and exits non-zero."""
    result = run([
        "00000000-0000-0000-0000-000000000000",
        "not-a-uuid",
        "1234",
    ])

    out, err = capsys.readouterr()
    assert result == 1
    assert out == ""
    assert err.splitlines() == [
        "not-a-uuid is not a valid UUID",
        "1234 is not a valid UUID",
    ]


def test_parse_uuids_keeps_order():
    """Valid and invalid arguments are split in argument order."""
    uuids, errors = parse_uuids(["x", str(uuid.UUID(int=1)), "y"])
    assert uuids == [uuid.UUID(int=1)]
    assert errors == ["x", "y"]


def test_decode_known_labels(capsys):
    """--decode echoes known labels."""
    result = run_decode(["Busy bulbasaur", "Cranky floette-eternal"])

    out, err = capsys.readouterr()
    assert result == 0
    assert out.splitlines() == ["Busy bulbasaur", "Cranky floette-eternal"]
    assert err == ""


def test_decode_unknown_label(capsys):
    """--decode reports unknown labels and exits non-zero."""
    result = run_decode(["Busy bulbasaur", "busy bulbasaur"])

    out, err = capsys.readouterr()
    assert result == 1
    assert out == ""
    assert "'busy bulbasaur' is not a known pokemon label" in err


def test_main_returns_exit_code(capsys):
    """main() parses arguments and returns the exit code."""
    assert main(["00000000-0000-0000-0000-000000000000"]) == 0
    assert main(["bad"]) == 1
    assert main(["--decode", "Great mienshao"]) == 0


def test_main_rejects_unknown_log_level():
    """argparse rejects log levels outside the allowed choices."""
    with pytest.raises(SystemExit):
        main(["--log-level", "TRACE"])


def test_log_level_from_environment(capsys):
    """The default log level can come from the environment."""
    with patch.dict("os.environ", {"UUID_POKEMON_LOG_LEVEL": "debug"}):
        with patch("uuid_pokemon.cli.main.logging.basicConfig") as basic_config:
            assert main([str(uuid.UUID(int=0))]) == 0

    assert basic_config.call_args.kwargs["level"] == 10


def test_unknown_option_reported_as_invalid_uuid(capsys):
    """Dash-prefixed arguments get the invalid UUID error, not a usage error."""
    result = main(["--nope", str(uuid.UUID(int=0))])

    out, err = capsys.readouterr()
    assert result == 1
    assert out == ""
    assert err == "--nope is not a valid UUID\n"


def test_decode_requires_a_label(capsys):
    """--decode without labels is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--decode"])

    _, err = capsys.readouterr()
    assert exc_info.value.code == 2
    assert "--decode requires at least one label" in err
