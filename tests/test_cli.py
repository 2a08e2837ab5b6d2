import pytest

from drillbook.cli import main


def test_main_prints_greeting(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello, World!"


def test_main_rejects_unknown_arguments(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""