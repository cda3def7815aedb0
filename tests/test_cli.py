import io

from feeengine.cli import main


def test_cli_uppercases(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello world"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "HELLO WORLD" in out
    assert out == "HELLO WORLD\n"


def test_cli_full_unicode_uppercase(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("straße"))
    main()
    assert capsys.readouterr().out == "STRASSE\n"


def test_cli_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main([])
    assert capsys.readouterr().out == "\n"