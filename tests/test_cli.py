from irpfm.cli import main


def test_main_processes_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "lib.h").write_text("decl\n")
    (tmp_path / "build.fm").write_text("use: lib;\n")
    assert main(["build.fm"]) == 0
    assert (tmp_path / "lib.i").read_text() == "start_use @lib.i @line 0\ndecl\n\nend_use\n"


def test_main_quiet_without_flag(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "build.fm").write_text("link: prog;\n")
    assert main(["build.fm"]) == 0
    assert capsys.readouterr().out == ""


def test_main_echoes_with_flag(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "build.fm").write_text("link: prog;\n")
    assert main(["-o", "build.fm"]) == 0
    out = capsys.readouterr().out
    assert " link\n" in out
    assert " prog\n" in out


def test_main_missing_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["nothing.fm"]) == 1
    assert capsys.readouterr().out.startswith("Failed to open nothing.fm")


def test_main_no_input(capsys):
    assert main([]) == 1
    assert "Failed to open" in capsys.readouterr().out


def test_main_reports_lexer_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.fm").write_text("use: #\n")
    assert main(["bad.fm"]) == 1
    assert capsys.readouterr().err == "error: Unrecognized character: #\n"