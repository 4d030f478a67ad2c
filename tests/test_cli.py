from cli import main, parse_args


def test_defaults_to_sample_log(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["Error 5 (158) some strange error"]


def test_min_severity_flag(capsys):
    assert main(["--min-severity", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Error 5 (158) some strange error",
        "Error 2 (148) istereadea",
    ]


def test_reads_log_file(tmp_path, capsys):
    path = tmp_path / "app.log"
    path.write_text("E,10,1,disk on fire\nI,2,fine\n", encoding="utf-8")

    assert main(["--log-file", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Error 10 (1) disk on fire"]


def test_show_all(sample_log_file, capsys):
    assert main(["--log-file", str(sample_log_file), "--show-all"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Info (147) mice in the air",
        "Warning (149) could've been bad",
        "Error 5 (158) some strange error",
        "Error 2 (148) istereadea",
    ]


def test_summary(tmp_path, capsys):
    path = tmp_path / "app.log"
    path.write_text("E,10,1,boom\nwho knows\n\nE,x,1,bad\n", encoding="utf-8")

    assert main(["--log-file", str(path), "--summary"]) == 0
    out = capsys.readouterr().out
    assert "Ingestion summary" in out
    assert "Parsed logs : 2" in out
    assert "known     : 1" in out
    assert "unknown   : 1" in out
    assert "Failed logs : 2" in out


def test_missing_file_exits_1(tmp_path, capsys):
    assert main(["--log-file", str(tmp_path / "missing.log")]) == 1
    assert "could not read" in capsys.readouterr().err


def test_env_provides_defaults(monkeypatch, sample_log_file):
    monkeypatch.setenv("LOGSIEVE_MIN_SEVERITY", "4")
    monkeypatch.setenv("LOGSIEVE_LOG_FILE", str(sample_log_file))

    args = parse_args([])

    assert args.min_severity == 4
    assert args.log_file == str(sample_log_file)
    assert args.log_level == "WARNING"


def test_verbose_forces_debug():
    assert parse_args(["-v"]).log_level == "DEBUG"


def test_bad_env_exits_1(monkeypatch, capsys):
    monkeypatch.setenv("LOGSIEVE_MIN_SEVERITY", "lots")
    assert main([]) == 1
    assert "LOGSIEVE_MIN_SEVERITY" in capsys.readouterr().err


def test_summary_trailing_newline_is_not_a_failure(tmp_path, capsys):
    path = tmp_path / "clean.log"
    path.write_text("I,1,a\nE,9,2,b\n", encoding="utf-8")

    assert main(["--log-file", str(path), "--summary"]) == 0
    out = capsys.readouterr().out
    assert "Parsed logs : 2" in out
    assert "Failed logs : 0" in out


def test_undecodable_file_exits_1(tmp_path, capsys):
    path = tmp_path / "latin1.log"
    path.write_bytes(b"E,9,1,caf\xe9\n")

    assert main(["--log-file", str(path)]) == 1
    captured = capsys.readouterr()
    assert "could not read" in captured.err
    assert captured.out == ""


def test_bad_log_level_exits_1(monkeypatch, capsys):
    monkeypatch.setenv("LOGSIEVE_LOG_LEVEL", "LOUD")
    assert main([]) == 1
    assert "LOGSIEVE_LOG_LEVEL" in capsys.readouterr().err
