import read_and_write
from read_and_write import DEFAULT_LINE, read_lines, run, wryte


def test_append_then_read_ends_with_line(tmp_path):
    path = tmp_path / "read_and_write.txt"
    path.write_text("Buy milk\n")
    wryte(str(path))
    assert read_lines(str(path)) == ["Buy milk", "\r" + DEFAULT_LINE]


def test_run_prints_before_and_after(tmp_path, capsys):
    path = tmp_path / "read_and_write.txt"
    path.write_text("Buy milk\n")
    run(str(path))
    assert capsys.readouterr().out.split("\n")[:-1] == [
        "Buy milk",
        " ",
        "Buy milk",
        "\r" + DEFAULT_LINE,
    ]


def test_missing_file(tmp_path, capsys):
    path = tmp_path / "missing.txt"
    assert read_and_write.main(["--file", str(path)]) == 1
    assert capsys.readouterr().err == f"File not found: {path}\n"
    assert not path.exists()


def test_file_from_env(tmp_path, capsys, monkeypatch):
    path = tmp_path / "notes.txt"
    path.write_text("Feed the cat\n")
    monkeypatch.setenv("READ_AND_WRITE_FILE", str(path))
    assert read_and_write.main([]) == 0
    assert capsys.readouterr().out.split("\n")[-2] == "\r" + DEFAULT_LINE
