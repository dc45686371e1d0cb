import json

from tagnt_tr.__main__ import main


def test_gematria_command(capsys):
    assert main(["gematria", "λόγος"]) == 0
    assert "standard=373 ordinal=62 reduced=26" in capsys.readouterr().out


def test_gematria_command_json(capsys):
    assert main(["gematria", "ἀρχῇ", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["gematria"]["standard"] == 719


def test_import_command(parquet_file, tmp_path, capsys):
    out = tmp_path / "cli-data"
    assert main(["import", "--parquet", str(parquet_file), "--data-dir", str(out)]) == 0
    assert (out / "John" / "1" / "1.json").is_file()
    assert "Verses written: 4" in capsys.readouterr().out


def test_import_command_failure(tmp_path, capsys):
    rc = main(["import", "--parquet", str(tmp_path / "missing.parquet"), "--data-dir", str(tmp_path / "d")])
    assert rc == 1
    assert "Import failed" in capsys.readouterr().out


def test_verse_command(data_dir, capsys):
    assert main(["verse", "John", "1", "1", "--data-dir", str(data_dir), "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["gematria"]["standard"] == 3627


def test_search_command(data_dir, capsys):
    assert main(["search", "--text", "λόγος", "--kind", "word", "--data-dir", str(data_dir), "--json"]) == 0
    hits = json.loads(capsys.readouterr().out)
    assert [h["position"] for h in hits] == [5, 8, 17]


def test_search_command_no_matches(data_dir, capsys):
    assert main(["search", "--value", "1", "--data-dir", str(data_dir)]) == 0
    assert "No matches." in capsys.readouterr().out
