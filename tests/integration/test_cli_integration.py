import csv

import pytest

from text_analyser.cli import EXIT_ERROR, EXIT_INVALID_INPUT, EXIT_OK, main, read_document


@pytest.fixture
def documents(temp_directory, sample_texts):
    """Файлы корпуса во временной директории."""
    paths = {}
    for name in ("cat", "running", "ran", "pdf"):
        path = temp_directory / f"{name}.txt"
        path.write_text(sample_texts[name], encoding="utf-8")
        paths[name] = path
    return paths


@pytest.mark.integration
def test_analyze_prints_profile(documents, capsys):
    """Анализ документа: язык и частые слова в выводе."""
    code = main(["analyze", str(documents["cat"])])
    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "English" in out
    assert "cat" in out


@pytest.mark.integration
def test_analyze_garbage_file_exit_code(documents, capsys):
    """Отклонённый файл: причина в выводе и код 2."""
    code = main(["analyze", str(documents["pdf"])])
    out = capsys.readouterr().out
    assert code == EXIT_INVALID_INPUT
    assert "Garbage file detected" in out
    assert "PDF" in out


@pytest.mark.integration
def test_analyze_with_export(documents, temp_directory):
    """Экспорт отчёта в JSON в указанную папку."""
    out_dir = temp_directory / "results"
    code = main(["analyze", str(documents["cat"]), "--format", "json", "--output-dir", str(out_dir)])
    assert code == EXIT_OK
    exported = list(out_dir.glob("analysis_cat_*.json"))
    assert len(exported) == 1


@pytest.mark.integration
def test_classify(documents, capsys):
    code = main(["classify", str(documents["cat"]), str(documents["pdf"])])
    out = capsys.readouterr().out
    assert code == EXIT_INVALID_INPUT
    assert "cat.txt" in out and "pdf.txt" in out


@pytest.mark.integration
def test_search_across_documents(documents, temp_directory, capsys):
    """Поиск по основе: находится только документ с runs."""
    csv_path = temp_directory / "matches.csv"
    code = main([
        "search", "running",
        str(documents["running"]), str(documents["ran"]), str(documents["pdf"]),
        "--csv", str(csv_path),
    ])
    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "running.txt" in out
    assert "Garbage file detected" in out
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert [row[0] for row in rows[1:]] == ["running.txt"]
    assert rows[1][4] == "runs"


@pytest.mark.integration
def test_missing_file(temp_directory, capsys):
    code = main(["analyze", str(temp_directory / "missing.txt")])
    assert code == EXIT_ERROR
    assert "Ошибка" in capsys.readouterr().out


def test_no_command(capsys):
    assert main([]) == EXIT_ERROR


def test_read_document_latin1_fallback(temp_directory):
    """Не-UTF-8 байты читаются как Latin-1."""
    path = temp_directory / "latin.txt"
    path.write_bytes("niño".encode("latin-1"))
    assert read_document(path) == "niño"
