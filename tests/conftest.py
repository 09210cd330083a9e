import sys
from pathlib import Path

import pytest

# Тесты работают и без установки пакета: добавляем путь к src
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from text_analyser.components.stop_words import StopWordSets  # noqa: E402
from text_analyser.components.search_engine import SearchEngine  # noqa: E402
from text_analyser.document_analyzer import DocumentAnalyzer  # noqa: E402


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы текстов для тестирования."""
    from .fixtures import sample_texts as samples

    return {
        "cat": samples.SAMPLE_CAT_TEXT,
        "running": samples.SAMPLE_RUNNING_TEXT,
        "ran": samples.SAMPLE_RAN_TEXT,
        "wildcard": samples.SAMPLE_WILDCARD_TEXT,
        "pdf": samples.SAMPLE_PDF_TEXT,
        "null_bytes": samples.SAMPLE_NULL_BYTES_TEXT,
        "numbers": samples.SAMPLE_NUMBERS_TEXT,
    }


@pytest.fixture
def analyzer() -> DocumentAnalyzer:
    """Анализатор со встроенными стоп-словами, не зависящий от config.yaml."""
    return DocumentAnalyzer(stop_words=StopWordSets.default())


@pytest.fixture
def engine() -> SearchEngine:
    """Поисковый движок с настройками по умолчанию."""
    return SearchEngine(context_window=50, min_term_length=3)


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "quality: тесты качества/точности")
