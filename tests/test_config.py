import os
import textwrap

from text_analyser.config import Config


def test_config_defaults_when_missing_file(tmp_path):
    """
    Проверяет, что при отсутствии файла конфигурации подставляются дефолтные значения.
    Приложение должно работать и без config.yaml.
    """
    cwd = os.getcwd()
    try:
        os.chdir(tmp_path)
        cfg = Config()
        assert cfg.get_context_window() == 50
        assert cfg.get_min_term_length() == 3
        assert cfg.get_highlight_markers() == ("[[", "]]")
        assert cfg.get_results_folder() == "data/results"
        assert cfg.get_report_top_words() == 20
    finally:
        os.chdir(cwd)


def test_config_overrides_from_yaml(tmp_path):
    """
    Проверяет, что значения из YAML перекрывают дефолты, а незаданные остаются.
    """
    yaml_text = textwrap.dedent(
        """
        search:
          context_window: 80
        report:
          top_words: 5
        """
    ).strip()

    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(yaml_text, encoding="utf-8")

    cfg = Config(config_path=str(cfg_path))

    assert cfg.get_context_window() == 80
    assert cfg.get_report_top_words() == 5
    assert cfg.get_min_term_length() == 3


def test_config_env_overrides(tmp_path, monkeypatch):
    """
    ENV с префиксом TEXT_ANALYSER_ переопределяет вложенные ключи через __.
    """
    monkeypatch.setenv("TEXT_ANALYSER_SEARCH__CONTEXT_WINDOW", "12")
    monkeypatch.setenv("TEXT_ANALYSER_LOGGING__LOG_TO_FILE", "false")

    cfg = Config(config_path=str(tmp_path / "nonexistent.yaml"))

    assert cfg.get_context_window() == 12
    assert cfg.is_logging_to_file_enabled() is False
    assert cfg.get_env("TEXT_ANALYSER_SEARCH__CONTEXT_WINDOW") == "12"


def test_config_validation_clamps_values(tmp_path):
    """Отрицательные и нулевые значения поднимаются до минимума."""
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "search:\n  context_window: -5\n  min_term_length: 0\nreport:\n  top_words: oops\n",
        encoding="utf-8",
    )

    cfg = Config(config_path=str(cfg_path))

    assert cfg.get_context_window() == 0
    assert cfg.get_min_term_length() == 1
    assert cfg.get_report_top_words() == 20


def test_config_profile_selected_by_env(tmp_path, monkeypatch):
    """TEXT_ANALYSER_ENV=testing выбирает config.test.yaml рядом с основным файлом."""
    (tmp_path / "config.yaml").write_text("search:\n  context_window: 10\n", encoding="utf-8")
    (tmp_path / "config.test.yaml").write_text("search:\n  context_window: 20\n", encoding="utf-8")
    monkeypatch.setenv("TEXT_ANALYSER_ENV", "testing")

    cfg = Config(config_path=str(tmp_path / "config.yaml"))

    assert cfg.get_context_window() == 20


def test_extra_stop_words_normalized(tmp_path):
    """Ключи языков в stop_words.extra приводятся к нижнему регистру."""
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("stop_words:\n  extra:\n    English: [foo]\n", encoding="utf-8")

    cfg = Config(config_path=str(cfg_path))

    assert cfg.get_extra_stop_words()["english"] == ["foo"]


def test_invalid_yaml_falls_back_to_defaults(tmp_path):
    """Битый YAML не ломает загрузку."""
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("search: [unclosed", encoding="utf-8")

    cfg = Config(config_path=str(cfg_path))

    assert cfg.get_context_window() == 50
