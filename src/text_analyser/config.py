"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс TEXT_ANALYSER_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import copy
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

ENV_PREFIX = 'TEXT_ANALYSER_'


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}
        self.env_data: Dict[str, Any] = {}

        self._load_config()
        self._load_env()
        self._apply_env_overrides()
        self._validate()
        self._configure_logging_if_needed()

    def _resolve_config_path(self) -> Path:
        env = os.getenv(f'{ENV_PREFIX}ENV', '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        self.config_path = self._resolve_config_path()
        if not self.config_path.exists():
            logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации {self.config_path}: {e}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"Конфигурация {self.config_path} должна быть словарём, получено {type(loaded).__name__}")
            return
        self._merge(self.config_data, loaded)
        logger.debug(f"Конфигурация загружена: {self.config_path}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        load_dotenv()
        self.env_data = {
            key: value for key, value in os.environ.items() if key.startswith(ENV_PREFIX)
        }

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (TEXT_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # Служебные переменные не относятся к секциям конфига
            if key in (f'{ENV_PREFIX}ENV', f'{ENV_PREFIX}DEBUG'):
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(f'{ENV_PREFIX}ENV'):
            logger.info(f"Активирован профиль: {os.getenv(f'{ENV_PREFIX}ENV')}")

    def _validate(self) -> None:
        """Проверяет диапазоны числовых параметров."""
        defaults = self._get_default_config()
        for key, minimum in (
            ('search.context_window', 0),
            ('search.min_term_length', 1),
            ('report.top_words', 1),
        ):
            default = self._lookup(defaults, key)
            try:
                value = int(self.get(key, default))
            except (TypeError, ValueError):
                logger.warning(f"{key}: некорректное значение, используется {default}")
                value = default
            if value < minimum:
                logger.warning(f"{key} < {minimum}, принудительно установлено в {minimum}")
                value = minimum
            self._set_nested(self.config_data, key, value)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_text_analyser_configured", False) and not force:
            if (
                getattr(root, "_text_analyser_console_level", None) == console_level_name and
                getattr(root, "_text_analyser_file_level", None) == file_level_name and
                getattr(root, "_text_analyser_format", None) == desired_fmt and
                (desired_file is None or getattr(root, "_text_analyser_file", None) is not None)
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
            except OSError as e:
                logger.warning(f"Не удалось открыть файл лога {log_file}: {e}")
                desired_file = None
            else:
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_text_analyser_configured", True)
        setattr(root, "_text_analyser_console_level", console_level_name)
        setattr(root, "_text_analyser_file_level", file_level_name)
        setattr(root, "_text_analyser_format", desired_fmt)
        setattr(root, "_text_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return copy.deepcopy({
            'search': {
                # Символов контекста слева и справа от вхождения
                'context_window': 50,
                # Термы запроса короче этого порога отбрасываются
                'min_term_length': 3,
                'highlight_open': "[[",
                'highlight_close': "]]",
            },
            'stop_words': {
                # Дополнительные стоп-слова поверх встроенных списков
                'extra': {
                    'english': [],
                    'french': [],
                    'spanish': [],
                },
            },
            'files': {
                'results_folder': "data/results",
            },
            'report': {
                'top_words': 20,
            },
            'logging': {
                'level': "INFO",
                'format': "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_dir': "logs",
                'max_log_files': 10,
            },
        })

    @staticmethod
    def _lookup(data: Dict[str, Any], key: str, default: Any = None) -> Any:
        try:
            value = data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        return self._lookup(self.config_data, key, default)

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения с префиксом TEXT_ANALYSER_"""
        return self.env_data.get(key, default)

    # --- Поиск ---
    def get_context_window(self) -> int:
        """Сколько символов контекста брать вокруг вхождения"""
        return int(self.get('search.context_window', 50))

    def get_min_term_length(self) -> int:
        """Минимальная длина терма запроса"""
        return int(self.get('search.min_term_length', 3))

    def get_highlight_markers(self) -> tuple:
        """Маркеры подсветки (открывающий, закрывающий)"""
        return (
            str(self.get('search.highlight_open', "[[")),
            str(self.get('search.highlight_close', "]]")),
        )

    # --- Стоп-слова ---
    def get_extra_stop_words(self) -> Dict[str, List[str]]:
        """Дополнительные стоп-слова по языкам (ключи в нижнем регистре)"""
        extra = self.get('stop_words.extra', {}) or {}
        if not isinstance(extra, dict):
            logger.warning("stop_words.extra должен быть словарём, игнорируется")
            return {}
        return {str(k).lower(): [str(w) for w in (v or [])] for k, v in extra.items()}

    # --- Файлы и отчёты ---
    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('files.results_folder', "data/results")

    def get_report_top_words(self) -> int:
        """Сколько частых слов включать в отчёт"""
        return int(self.get('report.top_words', 20))

    # --- Логирование ---
    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_level(self) -> str:
        return self.get_console_logging_level()

    def get_logging_format(self) -> str:
        return self.get('logging.format', "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        return bool(self.get('logging.log_to_file', False))

    def get_log_dir(self) -> str:
        return self.get('logging.log_dir', "logs")

    def get_logging_file(self) -> str:
        """Генерирует имя файла лога для текущей сессии с временной меткой"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return str(Path(self.get_log_dir()) / f"text_analyser_{timestamp}.log")

    def get_max_log_files(self) -> int:
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_log_dir())
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("text_analyser_*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые в конце
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
