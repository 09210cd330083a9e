"""
Компонент для экспорта результатов анализа.

Отвечает за экспорт результатов в различные форматы:
текстовый отчёт, JSON, Excel, CSV с результатами поиска.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import pandas as pd

from ..interfaces.text_processor import AnalysisRecord, SearchResult

logger = logging.getLogger(__name__)


class ResultExporter:
    """Экспортёр результатов анализа."""

    def __init__(self, output_dir: Optional[Union[str, Path]] = None, top_words: Optional[int] = None):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов (по умолчанию из конфигурации)
            top_words: Сколько слов выводить в отчёте (по умолчанию из конфигурации)
        """
        if output_dir is None or top_words is None:
            from ..config import config
            output_dir = output_dir if output_dir is not None else config.get_results_folder()
            top_words = top_words if top_words is not None else config.get_report_top_words()
        self.output_dir = Path(output_dir)
        self.top_words = top_words

    def default_path(self, record: AnalysisRecord, extension: str) -> Path:
        """Имя файла вида analysis_<имя без .txt>_<время>.<ext> в папке результатов."""
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        stem = record.name.replace('.txt', '')
        return self.output_dir / f"analysis_{stem}_{timestamp}.{extension.lstrip('.')}"

    def _target(self, record: AnalysisRecord, filepath: Optional[Union[str, Path]], extension: str) -> Path:
        if filepath is None:
            path = self.default_path(record, extension)
        else:
            path = Path(filepath)
            if not path.suffix:
                path = path.with_suffix(f'.{extension}')
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def render_report(self, record: AnalysisRecord) -> str:
        """
        Текстовый отчёт по документу.

        Args:
            record: Результат анализа

        Returns:
            Текст отчёта (топ слов по частоте)
        """
        ranked = sorted(record.word_frequency.items(), key=lambda x: x[1], reverse=True)
        lines = [
            "TEXT ANALYSIS REPORT",
            "=" * 20,
            f"Document: {record.name}",
            f"Analyzed: {record.created_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Language: {record.language.label}",
            f"Total Words: {record.word_count}",
            f"Unique Words: {record.unique_word_count}",
            "",
            "TOP WORDS:",
        ]
        lines.extend(
            f"{i}. {word}: {count}"
            for i, (word, count) in enumerate(ranked[:self.top_words], 1)
        )
        return "\n".join(lines) + "\n"

    def export_report(self, record: AnalysisRecord, filepath: Optional[Union[str, Path]] = None) -> Path:
        """Сохраняет текстовый отчёт и возвращает путь к файлу."""
        try:
            path = self._target(record, filepath, 'txt')
            path.write_text(self.render_report(record), encoding='utf-8')
        except OSError as e:
            logger.error(f"Ошибка экспорта отчёта: {e}")
            raise
        logger.info(f"Отчёт сохранён: {path}")
        return path

    def export_to_json(self, record: AnalysisRecord, filepath: Optional[Union[str, Path]] = None) -> Path:
        """
        Экспортирует запись анализа в JSON формат.

        Args:
            record: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'average_word_length': round(record.average_word_length, 2),
            },
            'document': record.to_dict(),
        }
        try:
            path = self._target(record, filepath, 'json')
            with open(path, 'w', encoding='utf-8') as jsonfile:
                json.dump(data, jsonfile, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"Ошибка экспорта в JSON: {e}")
            raise
        logger.info(f"Результат экспортирован в JSON: {path}")
        return path

    def export_to_excel(self, record: AnalysisRecord, filepath: Optional[Union[str, Path]] = None) -> Path:
        """
        Экспортирует запись анализа в Excel формат.

        Листы: сводка, частотность слов, частоты букв, символы с диакритикой.

        Args:
            record: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        summary_df = pd.DataFrame({
            'Parameter': [
                'Document', 'Analyzed', 'Language', 'Total Words',
                'Unique Words', 'Average Word Length',
            ],
            'Value': [
                record.name,
                record.created_at.strftime('%Y-%m-%d %H:%M:%S'),
                record.language.label,
                record.word_count,
                record.unique_word_count,
                round(record.average_word_length, 2),
            ],
        })
        words_df = pd.DataFrame(
            [{'Word': word, 'Frequency': count} for word, count in record.word_frequency.items()],
            columns=['Word', 'Frequency'],
        )
        if not words_df.empty:
            words_df = words_df.sort_values(['Frequency', 'Word'], ascending=[False, True], kind='stable')
        letters_df = pd.DataFrame(
            [{'Letter': letter.upper(), 'Percentage': pct} for letter, pct in record.letter_frequency.items()],
            columns=['Letter', 'Percentage'],
        )
        foreign_df = pd.DataFrame(
            [{'Character': fc.char, 'Count': fc.count, 'Description': fc.description}
             for fc in record.foreign_chars],
            columns=['Character', 'Count', 'Description'],
        )

        try:
            path = self._target(record, filepath, 'xlsx')
            with pd.ExcelWriter(path, engine='openpyxl') as writer:
                summary_df.to_excel(writer, sheet_name='Summary', index=False)
                words_df.to_excel(writer, sheet_name='Word Frequency', index=False)
                letters_df.to_excel(writer, sheet_name='Letter Frequency', index=False)
                foreign_df.to_excel(writer, sheet_name='Foreign Characters', index=False)
        except OSError as e:
            logger.error(f"Ошибка экспорта в Excel: {e}")
            raise
        logger.info(f"Результат экспортирован в Excel: {path}")
        return path

    def export_search_results_to_csv(self, results: Iterable[SearchResult], filepath: Union[str, Path]) -> Path:
        """
        Экспортирует найденные совпадения в CSV (одна строка на совпадение).

        Args:
            results: Результаты поиска
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        path = Path(filepath)
        if not path.suffix:
            path = path.with_suffix('.csv')
        rows = 0
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', newline='', encoding='utf-8') as csvfile:
                writer = csv.writer(csvfile)
                writer.writerow(['Document', 'Term', 'Kind', 'Position', 'Matched', 'Context'])
                for result in results:
                    for match in result.matches:
                        writer.writerow([
                            result.record.name,
                            match.term,
                            match.kind.value,
                            match.position,
                            match.matched_text,
                            match.context.replace('\n', ' '),
                        ])
                        rows += 1
        except OSError as e:
            logger.error(f"Ошибка экспорта результатов поиска: {e}")
            raise
        logger.info(f"Экспортировано совпадений: {rows} -> {path}")
        return path

    def export_all_formats(self, record: AnalysisRecord) -> Dict[str, Path]:
        """
        Экспортирует запись во все форматы с общим базовым именем.

        Returns:
            Словарь с путями к экспортированным файлам
        """
        base = str(self.default_path(record, 'txt'))[:-len('.txt')]
        exported = {
            'report': self.export_report(record, base + '.txt'),
            'json': self.export_to_json(record, base + '.json'),
            'excel': self.export_to_excel(record, base + '.xlsx'),
        }
        logger.info(f"Результат экспортирован во все форматы в папку: {self.output_dir}")
        return exported
