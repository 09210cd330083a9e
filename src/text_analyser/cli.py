#!/usr/bin/env python3
"""
Интерфейс командной строки для Text Analyser

Тонкая обёртка над ядром, единственное место (вместе с экспортёром),
где читаются и пишутся файлы:
1. classify - проверка файла на «мусор»
2. analyze  - анализ документа и экспорт отчёта
3. search   - поиск по набору документов
"""

import os
import sys
import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from .exceptions import InvalidInputError

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_INPUT = 2


def read_document(path: Path) -> str:
    """Читает файл как UTF-8, при ошибке декодирования как Latin-1."""
    data = path.read_bytes()
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        return data.decode('latin-1')


def run_classify(paths: Sequence[Path]) -> int:
    """Проверяет файлы на «мусор»"""
    from .components.garbage_detector import classify_input

    code = EXIT_OK
    for path in paths:
        verdict = classify_input(read_document(path))
        if verdict.accept:
            print(f"✅ {path.name}: принят")
        else:
            print(f"🗑️ {path.name}: Garbage file detected: {verdict.reason}")
            code = EXIT_INVALID_INPUT
    return code


def run_analyze(path: Path, export_format: Optional[str], output_dir: Optional[str]) -> int:
    """Анализирует документ и при необходимости экспортирует отчёт"""
    from .document_analyzer import build_analysis_record
    from .components.exporter import ResultExporter

    record = build_analysis_record(path.name, read_document(path))

    print(f"📄 Документ: {record.name}")
    print(f"🌍 Язык: {record.language.label}")
    print(f"📊 Слов: {record.word_count}, уникальных: {record.unique_word_count}")
    print(f"📏 Средняя длина слова: {record.average_word_length:.2f}")
    if record.foreign_chars:
        chars = ", ".join(f"{fc.char}×{fc.count}" for fc in record.foreign_chars[:10])
        print(f"🔤 Символы с диакритикой: {chars}")
    top = record.top_words(10)
    if top:
        print("\n🏆 Частые слова:")
        for i, (word, count) in enumerate(top, 1):
            print(f"   {i:2d}. {word:<15} {count}")

    if export_format:
        exporter = ResultExporter(output_dir)
        if export_format == 'txt':
            target = exporter.export_report(record)
        elif export_format == 'json':
            target = exporter.export_to_json(record)
        else:
            target = exporter.export_to_excel(record)
        print(f"\n✅ Результат экспортирован в: {target}")
    return EXIT_OK


def run_search(paths: Sequence[Path], query: str, csv_path: Optional[str]) -> int:
    """Ищет запрос по набору документов"""
    from .document_analyzer import build_corpus
    from .components.search_engine import search
    from .components.highlighter import match_summary
    from .components.exporter import ResultExporter

    corpus = build_corpus((path.name, read_document(path)) for path in paths)
    for name, reason in corpus.rejected:
        print(f"🗑️ {name}: Garbage file detected: {reason}")

    results = search(corpus.records, query)
    if not results:
        print(f"🔍 По запросу «{query}» ничего не найдено")
        return EXIT_OK

    print(f"🔍 Найдено документов: {len(results)}")
    for result in results:
        print(f"\n📄 {result.record.name}: совпадений {len(result.matches)}")
        for term, count in match_summary(result.matches).items():
            print(f"   📍 {term}: {count}")
        for match in result.matches[:5]:
            context = match.context.replace('\n', ' ')
            print(f"   …{context}…")

    if csv_path:
        target = ResultExporter().export_search_results_to_csv(results, csv_path)
        print(f"\n✅ Совпадения экспортированы в: {target}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-analyser",
        description="Text Analyser - лингвистический анализ текстовых документов",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m text_analyser classify notes.txt                 # Проверка на «мусор»
  python -m text_analyser analyze notes.txt --format xlsx    # Анализ и экспорт в Excel
  python -m text_analyser search "run*" a.txt b.txt          # Поиск по документам
        """
    )
    sub = parser.add_subparsers(dest='command')

    classify_parser = sub.add_parser('classify', help='Проверить файлы на «мусор»')
    classify_parser.add_argument('files', nargs='+', type=Path)

    analyze_parser = sub.add_parser('analyze', help='Проанализировать документ')
    analyze_parser.add_argument('file', type=Path)
    analyze_parser.add_argument('--format', dest='export_format', choices=['txt', 'json', 'xlsx'],
                                help='Экспортировать отчёт в формате')
    analyze_parser.add_argument('--output-dir', help='Папка для отчёта (по умолчанию из config.yaml)')

    search_parser = sub.add_parser('search', help='Искать по документам')
    search_parser.add_argument('query')
    search_parser.add_argument('files', nargs='+', type=Path)
    search_parser.add_argument('--csv', dest='csv_path', help='Сохранить совпадения в CSV')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    from .config import config

    if os.environ.get('TEXT_ANALYSER_DEBUG') == '1':
        os.environ['TEXT_ANALYSER_LOGGING__LEVEL'] = 'DEBUG'
        config._apply_env_overrides()
    config._configure_logging_if_needed(force=True)

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    try:
        if args.command == 'classify':
            return run_classify(args.files)
        if args.command == 'analyze':
            return run_analyze(args.file, args.export_format, args.output_dir)
        return run_search(args.files, args.query, args.csv_path)
    except InvalidInputError as e:
        print(f"🗑️ {e}")
        return EXIT_INVALID_INPUT
    except Exception as e:
        print(f"❌ Ошибка: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
