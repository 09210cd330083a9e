"""Наборы текстов для тестирования.

Содержит короткие английские примеры, текст для поиска и «мусорные» входы.
"""

SAMPLE_CAT_TEXT = "The cat sat on the mat."


SAMPLE_RUNNING_TEXT = """
She runs every morning before work.
Her brother prefers swimming.
""".strip()


SAMPLE_RAN_TEXT = "He ran yesterday and rested today."


SAMPLE_WILDCARD_TEXT = "I run, he runs, we were running; the overrun budget was reviewed."


SAMPLE_PDF_TEXT = "%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj"


SAMPLE_NULL_BYTES_TEXT = "hello\x00\x00world\x00 text"


SAMPLE_NUMBERS_TEXT = "12345 67890 !!!! #### 2024-01-01 $$$$ 99.9 ???"
