"""Запуск CLI через python -m text_analyser"""

import sys

from .cli import main

sys.exit(main())
