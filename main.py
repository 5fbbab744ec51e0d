"""
main.py

What this file does:
- Runs the zh-vocab command line without installing the package.

How to run:
- From project root:
  PYTHONPATH=src python main.py analyze "我不吃飯" --graded data/tbcl_data.json
or (after pip install -e .)
  zh-vocab analyze "我不吃飯" --graded data/tbcl_data.json
"""

from __future__ import annotations

import sys

from zh_vocab_segmenter.cli import main

if __name__ == "__main__":
    sys.exit(main())
