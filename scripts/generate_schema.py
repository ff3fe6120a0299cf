# Generate JSON schemas for the Comment Analyzer contracts
# Usage (from repo root):
#   python scripts/generate_schema.py [output-dir]
# Writes <Name>.schema.json files into output-dir (default: schemas/).
import logging
import sys

from comment_analyzer.schema import write_json_schemas

logging.basicConfig(level=logging.INFO, format="%(message)s")
write_json_schemas(sys.argv[1] if len(sys.argv) > 1 else "schemas")
