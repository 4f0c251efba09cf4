#!/usr/bin/env python3
"""
srx-segmenter Demo - Splits sample text with the SRX 2.0 example rules.
Shows language cascading, segment spans and dropped-rule diagnostics.
"""

import sys
from pathlib import Path

# Add src to path so we can import srxsegmenter
sys.path.insert(0, str(Path(__file__).parent / "src"))

from srxsegmenter.rules.loader import load_rule_table
from srxsegmenter.runtime.engine import build_engine

class SimpleLogger:
    """Simple console logger for demo."""
    
    def info(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"INFO: {msg} {details}")
        
    def warn(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"WARN: {msg} {details}")
        
    def error(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"ERROR: {msg} {details}")

SAMPLES = [
    ("en", "The U.K. Prime Minister, Mr. Blair, was seen out with his family today. He is well."),
    ("fr", "M. Dupont est arrivé. Il est fatigué."),
    ("de", "Das ist gut. Mr. Smith kommt morgen."),
]

def main():
    """Run the demo."""
    rules_path = Path(__file__).parent / "examples" / "rules" / "example.srx"
    print(f"📄 Loading rules: {rules_path}")
    table = load_rule_table(rules_path)
    engine = build_engine(table, logger=SimpleLogger())
    
    for code, text in SAMPLES:
        rules = engine.language_rules(code)
        print(f"\n🌐 {code} -> {engine.matching_languages(code)} ({len(rules)} rules)")
        for (start, end), segment in zip(rules.split_ranges(text), rules.split(text)):
            print(f"   [{start:3d}:{end:3d}] {segment!r}")
    
    errors = engine.errors()
    dropped = sum(len(reasons) for reasons in errors.values())
    print(f"\n🧾 Dropped rules: {dropped}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
