"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from srxsegmenter.rules.loader import load_rule_table_from_string
from srxsegmenter.runtime.engine import build_engine


@pytest.fixture
def sample_rules_yaml():
    """Provide the SRX 2.0 example rules as a YAML rule table."""
    return r"""
version: "2.0"
cascade: yes
language_map:
  - pattern: '[Ee][Nn].*'
    language: English
  - pattern: '[Ff][Rr].*'
    language: French
  - pattern: '.*'
    language: Default
language_rules:
  Default:
    - break: no
      before_break: '^\s*[0-9]+\.'
      after_break: '\s'
    - break: yes
      after_break: '\n'
    - break: yes
      before_break: '[\.\?!]+'
      after_break: '\s'
  English:
    - break: no
      before_break: '\s[Ee][Tt][Cc]\.'
      after_break: '\s[a-z]'
    - break: no
      before_break: '\sMr\.'
      after_break: '\s'
    - break: no
      before_break: '\sU\.K\.'
      after_break: '\s'
  French:
    - break: no
      before_break: '\sM\.'
      after_break: '\s'
"""


@pytest.fixture
def sample_srx():
    """Provide the SRX 2.0 example rules as an SRX document."""
    return r"""<?xml version="1.0" encoding="UTF-8"?>
<srx xmlns="http://www.lisa.org/srx20" version="2.0">
  <header segmentsubflows="yes" cascade="yes">
    <formathandle type="start" include="no"/>
    <formathandle type="end" include="yes"/>
    <formathandle type="isolated" include="yes"/>
  </header>
  <body>
    <languagerules>
      <languagerule languagerulename="Default">
        <rule break="no">
          <beforebreak>^\s*[0-9]+\.</beforebreak>
          <afterbreak>\s</afterbreak>
        </rule>
        <rule break="yes">
          <afterbreak>\n</afterbreak>
        </rule>
        <rule break="yes">
          <beforebreak>[\.\?!]+</beforebreak>
          <afterbreak>\s</afterbreak>
        </rule>
      </languagerule>
      <languagerule languagerulename="English">
        <rule break="no">
          <beforebreak>\s[Ee][Tt][Cc]\.</beforebreak>
          <afterbreak>\s[a-z]</afterbreak>
        </rule>
        <rule break="no">
          <beforebreak>\sMr\.</beforebreak>
          <afterbreak>\s</afterbreak>
        </rule>
        <rule break="no">
          <beforebreak>\sU\.K\.</beforebreak>
          <afterbreak>\s</afterbreak>
        </rule>
      </languagerule>
      <languagerule languagerulename="French">
        <rule break="no">
          <beforebreak>\sM\.</beforebreak>
          <afterbreak>\s</afterbreak>
        </rule>
      </languagerule>
    </languagerules>
    <maprules>
      <languagemap languagepattern="[Ee][Nn].*" languagerulename="English"/>
      <languagemap languagepattern="[Ff][Rr].*" languagerulename="French"/>
      <languagemap languagepattern=".*" languagerulename="Default"/>
    </maprules>
  </body>
</srx>
"""


@pytest.fixture
def sample_table(sample_rules_yaml):
    """Provide a loaded rule table for testing."""
    return load_rule_table_from_string(sample_rules_yaml)


@pytest.fixture
def sample_engine(sample_table):
    """Provide an engine built from the sample rule table."""
    return build_engine(sample_table)


def _temp_file(content, suffix):
    with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False, encoding='utf-8') as f:
        f.write(content)
        return Path(f.name)


@pytest.fixture
def temp_rules_file(sample_rules_yaml):
    """Provide a temporary YAML rule file for testing."""
    temp_path = _temp_file(sample_rules_yaml, '.yaml')
    
    yield temp_path
    
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def temp_srx_file(sample_srx):
    """Provide a temporary SRX rule file for testing."""
    temp_path = _temp_file(sample_srx, '.srx')
    
    yield temp_path
    
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""
    
    def __init__(self):
        self.messages = []
    
    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))
    
    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))
    
    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))
    
    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Meter for testing that accumulates counters."""
    
    def __init__(self):
        self.counters = {}
        self.observations = []
    
    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount
    
    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that counts increments."""
    return SimpleTestMeter()
