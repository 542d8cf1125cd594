"""
Tests for scarcentral string helpers.
"""

import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from scarcentral.utils.text import strip_newlines


class TestStripNewlines:

    def test_mixed_newlines(self):
        assert strip_newlines("Hello\nWorld\r!") == "HelloWorld!"

    @pytest.mark.parametrize("text,expected", [
        ("", ""),
        ("no breaks", "no breaks"),
        ("\r\n", ""),
        ("a\r\nb\n\nc", "abc"),
        ("tabs\tstay", "tabs\tstay"),
        ("Pol ε\nPol δ", "Pol εPol δ"),
    ])
    def test_cases(self, text, expected):
        assert strip_newlines(text) == expected
