"""
Shared pytest fixtures.
"""

from collections import OrderedDict

import pytest

from core.capabilities import LanguageComponents


@pytest.fixture
def config_dir(tmp_path):
    """Host configuration directory with an empty clustering plugin folder."""
    (tmp_path / "clustering").mkdir()
    return tmp_path


@pytest.fixture
def make_languages():
    """Build an ordered language registry of empty bundles."""
    def _make(*codes):
        return OrderedDict((code, LanguageComponents(code, {})) for code in codes)
    return _make
