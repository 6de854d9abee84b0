import logging

import pytest

from profile_matcher.logging_config import setup_logging

def test_setup_is_idempotent_and_keeps_other_handlers():
    root = logging.getLogger()
    other = logging.NullHandler()
    root.addHandler(other)
    try:
        before = len(root.handlers)
        setup_logging("info")
        setup_logging(logging.DEBUG)
        assert len(root.handlers) == before + 1
        assert other in root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.removeHandler(other)
        setup_logging("WARNING")

def test_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")
