import logging

import pytest

from levelstyle.models import register_levels


@pytest.fixture(autouse=True)
def level_names():
    register_levels()


@pytest.fixture(autouse=True)
def root_level():
    level = logging.root.level
    yield
    logging.root.setLevel(level)


@pytest.fixture
def make_record():
    def _make(level=logging.INFO, msg="hello world", args=(), exc_info=None, name="CLIENT"):
        return logging.LogRecord(
            name=name,
            level=level,
            pathname=__file__,
            lineno=1,
            msg=msg,
            args=args,
            exc_info=exc_info,
        )

    return _make
