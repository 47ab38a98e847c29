import os

# Keep test runs from writing daily log files
os.environ['LOG_TO_FILE'] = 'false'
os.environ['USE_COLOR'] = 'false'
for name in ('MAX_ATTEMPTS', 'WORD_LENGTH', 'WORD_LIST_PATH', 'RANDOM_SEED'):
    os.environ.pop(name, None)

import pytest

from tests.util import WORDS


@pytest.fixture
def words():
    return list(WORDS)
