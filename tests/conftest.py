import pytest

from message_wrap.width_oracle import WidthOracle


@pytest.fixture
def mono20():
    """Police monospace : 20 px par caractère."""
    return WidthOracle(lambda text: len(text) * 20)


@pytest.fixture
def mono10():
    return WidthOracle(lambda text: len(text) * 10)
