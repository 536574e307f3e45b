import logging
from decimal import Decimal

import pytest
from typer.testing import CliRunner

from bookpricing.pricing import default_registry


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def base_value():
    return Decimal("100.00")


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to streams of a finished CLI run."""
    yield
    logger = logging.getLogger("bookpricing")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
