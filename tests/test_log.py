import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from core.log import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_installs_one_rich_handler(restore_root_logger):
    root = restore_root_logger
    stream = io.StringIO()
    console = Console(file=stream, width=200)

    configure_logging("WARNING", console=console)
    configure_logging("DEBUG", console=console)

    rich_handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
    assert len(root.handlers) == 1
    assert len(rich_handlers) == 1
    assert root.level == logging.DEBUG

    logging.getLogger("presentation.controllers.signup").debug("signup handled with status 200")
    assert "signup handled with status 200" in stream.getvalue()
