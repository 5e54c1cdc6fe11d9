import logging

import pytest

from aoc_bench.logging import configure_logging, get_logger


def test_get_logger_namespaces_children():
    assert get_logger().name == "aoc_bench"
    assert get_logger("aoc_bench.bench.runner").name == "aoc_bench.bench.runner"
    assert get_logger("solvers").name == "aoc_bench.solvers"


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    handlers = list(logger.handlers)
    assert logger.level == logging.DEBUG

    assert configure_logging("error") is logger
    assert logger.handlers == handlers
    assert logger.level == logging.ERROR


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Invalid log_level"):
        configure_logging("TRACE")


def test_configure_logging_installs_one_named_handler():
    configure_logging()
    configure_logging("INFO")
    names = [h.get_name() for h in get_logger().handlers]
    assert names.count("aoc_bench.stderr") == 1
