from __future__ import annotations

from loguru import logger as _logger

from nxhuman.logger import get_logger


def test_each_module_logger_keeps_its_own_tag() -> None:
    apps = []
    sink_id = _logger.add(lambda message: apps.append(message.record["extra"]["app"]), level="DEBUG")
    try:
        store_logger = get_logger("store")
        cli_logger = get_logger("cli")
        store_logger.debug("from store")
        cli_logger.debug("from cli")
        get_logger().debug("untagged")
    finally:
        _logger.remove(sink_id)

    assert apps == ["store", "cli", "nxhuman"]
