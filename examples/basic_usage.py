#!/usr/bin/env python3
"""Basic usage example"""

import logging

from daily_logger import DailyFileHandler, LoggerBuilder, init

def main():
    # Logger writing "example,1.0.0,<timestamp>,<level>,..." lines
    logger = init("example", "1.0.0", "logs", rotation_size=1024 * 1024)

    logger.debug("This is debug")
    logger.info("Application started")
    logger.success("Task finished")
    logger.warning("This is warning")
    logger.error("This is error")
    logger.critical("This is critical")
    logger.shutdown()

    # Async delivery through a worker thread
    logger = (LoggerBuilder()
        .with_name("example_async")
        .with_target("logs")
        .with_async(True)
        .with_auto_flush(False)
        .build())
    logger.info("Queued message")
    logger.flush()
    logger.shutdown()

    # Standard library logging
    handler = DailyFileHandler("logs", "example_stdlib")
    handler.setFormatter(logging.Formatter("%(asctime)s,%(levelname)s,%(message)s"))
    std_logger = logging.getLogger("example")
    std_logger.addHandler(handler)
    std_logger.warning("Written through logging")
    handler.close()

if __name__ == "__main__":
    main()
