"""Logging helpers"""

import logging


def verbose_log(logger: logging.Logger, verbose: bool, msg: str) -> None:
    """Log as info when verbose is enabled, as debug otherwise"""
    if verbose:
        logger.info(msg)
    else:
        logger.debug(msg)
