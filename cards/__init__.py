"""
Adaptive Card building blocks for Teams messages

The package only attaches a NullHandler to its own logger. Applications call
``config.enhanced_logging.setup_logger()`` to get colored console output.
"""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import elements

__all__ = ['elements']
