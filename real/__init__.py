"""
Real - strongly typed data size, data speed and temperature values.
"""

from loguru import logger

# Library mode: applications opt in with logger.enable("real")
logger.disable(__name__)
