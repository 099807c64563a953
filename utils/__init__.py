"""
utils - Логирование, исключения и мониторинг
"""

from .logging import get_logger
from .error_handling import GameError, InvalidStateError, IllegalMoveError
from .monitoring import PerformanceMonitor, get_monitor, monitor_time

__all__ = [
    'get_logger',
    'GameError', 'InvalidStateError', 'IllegalMoveError',
    'PerformanceMonitor', 'get_monitor', 'monitor_time'
]
