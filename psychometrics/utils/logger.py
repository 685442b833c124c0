"""Logging configuration for the psychometric scoring engine.

This module provides structured logging with different handlers for
development, test and production environments, including JSON formatting
for log aggregation. The engine only writes to stderr.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger


class EngineFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter for scoring engine logs."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record dictionary to modify
            record: The original logging record
            message_dict: Additional message data
        """
        super().add_fields(log_record, record, message_dict)

        # Add standard fields
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        # Add application context
        log_record['application'] = 'psychometrics'
        log_record['service'] = 'scoring-engine'

        # Handle exception info
        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class ContextFilter(logging.Filter):
    """Filter to add contextual information to log records."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        """Initialize context filter.

        Args:
            context: Additional context to add to all log records
        """
        super().__init__()
        self.context = context or {}

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context to log record.

        Args:
            record: The log record to modify

        Returns:
            bool: Always True to allow all records
        """
        for key, value in self.context.items():
            setattr(record, key, value)

        return True


class LoggerConfig:
    """Logger configuration manager."""

    # Component loggers
    COMPONENTS = {
        'engine': 'psychometrics.engine',
        'scoring': 'psychometrics.scoring',
        'normalizer': 'psychometrics.normalizer',
        'cli': 'psychometrics.cli',
    }

    def __init__(self, environment: str = 'development', log_level: str = 'INFO'):
        """Initialize logger configuration.

        Args:
            environment: Environment name (development, staging, production, test)
            log_level: Default log level
        """
        self.environment = environment
        self.log_level = getattr(logging, log_level.upper())

        # Configure root logger
        self._configure_root_logger()

        # Configure component loggers
        self._configure_component_loggers()

    def _configure_root_logger(self) -> None:
        """Configure the root logger."""
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)

        # Clear existing handlers
        root_logger.handlers.clear()

        if self.environment in ('production', 'staging'):
            self._add_production_handlers(root_logger)
        elif self.environment == 'test':
            self._add_test_handlers(root_logger)
        else:
            self._add_development_handlers(root_logger)

    def _add_production_handlers(self, logger: logging.Logger) -> None:
        """Add production-grade handlers.

        Args:
            logger: Logger to configure
        """
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)

        json_formatter = EngineFormatter(
            fmt='%(timestamp)s %(level)s %(logger)s %(message)s'
        )
        console_handler.setFormatter(json_formatter)

        logger.addHandler(console_handler)

    def _add_development_handlers(self, logger: logging.Logger) -> None:
        """Add development-friendly handlers.

        Args:
            logger: Logger to configure
        """
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)

        dev_formatter = logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-28s | %(funcName)-15s:%(lineno)-3d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(dev_formatter)

        logger.addHandler(console_handler)

    def _add_test_handlers(self, logger: logging.Logger) -> None:
        """Add test environment handlers.

        Args:
            logger: Logger to configure
        """
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)  # Only warnings and errors during tests

        test_formatter = logging.Formatter(
            fmt='TEST | %(levelname)s | %(name)s | %(message)s'
        )
        console_handler.setFormatter(test_formatter)

        logger.addHandler(console_handler)

    def _configure_component_loggers(self) -> None:
        """Configure individual component loggers."""
        for component, logger_name in self.COMPONENTS.items():
            logger = logging.getLogger(logger_name)
            logger.setLevel(self.log_level)

            # Replace any filter left by a previous configuration
            for existing in [f for f in logger.filters if isinstance(f, ContextFilter)]:
                logger.removeFilter(existing)
            logger.addFilter(ContextFilter({'component': component}))

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name

        Returns:
            logging.Logger: Configured logger instance
        """
        return logging.getLogger(name)

    def get_component_logger(self, component: str) -> logging.Logger:
        """Get a component-specific logger.

        Args:
            component: Component name (engine, scoring, normalizer, cli)

        Returns:
            logging.Logger: Component logger

        Raises:
            ValueError: If component is not recognized
        """
        if component not in self.COMPONENTS:
            raise ValueError(f"Unknown component: {component}. Available: {list(self.COMPONENTS.keys())}")

        return logging.getLogger(self.COMPONENTS[component])


# Global logger configuration instance
_logger_config: Optional[LoggerConfig] = None


def setup_logging(environment: str = 'development', log_level: str = 'INFO') -> LoggerConfig:
    """Setup application logging.

    Args:
        environment: Environment name
        log_level: Log level

    Returns:
        LoggerConfig: Configured logger instance
    """
    global _logger_config
    _logger_config = LoggerConfig(environment, log_level)
    return _logger_config


def get_logger(name: str = __name__) -> logging.Logger:
    """Get a logger instance.

    Configuration is left to the embedding application; call
    ``setup_logging`` to install the engine's handlers.

    Args:
        name: Logger name, defaults to caller's module name

    Returns:
        logging.Logger: Logger instance
    """
    if _logger_config is None:
        return logging.getLogger(name)

    return _logger_config.get_logger(name)


def get_component_logger(component: str) -> logging.Logger:
    """Get a component-specific logger.

    Args:
        component: Component name

    Returns:
        logging.Logger: Component logger

    Raises:
        ValueError: If component is not recognized
    """
    if component not in LoggerConfig.COMPONENTS:
        raise ValueError(f"Unknown component: {component}. Available: {list(LoggerConfig.COMPONENTS.keys())}")

    return logging.getLogger(LoggerConfig.COMPONENTS[component])


# Convenience functions for different components
def get_engine_logger() -> logging.Logger:
    """Get engine facade logger."""
    return get_component_logger('engine')


def get_scoring_logger() -> logging.Logger:
    """Get scoring strategy logger."""
    return get_component_logger('scoring')


def get_normalizer_logger() -> logging.Logger:
    """Get answer normalizer logger."""
    return get_component_logger('normalizer')


def get_cli_logger() -> logging.Logger:
    """Get CLI logger."""
    return get_component_logger('cli')


def log_malformed_answer(
    instrument: str,
    question_id: str,
    value: Any,
    reason: str,
    logger: Optional[logging.Logger] = None
) -> None:
    """Log an answer that could not be normalized.

    Args:
        instrument: Instrument code
        question_id: Question identifier
        value: Raw answer value
        reason: Why the answer was rejected
        logger: Logger instance
    """
    if logger is None:
        logger = get_scoring_logger()

    logger.warning(f"Malformed answer for question {question_id}: {reason}", extra={
        'instrument': instrument,
        'question_id': question_id,
        'raw_value': repr(value),
        'reason': reason,
        'event_type': 'malformed_answer'
    })


# Performance monitoring
class PerformanceLogger:
    """Context manager for performance logging."""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None, extra: Optional[Dict[str, Any]] = None):
        """Initialize performance logger.

        Args:
            operation: Operation name
            logger: Logger instance
            extra: Additional fields to log
        """
        self.operation = operation
        self.logger = logger or get_logger()
        self.extra = extra or {}
        self.start_time: Optional[datetime] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> 'PerformanceLogger':
        """Start timing."""
        self.start_time = datetime.now(timezone.utc)
        self.logger.debug(f"Starting {self.operation}", extra={
            'operation': self.operation,
            'event_type': 'performance_start',
            **self.extra
        })
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """End timing and log result."""
        if self.start_time:
            duration = datetime.now(timezone.utc) - self.start_time
            self.duration_ms = duration.total_seconds() * 1000

            level = logging.WARNING if self.duration_ms > 1000 else logging.DEBUG  # Warn if > 1 second

            self.logger.log(level, f"Completed {self.operation}", extra={
                'operation': self.operation,
                'duration_ms': self.duration_ms,
                'event_type': 'performance_end',
                'success': exc_type is None,
                **self.extra
            })
