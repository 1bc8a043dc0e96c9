"""
Structured Logging for the Governance Core.

Every module gets its logger from LoggerFactory, named
"<component type>.<component name>" (e.g. "policy.AccessScoping").
Records are written to stdout as one JSON object per line and carry a
`custom_dimensions` dict: the component identity, the optional LogContext,
and whatever the call site passes in `extra`.

Log records describe decisions (access denied, input collapsed to a
default, map unavailable), never record contents: no NIK, names or
addresses.

Levels:
    LOG_LEVEL sets the level of component loggers (default INFO);
    DEBUG_LOGGING=true forces DEBUG.

Exports:
    ComponentType: Architectural layer of a logger
    LogContext: Actor/record identifiers attached to records
    JSONFormatter: One JSON object per record
    LoggerFactory: Creates component loggers
    log_exceptions: Decorator that logs and re-raises

Dependencies:
    Standard library only (logging, json, dataclasses)
"""

from enum import Enum
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from dataclasses import dataclass, asdict
import logging
import sys
import os
import json
from functools import wraps


# ============================================================================
# COMPONENT TYPES
# ============================================================================

class ComponentType(Enum):
    """Layers of the governance core; first part of every logger name."""
    POLICY = "policy"          # Access scoping decisions
    SERVICE = "service"        # Projection / normalization services
    CODEC = "codec"            # Number/identifier/text codecs
    ADAPTER = "adapter"        # External integration (map image service)
    CONFIG = "config"          # Configuration loading and validation


# ============================================================================
# LOG CONTEXT
# ============================================================================

@dataclass
class LogContext:
    """
    Identifiers of who is acting on which record.

    Only ids and the role travel in logs.
    """
    correlation_id: Optional[str] = None
    user_id: Optional[int] = None
    role: Optional[str] = None
    village_id: Optional[int] = None
    draft_id: Optional[int] = None
    submission_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Set fields only."""
        return {k: v for k, v in asdict(self).items() if v is not None}


# ============================================================================
# JSON FORMATTER
# ============================================================================

class JSONFormatter(logging.Formatter):
    """Formats each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}.{record.funcName}:{record.lineno}",
        }

        custom_dimensions = getattr(record, 'custom_dimensions', None)
        if custom_dimensions:
            payload['customDimensions'] = custom_dimensions

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            payload['exception'] = {
                'type': exc_type.__name__,
                'message': str(exc_value),
                'traceback': self.formatException(record.exc_info),
            }

        return json.dumps(payload, default=str, ensure_ascii=False)


# ============================================================================
# COMPONENT FILTER
# ============================================================================

class _ComponentFilter(logging.Filter):
    """Merges component identity and context into record.custom_dimensions."""

    def __init__(self, component_type: ComponentType, name: str, context: Optional[LogContext] = None):
        super().__init__()
        self.dimensions = {'component_type': component_type.value, 'component_name': name}
        if context is not None:
            self.dimensions.update(context.to_dict())

    def filter(self, record: logging.LogRecord) -> bool:
        dimensions = dict(self.dimensions)
        dimensions.update(getattr(record, 'custom_dimensions', None) or {})
        record.custom_dimensions = dimensions
        return True


# ============================================================================
# LOGGER FACTORY
# ============================================================================

class LoggerFactory:
    """
    Creates component loggers.

    Example:
        logger = LoggerFactory.create_logger(ComponentType.POLICY, "AccessScoping")
        logger.warning("Draft access denied", extra={'custom_dimensions': {'user_id': 7}})
    """

    @staticmethod
    def default_level() -> int:
        """Level from DEBUG_LOGGING / LOG_LEVEL; unknown names fall back to INFO."""
        if os.getenv('DEBUG_LOGGING', '').lower() == 'true':
            return logging.DEBUG
        level = logging.getLevelName(os.getenv('LOG_LEVEL', 'INFO').upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def create_logger(
        cls,
        component_type: ComponentType,
        name: str,
        context: Optional[LogContext] = None,
        level: Optional[int] = None
    ) -> logging.Logger:
        """
        Logger named "<component_type>.<name>" with a stdout JSON handler.

        Calling it again for the same name reconfigures the existing logger
        instead of stacking handlers.

        Args:
            component_type: Layer the component belongs to
            name: Component name (e.g., "DashboardFilters")
            context: Identifiers added to every record of this logger
            level: Explicit level (default: default_level())

        Returns:
            Configured stdlib logger; propagates to the root logger
        """
        logger = logging.getLogger(f"{component_type.value}.{name}")
        logger.setLevel(cls.default_level() if level is None else level)

        if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(JSONFormatter())
            logger.addHandler(handler)

        for existing in [f for f in logger.filters if isinstance(f, _ComponentFilter)]:
            logger.removeFilter(existing)
        logger.addFilter(_ComponentFilter(component_type, name, context))

        logger.propagate = True
        return logger


# ============================================================================
# EXCEPTION DECORATOR
# ============================================================================

def log_exceptions(logger: Optional[logging.Logger] = None):
    """
    Log any exception escaping the decorated function, then re-raise it.

    Args:
        logger: Logger to use (default: a SERVICE logger named after the
            function's module)
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log = logger or LoggerFactory.create_logger(
                    ComponentType.SERVICE, func.__module__ or "unknown"
                )
                log.error(
                    f"Exception in {func.__name__}",
                    exc_info=True,
                    extra={'custom_dimensions': {
                        'function_name': func.__name__,
                        'exception_type': type(e).__name__,
                    }}
                )
                raise
        return wrapper
    return decorator
