"""
Structured error handling for the tab stores.

Most malformed inputs are silent no-ops so that a bad UI event never crashes
the interaction loop. The exceptions below are raised only for invalid
configuration and, in strict mode, for unknown or duplicate tab ids.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from datetime import datetime
from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """
    Context information about an error.

    Captures the operation and tab involved so callers can report it.
    """

    error_type: str
    message: str
    timestamp: datetime = field(default_factory=datetime.now)

    operation: Optional[str] = None
    tab_id: Optional[str] = None

    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'error_type': self.error_type,
            'message': self.message,
            'timestamp': self.timestamp.isoformat(),
            'operation': self.operation,
            'tab_id': self.tab_id,
            'metadata': self.metadata
        }


class TabsError(Exception):
    """
    Base exception for all tab store errors.

    All custom exceptions should inherit from this.
    """

    severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        **kwargs
    ):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext(
            error_type=self.__class__.__name__,
            message=message
        )

        # Allow overriding context fields
        for key, value in kwargs.items():
            if hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value


class UnknownTabError(TabsError):
    """A tab id does not refer to an open tab."""
    severity = ErrorSeverity.LOW


class DuplicateTabError(TabsError):
    """A tab with the same id is already open."""
    severity = ErrorSeverity.MEDIUM


class ConfigurationError(TabsError):
    """Invalid configuration."""
    severity = ErrorSeverity.CRITICAL
