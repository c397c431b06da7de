"""
Core data models for textnorm.

This module contains the small value types shared by the cleaning and
transliteration modules, together with the error types raised by them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict


class ErrorSeverity(Enum):
    """Severity levels for processing errors."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ProcessingError(Exception):
    """Represents an error that occurred while processing text."""
    stage: str
    error_type: str
    message: str
    severity: ErrorSeverity
    timestamp: datetime = field(default_factory=datetime.now)
    context: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "stage": self.stage,
            "error_type": self.error_type,
            "message": self.message,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context
        }


class InvalidArgumentError(ProcessingError, ValueError):
    """Raised when an operation receives an argument it cannot work with."""

    def __init__(self, stage: str, message: str, **context: Any):
        super().__init__(
            stage=stage,
            error_type="InvalidArgument",
            message=message,
            severity=ErrorSeverity.LOW,
            context=context
        )


@dataclass(frozen=True)
class SubstitutionEntry:
    """A single source -> target token pair of a substitution table."""
    source: str
    target: str

    def __post_init__(self):
        if not self.source or not self.target:
            raise InvalidArgumentError(
                stage="substitution_table",
                message="Substitution tokens must be non-empty",
                source=self.source,
                target=self.target
            )

    def to_dict(self) -> Dict[str, str]:
        """Convert entry to dictionary."""
        return {"source": self.source, "target": self.target}


@dataclass(frozen=True)
class Keyword:
    """A keyword extracted from text together with its frequency."""
    text: str
    frequency: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert keyword to dictionary."""
        return {"text": self.text, "frequency": self.frequency}
