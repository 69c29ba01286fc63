"""
Custom exception classes for the Sector Overlay system.

This module defines domain-specific exceptions to provide clear error handling
and debugging information throughout the system.
"""

from typing import Optional, Dict, Any


class SectorBaseException(Exception):
    """Base exception class for all sector overlay exceptions."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class SectorConfigurationError(SectorBaseException):
    """
    Exception raised when configuration loading or validation fails.
    
    This exception is raised when:
    - The environment configuration file is missing or invalid
    - A requested environment or store path is not configured
    """
    pass


class SectorValidationError(SectorBaseException):
    """
    Exception raised when data validation fails.
    
    This exception is raised when:
    - Drawn geometry is malformed
    - A personnel record or marker lacks coordinates
    - Configuration structure is malformed
    """
    pass


class SectorStoreError(SectorBaseException):
    """
    Exception raised when the remote store cannot be reached or used.
    
    This exception is raised when:
    - The store connection cannot be established
    - A remote read or append fails
    """
    pass


class SectorProcessingError(SectorBaseException):
    """
    Exception raised when sector processing fails.
    
    This exception is raised when:
    - A draw session receives an action its current state does not allow
    - A sector record cannot be assembled
    """
    pass
