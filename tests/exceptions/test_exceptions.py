"""
Unit tests for custom exceptions module.

This module contains tests for the custom exception classes
and their context handling.
"""

import pytest
from sector_core.exceptions import (
    SectorBaseException,
    SectorConfigurationError,
    SectorValidationError,
    SectorStoreError,
    SectorProcessingError,
)
from modules.sector_overlay.exceptions import (
    GeometryValidationFailure,
    MissingCoordinatesError,
    RemoteReadFailure,
    RemoteWriteFailure,
    DrawSessionStateError,
)


class TestSectorBaseException:
    """Test suite for SectorBaseException class."""
    
    def test_base_exception_without_context(self):
        """Test SectorBaseException without context."""
        exception = SectorBaseException("Test error message")
        
        assert str(exception) == "Test error message"
        assert exception.message == "Test error message"
        assert exception.context == {}
    
    def test_base_exception_with_context(self):
        """Test SectorBaseException with context."""
        context = {"path": "sectorDetails", "sector_id": "-K0000000001"}
        exception = SectorBaseException("Test error message", context)
        
        assert exception.message == "Test error message"
        assert exception.context == context
        assert "path=sectorDetails" in str(exception)
        assert "sector_id=-K0000000001" in str(exception)
    
    def test_base_exception_with_none_context(self):
        """Test SectorBaseException with None context."""
        exception = SectorBaseException("Test error message", None)
        
        assert str(exception) == "Test error message"
        assert exception.context == {}
    
    def test_base_exception_context_string_representation(self):
        """Test string representation with various context types."""
        context = {
            "string_value": "test",
            "int_value": 42,
            "bool_value": True,
            "none_value": None
        }
        error_str = str(SectorBaseException("Test error", context))
        
        assert "string_value=test" in error_str
        assert "int_value=42" in error_str
        assert "bool_value=True" in error_str
        assert "none_value=None" in error_str


class TestExceptionHierarchy:
    """Test suite for the derived exception classes."""
    
    @pytest.mark.parametrize("exception_class", [
        SectorConfigurationError,
        SectorValidationError,
        SectorStoreError,
        SectorProcessingError,
    ])
    def test_inherits_from_base(self, exception_class):
        """Test that every framework exception is a SectorBaseException."""
        exception = exception_class("Failure")
        
        assert isinstance(exception, SectorBaseException)
        assert isinstance(exception, Exception)
    
    def test_store_error_with_context(self):
        """Test SectorStoreError carries its context into the message."""
        exception = SectorStoreError("Read failed", {"path": "personnel/p1"})
        
        assert exception.message == "Read failed"
        assert "path=personnel/p1" in str(exception)
    
    def test_validation_error_can_be_caught_as_base_exception(self):
        """Test that SectorValidationError can be caught as SectorBaseException."""
        with pytest.raises(SectorBaseException) as exc_info:
            raise SectorValidationError("Malformed geometry")
        
        assert isinstance(exc_info.value, SectorValidationError)
        assert str(exc_info.value) == "Malformed geometry"


class TestSectorOverlayExceptions:
    """Test suite for the sector overlay module exceptions."""
    
    @pytest.mark.parametrize("exception_class,parent", [
        (GeometryValidationFailure, SectorValidationError),
        (MissingCoordinatesError, SectorValidationError),
        (RemoteReadFailure, SectorStoreError),
        (RemoteWriteFailure, SectorStoreError),
        (DrawSessionStateError, SectorProcessingError),
    ])
    def test_module_exceptions_extend_framework(self, exception_class, parent):
        assert issubclass(exception_class, parent)
    
    def test_draw_session_state_error_carries_state(self):
        exception = DrawSessionStateError("Cannot submit", "idle")
        
        assert exception.state == "idle"
        assert str(exception) == "Cannot submit (Context: state=idle)"
    
    def test_draw_session_state_error_without_state(self):
        exception = DrawSessionStateError("Cannot submit")
        
        assert exception.context == {}
        assert str(exception) == "Cannot submit"
