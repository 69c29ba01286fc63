"""
Tests for StoreConnector class.

This module tests remote store connection bootstrap including retry logic
and timeout handling.
"""

import pytest
from unittest.mock import Mock, patch
from func_timeout import FunctionTimedOut
from tenacity import wait_none

from sector_core.connection import StoreConnector, InMemoryRemoteStore
from sector_core.exceptions import SectorStoreError


class TestStoreConnector:
    """Test cases for StoreConnector class."""
    
    @pytest.fixture
    def mock_config_loader(self):
        """Create a mock ConfigLoader for testing."""
        mock_loader = Mock()
        mock_loader.get_connection_settings.return_value = {"connect_timeout_seconds": 5}
        return mock_loader
    
    @pytest.fixture(autouse=True)
    def no_backoff(self):
        """Remove the exponential backoff between attempts."""
        with patch.object(StoreConnector._connect_with_retry.retry, "wait", wait_none()):
            yield
    
    def test_init(self, mock_config_loader):
        """Test StoreConnector initialization."""
        connector = StoreConnector(mock_config_loader, InMemoryRemoteStore)
        
        assert connector.environment == "development"
        assert connector.get_store() is None
        assert not connector.is_connected()
    
    def test_connect_success(self, mock_config_loader):
        """Test successful connection."""
        store = InMemoryRemoteStore()
        connector = StoreConnector(mock_config_loader, lambda: store)
        
        assert connector.connect() is store
        assert connector.is_connected()
        assert connector.get_store() is store
        mock_config_loader.get_connection_settings.assert_called_with("development")
    
    @patch('sector_core.connection.store_connector.func_timeout')
    def test_connect_timeout(self, mock_func_timeout, mock_config_loader):
        """Test connection timeout handling."""
        mock_func_timeout.side_effect = FunctionTimedOut()
        connector = StoreConnector(mock_config_loader, InMemoryRemoteStore)
        
        with pytest.raises(SectorStoreError, match="timeout"):
            connector.connect()
        
        assert mock_func_timeout.call_count == 1
        assert mock_func_timeout.call_args[0][0] == 5
    
    def test_connect_factory_error_is_not_retried(self, mock_config_loader):
        """Test that unexpected factory errors fail without retrying."""
        factory = Mock(side_effect=ValueError("bad credentials"))
        connector = StoreConnector(mock_config_loader, factory)
        
        with pytest.raises(SectorStoreError, match="bad credentials"):
            connector.connect()
        
        assert factory.call_count == 1
        assert not connector.is_connected()
    
    def test_connect_retries_connection_errors(self, mock_config_loader):
        """Test that ConnectionError is retried until it succeeds."""
        store = InMemoryRemoteStore()
        factory = Mock(side_effect=[ConnectionError("refused"), ConnectionError("refused"), store])
        connector = StoreConnector(mock_config_loader, factory)
        
        assert connector.connect() is store
        assert factory.call_count == 3
    
    def test_connect_gives_up_after_three_attempts(self, mock_config_loader):
        """Test that persistent ConnectionError becomes SectorStoreError."""
        factory = Mock(side_effect=ConnectionError("refused"))
        connector = StoreConnector(mock_config_loader, factory)
        
        with pytest.raises(SectorStoreError, match="refused"):
            connector.connect()
        
        assert factory.call_count == 3
    
    def test_connect_validates_ping(self, mock_config_loader):
        """Test that a store failing its ping is treated as unreachable."""
        store = Mock()
        store.ping.return_value = False
        connector = StoreConnector(mock_config_loader, lambda: store)
        
        with pytest.raises(SectorStoreError, match="ping"):
            connector.connect()
        
        assert store.ping.call_count == 3
    
    def test_disconnect(self, mock_config_loader):
        """Test disconnect drops the store reference."""
        connector = StoreConnector(mock_config_loader, InMemoryRemoteStore)
        connector.connect()
        
        connector.disconnect()
        
        assert not connector.is_connected()
        assert connector.get_store() is None
