# trading_dashboard/config.py - Configuration for the trading dashboard
"""
Configuration module for the trading dashboard.
Handles environment variables, proxy API settings, chart defaults and logging.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

# .env is expected in the project root (one level up from trading_dashboard/)
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


class DashboardConfig:
    """
    [CLASS SUMMARY]
    Purpose: Centralized configuration management for the dashboard
    Responsibilities:
        - Locate the brokerage proxy and optional credentials
        - Provide chart size defaults
        - Configure logging
    Usage:
        config = DashboardConfig()
        url = config.base_url
    """

    def __init__(self, config_override: Optional[Dict[str, Any]] = None):
        """
        [FUNCTION SUMMARY]
        Purpose: Initialize configuration with environment variables and optional overrides
        Parameters:
            - config_override (dict, optional): Override default settings for testing
        Example: DashboardConfig({'chart_width': 800}) -> wider default chart
        """
        self.config_override = config_override or {}

        self._load_api_config()
        self._load_chart_config()
        self._setup_logging()

    def _get(self, key: str, env_var: str, default: Any) -> Any:
        """Resolve a setting: override first, then environment, then default"""
        if key in self.config_override:
            return self.config_override[key]
        return os.getenv(env_var, default)

    def _load_api_config(self):
        """
        [FUNCTION SUMMARY]
        Purpose: Load proxy endpoint configuration and optional credentials
        Sets: base_url, endpoints, request_timeout, api_key_id, api_secret_key
        """
        self.base_url = str(self._get('base_url', 'DASHBOARD_API_URL',
                                      'http://localhost:3001')).rstrip('/')

        self.endpoints = {
            'account': f"{self.base_url}/api/alpaca/account",
            'market_data': f"{self.base_url}/api/alpaca/market-data",
        }

        self.request_timeout = float(self._get('request_timeout',
                                               'DASHBOARD_REQUEST_TIMEOUT', 10))

        # Forwarded to the proxy only when both are present
        self.api_key_id = self._get('api_key_id', 'APCA_API_KEY_ID', None)
        self.api_secret_key = self._get('api_secret_key', 'APCA_API_SECRET_KEY', None)

    def _load_chart_config(self):
        """
        [FUNCTION SUMMARY]
        Purpose: Configure the default symbol and chart dimensions
        Sets: default_symbol, chart_width, chart_height
        Raises: ValueError if a chart dimension is not positive
        """
        self.default_symbol = str(self._get('default_symbol',
                                            'DASHBOARD_DEFAULT_SYMBOL', 'AAPL')).upper()
        self.chart_width = int(self._get('chart_width', 'DASHBOARD_CHART_WIDTH', 600))
        self.chart_height = int(self._get('chart_height', 'DASHBOARD_CHART_HEIGHT', 400))

        if self.chart_width <= 0 or self.chart_height <= 0:
            raise ValueError(
                f"Chart dimensions must be positive, got "
                f"{self.chart_width}x{self.chart_height}"
            )

    def _setup_logging(self):
        """
        [FUNCTION SUMMARY]
        Purpose: Configure logging for the dashboard
        Sets: logger_config, log_file
        Note: File logging is off unless DASHBOARD_LOG_FILE is set
        """
        log_level = str(self._get('log_level', 'DASHBOARD_LOG_LEVEL', 'INFO'))

        self.logger_config = {
            'level': getattr(logging, log_level.upper(), logging.INFO),
            'format': LOG_FORMAT,
            'datefmt': LOG_DATEFMT
        }

        log_file = self._get('log_file', 'DASHBOARD_LOG_FILE', None)
        self.log_file = Path(log_file) if log_file else None
        self.max_log_size = 10 * 1024 * 1024  # 10 MB
        self.log_backup_count = 5

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key_id and self.api_secret_key)

    def get_logger(self, name: str) -> logging.Logger:
        """
        [FUNCTION SUMMARY]
        Purpose: Create a configured logger for a dashboard component
        Parameters:
            - name (str): Logger name (usually __name__ of the calling module)
        Returns: logging.Logger - Configured logger instance
        Example: logger = config.get_logger(__name__)
        """
        logger = logging.getLogger(name)
        logger.setLevel(self.logger_config['level'])

        # Remove existing handlers to avoid duplicates
        logger.handlers.clear()

        formatter = logging.Formatter(
            self.logger_config['format'],
            datefmt=self.logger_config['datefmt']
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.logger_config['level'])
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if self.log_file is not None:
            from logging.handlers import RotatingFileHandler
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=self.max_log_size,
                backupCount=self.log_backup_count
            )
            file_handler.setLevel(self.logger_config['level'])
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        return logger

    def to_dict(self) -> Dict[str, Any]:
        """
        [FUNCTION SUMMARY]
        Purpose: Export configuration as dictionary for debugging/inspection
        Returns: dict - All configuration values except credentials
        """
        return {
            'api_settings': {
                'base_url': self.base_url,
                'endpoints': dict(self.endpoints),
                'timeout': self.request_timeout,
                'credentials_configured': self.has_credentials
            },
            'chart_settings': {
                'default_symbol': self.default_symbol,
                'width': self.chart_width,
                'height': self.chart_height
            },
            'logging': {
                'level': logging.getLevelName(self.logger_config['level']),
                'log_file': str(self.log_file) if self.log_file else None
            }
        }


_config_instance = None


def get_config(reset: bool = False, **overrides) -> DashboardConfig:
    """
    [FUNCTION SUMMARY]
    Purpose: Get or create singleton configuration instance
    Parameters:
        - reset (bool): Force create new instance
        - **overrides: Configuration overrides
    Returns: DashboardConfig - Configuration instance
    Example: config = get_config(base_url='http://localhost:8080')
    """
    global _config_instance

    if _config_instance is None or reset or overrides:
        _config_instance = DashboardConfig(overrides or None)

    return _config_instance
