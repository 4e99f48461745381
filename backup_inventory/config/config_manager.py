"""Configuration management for the backup inventory system."""

import os
import yaml
from dataclasses import dataclass
from typing import Dict, List, Any, Mapping, Optional
from urllib.parse import urlsplit
from .config_validator import ConfigValidator


DEFAULT_SSH_PORT = 22


@dataclass(frozen=True)
class ConnectionConfig:
    """Parameters needed to open an SFTP session."""
    host: str
    port: int
    user: str
    password: str
    timeout_seconds: float = 30


class ConfigManager:
    """Manages configuration loading and validation for backup inventory."""

    DEFAULT_CONFIG_LOCATIONS = [
        "config.yaml",
        "config.yml",
        os.path.expanduser("~/.backup-inventory/config.yaml"),
        os.path.expanduser("~/.backup-inventory/config.yml"),
        "/etc/backup-inventory/config.yaml",
        "/etc/backup-inventory/config.yml"
    ]

    # Environment variables that fill in missing connection settings
    ENVIRONMENT_KEYS = {
        'host': 'HOST',
        'user': 'USER',
        'password': 'PASSWORD'
    }

    def __init__(self, config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config file. If not provided,
                        will search in default locations.
            environ: Environment to read HOST, USER and PASSWORD from.
                     Defaults to the process environment.
        """
        self.config_path = config_path
        self.environ = os.environ if environ is None else environ
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file and environment.

        Returns:
            Dictionary containing configuration data.

        Raises:
            FileNotFoundError: If an explicit config file cannot be found.
            ValueError: If the configuration is invalid.
        """
        config_file = self._find_config_file()
        self.config_data = {}

        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {config_file}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading config file {config_file}: {e}")

            if not isinstance(self.config_data, dict):
                raise ValueError(f"Config file {config_file} must contain a mapping")

        self._apply_environment()
        self._set_defaults()
        self._split_host_port()

        # Validate configuration
        self.validator.validate(self.config_data)

        return self.config_data

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in default locations.

        Returns:
            Path to configuration file, or None when none exists.

        Raises:
            FileNotFoundError: If an explicit config path does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location

        return None

    def _apply_environment(self):
        """Fill missing connection values from the environment."""
        if self.config_data.get('connection') is None:
            self.config_data['connection'] = {}
        connection = self.config_data['connection']
        if not isinstance(connection, dict):
            raise ValueError("Configuration section 'connection' must be a mapping")

        for key, variable in self.ENVIRONMENT_KEYS.items():
            if not connection.get(key) and self.environ.get(variable):
                connection[key] = self.environ[variable]

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        defaults = {
            'connection': {
                'timeout_seconds': 30
            },
            'inventory': {
                'root_path': '/',
                'exclude_patterns': [],
                'on_error': 'skip'
            }
        }

        # Merge defaults with existing config
        for section, section_defaults in defaults.items():
            if not isinstance(self.config_data.get(section), dict):
                if section in self.config_data and self.config_data[section] is not None:
                    raise ValueError(f"Configuration section '{section}' must be a mapping")
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if key not in self.config_data[section]:
                    self.config_data[section][key] = value

    def _split_host_port(self):
        """Accept HOST as an SSH dial address: host:port or [ipv6]:port."""
        connection = self.config_data['connection']
        host = connection.get('host')

        # A bare IPv6 address has several colons and no port
        if isinstance(host, str) and (host.startswith('[') or host.count(':') == 1):
            parts = urlsplit('//' + host)
            try:
                port = parts.port
            except ValueError:
                raise ValueError(f"Connection configuration has invalid host: {host}")
            if not parts.hostname:
                raise ValueError(f"Connection configuration has invalid host: {host}")
            connection['host'] = parts.hostname
            if port is not None:
                connection.setdefault('port', port)
        connection.setdefault('port', DEFAULT_SSH_PORT)

    def get_connection_config(self) -> ConnectionConfig:
        """Get connection parameters for the SFTP session.

        Returns:
            ConnectionConfig built from the loaded configuration.
        """
        connection = self.config_data.get('connection', {})
        return ConnectionConfig(
            host=connection['host'],
            port=int(connection.get('port', DEFAULT_SSH_PORT)),
            user=connection['user'],
            password=str(connection['password']),
            timeout_seconds=float(connection.get('timeout_seconds', 30))
        )

    def get_inventory_config(self) -> Dict[str, Any]:
        """Get inventory configuration.

        Returns:
            Inventory configuration dictionary.
        """
        return self.config_data.get('inventory', {})

    def get_exclude_patterns(self) -> List[str]:
        return list(self.get_inventory_config().get('exclude_patterns', []))
