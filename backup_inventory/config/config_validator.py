"""Configuration validation for backup inventory."""

from typing import Dict, Any


class ConfigValidator:
    """Validates backup inventory configuration."""

    REQUIRED_CONNECTION_FIELDS = ['host', 'user', 'password']
    ERROR_POLICIES = ['skip', 'collect']

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.

        Args:
            config: Configuration dictionary to validate.

        Raises:
            ValueError: If configuration is invalid.
        """
        self._validate_connection(config.get('connection', {}))
        self._validate_inventory(config.get('inventory', {}))

    def _validate_connection(self, connection: Dict[str, Any]) -> None:
        """Validate connection configuration.

        Args:
            connection: Connection configuration dictionary.

        Raises:
            ValueError: If connection settings are missing or invalid.
        """
        missing_fields = [field for field in self.REQUIRED_CONNECTION_FIELDS if not connection.get(field)]
        if missing_fields:
            raise ValueError(
                f"Connection configuration missing required fields: {missing_fields} "
                "(set them in the config file or via HOST, USER and PASSWORD)"
            )

        if 'port' in connection:
            try:
                port = int(connection['port'])
                if not (1 <= port <= 65535):
                    raise ValueError()
            except (ValueError, TypeError):
                raise ValueError(f"Connection configuration has invalid port: {connection['port']}")

        try:
            timeout = float(connection.get('timeout_seconds', 30))
        except (ValueError, TypeError):
            raise ValueError(f"Connection configuration has invalid timeout: {connection.get('timeout_seconds')}")
        if timeout <= 0:
            raise ValueError("Connection timeout_seconds must be positive")

    def _validate_inventory(self, inventory: Dict[str, Any]) -> None:
        """Validate inventory configuration.

        Args:
            inventory: Inventory configuration dictionary.

        Raises:
            ValueError: If inventory settings are invalid.
        """
        root_path = inventory.get('root_path')
        if not root_path or not isinstance(root_path, str):
            raise ValueError("Inventory root_path cannot be empty")

        exclude_patterns = inventory.get('exclude_patterns', [])
        if not isinstance(exclude_patterns, list):
            raise ValueError("Inventory exclude_patterns must be a list")

        on_error = inventory.get('on_error', 'skip')
        if on_error not in self.ERROR_POLICIES:
            raise ValueError(f"Inventory on_error must be one of {self.ERROR_POLICIES}, got: {on_error}")
