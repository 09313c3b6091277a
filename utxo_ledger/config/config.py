# utxo_ledger/config/config.py
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from utxo_ledger.exceptions import ConfigurationError
from utxo_ledger.utils.logging_config import DEFAULT_FORMAT

STRATEGIES = ("naive", "max_fee")


@dataclass
class HandlerConfig:
    """Batch acceptance settings"""
    strategy: str = "max_fee"

    def validate(self):
        if self.strategy not in STRATEGIES:
            raise ConfigurationError(f"Unknown handler strategy: {self.strategy!r}")


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None
    max_size: int = 10485760
    backup_count: int = 5
    format: str = DEFAULT_FORMAT

    def validate(self):
        if self.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Invalid log level: {self.level!r}")
        if self.max_size <= 0:
            raise ConfigurationError("Log max_size must be positive")
        if self.backup_count < 0:
            raise ConfigurationError("Log backup_count cannot be negative")


@dataclass
class LedgerConfig:
    """Top-level configuration"""
    handler: HandlerConfig = field(default_factory=HandlerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: str) -> 'LedgerConfig':
        """Load configuration from YAML file, or defaults if it does not exist"""
        config_file = Path(config_path)
        if not config_file.exists():
            return cls()

        try:
            with open(config_file, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {config_path}: {e}")

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> 'LedgerConfig':
        try:
            config = cls(
                handler=HandlerConfig(**config_data.get('handler', {})),
                logging=LoggingConfig(**config_data.get('logging', {}))
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")
        config.validate()
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            'handler': asdict(self.handler),
            'logging': asdict(self.logging)
        }

    def save(self, config_path: str):
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False)

    def validate(self):
        self.handler.validate()
        self.logging.validate()
