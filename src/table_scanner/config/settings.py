"""Configuration management for Table Scanner."""

from pathlib import Path
from typing import Dict, Any, Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    model_config = SettingsConfigDict(
        env_prefix="TABLE_SCANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    # HTTP settings
    timeout: Optional[float] = Field(30.0, description="Seconds to wait for the page; None waits forever")
    retry_count: int = Field(0, description="Transport retries for a page fetch")
    user_agent: str = Field(
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    
    # Parsing
    html_parser: str = Field("html.parser", description="BeautifulSoup tree builder")
    table_selector: str = Field("table", description="CSS selector for table elements")
    
    log_level: str = Field("INFO")
    config_file: Path = Field(Path("configs/default.yaml"))


_settings: Optional[Settings] = None
_config_data: Optional[Dict[str, Any]] = None


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    global _config_data
    
    if _config_data is None:
        config_path = Path(config_file) if config_file else get_settings().config_file
        if config_path.exists():
            with open(config_path, 'r') as f:
                _config_data = yaml.safe_load(f) or {}
        else:
            _config_data = {}
    
    return _config_data


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    
    if _settings is None:
        _settings = Settings()
    
    return _settings


def reset_settings():
    """Drop cached settings and YAML config so they are re-read on next access."""
    global _settings, _config_data
    _settings = None
    _config_data = None


def get_config(key_path: str, default: Any = None) -> Any:
    """Get configuration value by dot-separated key path.
    
    Args:
        key_path: Dot-separated path like 'scanner.table_selector'
        default: Default value if key not found
        
    Returns:
        Configuration value or default
    """
    config = load_config()
    
    # Navigate through nested dict using key path
    value = config
    for key in key_path.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    
    return value
