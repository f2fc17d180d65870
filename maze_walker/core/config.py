"""
Configuration management for maze_walker with Pydantic validation
"""

from typing import Dict, Optional, Union, Any, Literal
from pathlib import Path
import yaml
import os
import re
from pydantic import BaseModel, Field, ConfigDict, ValidationError

from .coordinate import Heuristic
from .cost_cache import RelaxationPolicy
from .exceptions import ConfigError
from .frontier import FrontierMode
from .search import SearchSettings


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class SearchConfig(BaseModel):
    """Search engine behaviour"""
    frontier: Literal['stack', 'priority'] = Field('stack', description="Expansion order (LIFO stack or g+h min-heap)")
    relaxation: Literal['reference', 'shortest'] = Field('reference', description="When an open node adopts a new distance")
    heuristic: Literal['squared_euclidean', 'manhattan'] = Field('squared_euclidean', description="Distance estimate to target")


class GridConfig(BaseModel):
    """Map loading options"""
    strict_rows: bool = Field(False, description="Reject maps whose rows differ in length")


class OutputConfig(BaseModel):
    """Output configuration"""
    format: Literal['text', 'json'] = Field('text', description="Output format")
    preserve_endpoints: bool = Field(False, description="Keep origin/target glyphs under the path overlay")
    show_path: bool = Field(False, description="Also print path coordinates (text format)")
    json_indent: int = Field(2, ge=0, le=8, description="Indentation for JSON output")


class WalkerConfigModel(BaseModel):
    """Pydantic model for maze_walker configuration validation"""
    model_config = ConfigDict(extra='ignore')  # Ignore extra fields in YAML

    # Metadata (optional)
    version: Optional[Union[int, float, str]] = None
    description: Optional[str] = None

    search: SearchConfig = Field(default_factory=SearchConfig)
    grid: GridConfig = Field(default_factory=GridConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# ============================================================================
# Environment Variable Substitution
# ============================================================================

def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values

    Supports multiple formats:
    - ${VAR_NAME}
    - $VAR_NAME
    - ${VAR_NAME:-default_value}  (with default)

    Args:
        value: Configuration value (can be str, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ConfigError: If a referenced variable is unset and has no default
    """
    if isinstance(value, str):
        def replace_with_default(match):
            var_name = match.group(1)
            default_value = match.group(3)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            elif default_value is not None:
                return default_value
            else:
                raise ConfigError(f"Environment variable '{var_name}' is not set and no default value provided")

        value = re.sub(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(:-([^}]*))?\}', replace_with_default, value)

        def replace_simple(match):
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            else:
                raise ConfigError(f"Environment variable '{var_name}' is not set")

        value = re.sub(r'\$([A-Za-z_][A-Za-z0-9_]*)', replace_simple, value)

        return value

    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]

    else:
        return value


# ============================================================================
# WalkerConfig Class (wrapper around Pydantic model)
# ============================================================================

class WalkerConfig:
    """Configuration class for search and output parameters with validation"""

    def __init__(self, config_dict: Optional[Dict] = None):
        """Initialize from dictionary (parsed from YAML) with Pydantic validation"""
        config_dict = _substitute_env_vars(config_dict or {})
        if not isinstance(config_dict, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

        try:
            self._model = WalkerConfigModel(**config_dict)
        except ValidationError as e:
            raise ConfigError(f"Configuration validation failed: {str(e)}") from e

        # Metadata
        self.config_version = self._model.version
        self.config_description = self._model.description

        # Search
        self.frontier = self._model.search.frontier
        self.relaxation = self._model.search.relaxation
        self.heuristic = self._model.search.heuristic

        # Grid
        self.strict_rows = self._model.grid.strict_rows

        # Output
        self.output_format = self._model.output.format
        self.preserve_endpoints = self._model.output.preserve_endpoints
        self.show_path = self._model.output.show_path
        self.json_indent = self._model.output.json_indent

    @classmethod
    def default(cls) -> 'WalkerConfig':
        """Configuration with every value at its default"""
        return cls({})

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'WalkerConfig':
        """Load configuration from YAML file with validation"""
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to parse YAML file: {str(e)}") from e
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {yaml_path}: {e}") from e

        return cls(config_dict)

    def with_overrides(self, **overrides) -> 'WalkerConfig':
        """
        Return a new config with individual values replaced

        Keys are the flat attribute names (frontier, output_format, ...).
        None values are ignored so unset CLI flags keep the file's value.
        """
        data = self.to_dict()
        sections = {
            'frontier': ('search', 'frontier'),
            'relaxation': ('search', 'relaxation'),
            'heuristic': ('search', 'heuristic'),
            'strict_rows': ('grid', 'strict_rows'),
            'output_format': ('output', 'format'),
            'preserve_endpoints': ('output', 'preserve_endpoints'),
            'show_path': ('output', 'show_path'),
            'json_indent': ('output', 'json_indent'),
        }
        for key, value in overrides.items():
            if value is None:
                continue
            if key not in sections:
                raise ConfigError(f"Unknown configuration override: {key}")
            section, field_name = sections[key]
            data[section][field_name] = value
        return WalkerConfig(data)

    def search_settings(self) -> SearchSettings:
        """Core search settings built from the search section"""
        return SearchSettings(
            frontier=FrontierMode.from_string(self.frontier),
            relaxation=RelaxationPolicy.from_string(self.relaxation),
            heuristic=Heuristic.from_string(self.heuristic),
        )

    def to_dict(self) -> Dict:
        """Convert config back to dictionary"""
        return {
            'version': self.config_version,
            'description': self.config_description,
            'search': {
                'frontier': self.frontier,
                'relaxation': self.relaxation,
                'heuristic': self.heuristic,
            },
            'grid': {
                'strict_rows': self.strict_rows,
            },
            'output': {
                'format': self.output_format,
                'preserve_endpoints': self.preserve_endpoints,
                'show_path': self.show_path,
                'json_indent': self.json_indent,
            },
        }
