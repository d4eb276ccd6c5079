"""Configuration models for ripbullets."""

from pydantic import BaseModel, Field, HttpUrl, field_validator
from pathlib import Path
from typing import Optional
import yaml
import os
import stat


DEFAULT_CONFIG_PATH = Path.home() / ".config" / "ripbullets" / "config.yaml"


class LogseqConfig(BaseModel):
    """Configuration for reaching Logseq (HTTP API server and graph on disk)."""

    api_url: HttpUrl = Field(
        default="http://127.0.0.1:12315",
        description="Base URL of the Logseq HTTP API server"
    )

    api_token: Optional[str] = Field(
        default=None,
        description="Authorization token configured in Logseq's API server settings"
    )

    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds"
    )

    graph_path: Optional[str] = Field(
        default=None,
        description="Path to Logseq graph directory (for reading pages from disk)"
    )

    @field_validator('graph_path')
    @classmethod
    def validate_graph_path(cls, v: Optional[str]) -> Optional[str]:
        """Validate graph path exists and is a directory."""
        if v is None:
            return v
        path = Path(v).expanduser()
        if not path.exists():
            raise ValueError(
                f"Graph path does not exist: {path}\n"
                f"Please create the directory or update config.yaml"
            )
        if not path.is_dir():
            raise ValueError(
                f"Graph path is not a directory: {path}\n"
                f"Please provide a valid directory path"
            )
        return str(path)

    model_config = {"frozen": True}


class TransformOptions(BaseModel):
    """Rendering switches for the markdown transform."""

    remove_top_level_bullets: bool = Field(
        default=True,
        description="Render top-level blocks as paragraphs instead of bullets"
    )

    keep_nested_bullets: bool = Field(
        default=True,
        description="Prefix nested blocks with a '- ' list marker"
    )

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for ripbullets."""

    logseq: LogseqConfig = Field(default_factory=LogseqConfig, description="Logseq settings")
    transform: TransformOptions = Field(default_factory=TransformOptions, description="Transform settings")

    @classmethod
    def load(cls, path: Path) -> "Config":
        """
        Load configuration from YAML file.

        Validates file permissions before loading, since the file may hold
        the Logseq API token.

        Args:
            path: Path to config.yaml file

        Returns:
            Validated Config instance

        Raises:
            PermissionError: If file permissions are too open
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is invalid or validation fails
        """
        if not path.exists():
            raise FileNotFoundError(
                f"Configuration file not found at {path}\n\n"
                f"Please create the file with the following format:\n\n"
                f"logseq:\n"
                f"  api_url: http://127.0.0.1:12315\n"
                f"  api_token: YOUR_TOKEN_HERE\n"
                f"  graph_path: ~/Documents/logseq-graph\n\n"
                f"transform:\n"
                f"  remove_top_level_bullets: true\n"
                f"  keep_nested_bullets: true\n"
            )

        # Must be 600
        mode = os.stat(path).st_mode
        if mode & (stat.S_IRWXG | stat.S_IRWXO):
            raise PermissionError(
                f"Config file has overly permissive permissions: {oct(mode)}\n"
                f"Run: chmod 600 {path}"
            )

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at the top level of {path}")

        return cls(**data)

    @classmethod
    def load_or_default(cls, path: Optional[Path] = None) -> "Config":
        """
        Load configuration, falling back to defaults when the default file is absent.

        An explicitly given path must exist.

        Args:
            path: Optional explicit config path

        Returns:
            Validated Config instance
        """
        if path is not None:
            return cls.load(path)
        if not DEFAULT_CONFIG_PATH.exists():
            return cls()
        return cls.load(DEFAULT_CONFIG_PATH)

    model_config = {"frozen": True}
