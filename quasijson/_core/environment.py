import os
from typing import Any, Optional

from dotenv import find_dotenv
from pydantic import BaseModel, Field, GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema
from pydantic_settings import BaseSettings, SettingsConfigDict

###################################
# .env File Loading Logic
# 1. An explicit `ENV_PATH` environment variable wins when it points at a file.
# 2. Otherwise `find_dotenv()` searches the current and parent directories.
###################################


env_path_from_var = os.getenv('ENV_PATH')
dotenv_path = (
    env_path_from_var
    if env_path_from_var and os.path.exists(env_path_from_var)
    else find_dotenv()
)


class LogLevel(str):
    """Custom type for log levels, ensuring the value is one of the standard levels."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        def validate_log_level(v: str) -> str:
            valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
            v_upper = v.upper()
            if v_upper not in valid_levels:
                raise ValueError(f'Log level must be one of: {valid_levels}')
            return v_upper

        return core_schema.no_info_after_validator_function(
            validate_log_level, core_schema.str_schema()
        )


###################################
# Core Configuration Schema
###################################
class QuasiJSONConfig(BaseModel):
    """Defines the configuration schema for the quasijson package.
    This class does not load from the environment; it only defines the data shape.
    """

    debug: bool = Field(
        default=False,
        description='Enable debug mode; repair stages log their intermediate buffers.',
    )

    # Repair Settings
    repair_strip_single_quotes: bool = Field(
        default=True,
        description=(
            'Remove every single-quote character after quoting. Lossy: apostrophes '
            'inside genuine string content are removed as well.'
        ),
    )
    repair_preserve_literals: bool = Field(
        default=True,
        description='Leave bare JSON numbers, true, false and null unquoted when quoting values.',
    )

    # Logging Settings
    log_level: LogLevel = Field(
        default='INFO', description='The minimum logging level.'
    )
    log_use_rich: bool = Field(
        default=True, description='Use rich for formatted logging output.'
    )
    log_format_string: Optional[str] = Field(
        default=None, description='A custom format string for the console logger.'
    )
    log_file_path: Optional[str] = Field(
        default=None, description='If set, logs will also be written to this file.'
    )
    log_max_input_chars: int = Field(
        default=500,
        ge=0,
        description='Inputs echoed into log messages are truncated to this many characters.',
    )


###################################
# Settings Initialization
###################################
class AppSettings(BaseSettings, QuasiJSONConfig):
    """Application settings that load from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix='',
        case_sensitive=False,
        validate_assignment=True,
        extra='ignore',
        env_file=dotenv_path,
        env_file_encoding='utf-8',
    )


# Global Settings
settings = AppSettings()


def resolve_option(value: Optional[Any], setting_name: str) -> Any:
    """
    Resolves an option by prioritizing a direct argument over global settings.

    Args:
        value: The value passed directly to a function/class, or None.
        setting_name: The attribute name on the global settings object
            (e.g., 'repair_strip_single_quotes').

    Returns:
        The resolved value.
    """
    if value is not None:
        return value
    return getattr(settings, setting_name)
