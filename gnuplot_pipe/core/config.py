from pydantic import BaseModel, Field, field_validator, model_validator

from gnuplot_pipe.const import (
    DEFAULT_CLOSE_TIMEOUT,
    DEFAULT_DISPLAY_ENV_VAR,
    DEFAULT_EXECUTABLE,
    DEFAULT_MAX_COMMAND_LENGTH,
    DEFAULT_MAX_TEMP_FILES,
    DEFAULT_STYLE,
    DEFAULT_TEMP_PREFIX,
    CommandOverflow,
    DrawStyle,
)


class SessionConfig(BaseModel):
    """Configuration for a plotting session."""

    # Process settings
    executable: str = Field(
        default=DEFAULT_EXECUTABLE,
        description="Name of the plotting executable. Resolved against `search_path` before it is started.",
    )
    search_path: str | None = Field(
        default=None,
        description="Search path used to locate the executable. If None, the PATH environment variable is used.",
    )
    display_env_var: str | None = Field(
        default=DEFAULT_DISPLAY_ENV_VAR,
        description="Environment variable checked at open time. A missing value only logs a warning, "
        "since headless terminals still work. If None, the check is skipped.",
    )
    close_timeout: float = Field(
        default=DEFAULT_CLOSE_TIMEOUT,
        gt=0,
        description="Seconds to wait for the plotting process to exit on close before killing it.",
    )

    # Temporary file settings
    temp_dir: str | None = Field(
        default=None,
        description="Directory for plot data files. If None, the platform temp directory is used.",
    )
    temp_prefix: str = Field(
        default=DEFAULT_TEMP_PREFIX,
        description="File name prefix for plot data files.",
    )
    max_temp_files: int = Field(
        default=DEFAULT_MAX_TEMP_FILES,
        ge=2,
        description="Capacity of the temp file pool. At most `max_temp_files - 1` files are tracked at once.",
    )

    # Command settings
    max_command_length: int = Field(
        default=DEFAULT_MAX_COMMAND_LENGTH,
        ge=16,
        description="Maximum length of a single command, excluding the line terminator.",
    )
    command_overflow: CommandOverflow = Field(
        default=CommandOverflow.TRUNCATE,
        description="Policy for commands longer than `max_command_length`: truncate with a warning, or reject.",
    )
    escape_text: bool = Field(
        default=True,
        description="Escape quote characters in titles and labels. "
        "If False, text is inserted verbatim into quoted arguments.",
    )

    # Behaviour settings
    default_style: DrawStyle = Field(default=DEFAULT_STYLE, description="Draw style used until set_style is called.")
    verbose: bool = Field(default=False, description="Whether to print verbose output.")

    @field_validator("executable")
    @classmethod
    def validate_executable(cls, value: str) -> str:
        """Validate that the executable name is not blank."""
        if not value.strip():
            msg = "'executable' cannot be empty"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def validate_prefix_fits(self) -> "SessionConfig":
        """Validate that a data file path can appear in a command."""
        if len(self.temp_prefix) >= self.max_command_length:
            msg = "'temp_prefix' must be shorter than 'max_command_length'"
            raise ValueError(msg)
        return self
