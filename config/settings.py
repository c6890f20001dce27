from pydantic import Field
from pydantic_settings import BaseSettings


class BotSettings(BaseSettings):
    discord_token: str = Field(default="", description="Discord bot token")

    command_prefix: str = Field(default="!", min_length=1, description="Command prefix")
    environment: str = Field(default="development", description="Environment")
    log_level: str = Field(default="INFO", description="Logging level")

    # Dispatcher behaviour
    collapse_whitespace: bool = Field(
        default=True,
        description="Collapse every whitespace run when tokenizing (False collapses only the first one)",
    )

    # Built-ins registered on startup
    register_default_types: bool = Field(default=True, description="Register the built-in argument types")
    register_default_commands: bool = Field(default=True, description="Register help, ping and unknown")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = BotSettings()
