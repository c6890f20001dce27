import logging
from pathlib import Path
from typing import Optional

import typer

from config.settings import BotSettings, settings

from .core import CommandBot

app = typer.Typer(
    name="commandbot",
    help="Prefix command bot for Discord",
    add_completion=False,
)


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


@app.command()
def run(
    dev: bool = typer.Option(False, "--dev", help="Run in development mode"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Override the command prefix"),
) -> None:
    """Run the Discord bot."""
    overrides = {}
    if dev:
        overrides["environment"] = "development"
        overrides["log_level"] = "DEBUG"
    if log_level:
        overrides["log_level"] = log_level
    if prefix:
        overrides["command_prefix"] = prefix

    bot_settings = BotSettings(**overrides) if overrides else settings
    setup_logging(bot_settings.log_level)

    bot = CommandBot(bot_settings)
    bot.run()


@app.command()
def init(
    directory: Optional[str] = typer.Option(None, help="Directory to initialize")
) -> None:
    """Write a starter .env file."""
    target_dir = Path(directory) if directory else Path.cwd()

    if not target_dir.exists():
        target_dir.mkdir(parents=True)

    env_file = target_dir / ".env"
    if env_file.exists():
        typer.echo(f"⚠️  {env_file} already exists, leaving it untouched")
        return

    env_content = """# Discord Bot Configuration
DISCORD_TOKEN=your_discord_bot_token_here
COMMAND_PREFIX=!
ENVIRONMENT=development
LOG_LEVEL=INFO
COLLAPSE_WHITESPACE=true
"""
    env_file.write_text(env_content)
    typer.echo(f"✅ Bot project initialized in {target_dir}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
