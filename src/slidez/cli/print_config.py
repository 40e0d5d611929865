from pathlib import Path

from . import app


@app.command()
def print_config(*, workdir: Path = Path()) -> None:
    """Print the resolved settings.

    Args:
        workdir: Path to move into before running the command

    """
    from rich import print as rich_print
    from rich.markup import escape

    from ..configuring.settings import Settings

    config = Settings.from_yaml(workdir).model_dump()
    max_length = max(len(key) for key in config)
    rich_print(
        "\n".join(
            f"[green]{k:{max_length}}[/] {escape(repr(v) if isinstance(v, str) else str(v))}"
            for k, v in config.items()
        )
    )
