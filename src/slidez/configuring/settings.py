from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Self

import appdirs
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
)

from .. import app_name
from ..exceptions import SettingsError
from ..utils import load_all_yamls

SETTINGS_FILE_NAME = "slidez.yml"


def user_config_dir() -> Path:
    return Path(appdirs.user_config_dir(app_name)).resolve()


def _convert(input_value: str | Path, info: ValidationInfo) -> Path:
    if isinstance(input_value, str):
        return Path(input_value.format(**info.data))
    return input_value


_Path = Annotated[Path, BeforeValidator(_convert), AfterValidator(Path.resolve)]


class Settings(BaseModel):
    """Resolved slidez settings.

    Path fields can reference previously defined fields with the `str.format` \
    syntax, e.g. `"{current_dir}/slides.yml"`.
    """

    model_config = ConfigDict(validate_default=True)
    current_dir: _Path
    user_config_dir: _Path = Field(default_factory=user_config_dir)
    deck: _Path = "{current_dir}/slides.yml"  # type: ignore[assignment]
    html_output: _Path = "{current_dir}/slides.html"  # type: ignore[assignment]
    html_title: str = "slidez"
    new_slide_title: str = "New Slide"
    new_slide_content: str = "# New Slide\n\nAdd your content here..."

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load settings for the directory `path`.

        `slidez.yml` files are read from the user configuration directory then from \
        `path`, the latter overriding the former.

        Args:
            path: Working directory.

        Raises:
            SettingsError: Raised if a settings file is not a mapping or if the \
                merged settings are invalid.

        Returns:
            The resolved settings.
        """
        contents = list(
            load_all_yamls(
                directory / SETTINGS_FILE_NAME
                for directory in (user_config_dir(), path.resolve())
            )
        )
        for content in contents:
            if content is not None and not isinstance(content, dict):
                msg = f"{SETTINGS_FILE_NAME} files must contain a mapping"
                raise SettingsError(msg)
        merged: dict[str, Any] = reduce(
            lambda a, b: {**a, **(b or {})}, contents, {}
        )
        merged.setdefault("current_dir", path)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            msg = f"invalid settings: {e}"
            raise SettingsError(msg) from e
