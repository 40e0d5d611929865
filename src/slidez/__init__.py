from typing import Any

__version__ = "0.1.0"

app_name = "slidez"


def __getattr__(name: str) -> Any:
    """Lazy-load attributes of the slidez package.

    The CLI entry point (the main function of the slidez.cli.__init__ file) sets up \
    logging before any other module is loaded. Loading slidez.cli.__init__ entails \
    loading slidez.__init__ first, so top-level imports here would defeat that setup.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "render":
            from .rendering import render

            return render
        case "render_slide":
            from .rendering import render_slide

            return render_slide
        case "ViewContext":
            from .models import ViewContext

            return ViewContext
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise AttributeError(msg)
