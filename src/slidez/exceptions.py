class SlidezError(Exception):
    pass


class SlideNotFoundError(SlidezError):
    pass


class InvalidSlideError(SlidezError):
    pass


class SettingsError(SlidezError):
    pass
