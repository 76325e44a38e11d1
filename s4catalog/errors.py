"""Errors raised while decoding catalog resources."""


class CatalogError(ValueError):
    """Base class for every decode failure."""


class UnexpectedEndOfData(CatalogError):
    """Buffer is shorter than the current field or list requires."""


class InvalidMagicOrHeader(CatalogError):
    """A fixed header value is impossible for the resource being decoded."""


class UnknownValueTag(CatalogError):
    """A tagged generic value carries a tag byte with no known meaning."""

    def __init__(self, tag: int, position: int) -> None:
        super().__init__(f'Unknown value tag {tag} at position {position}')
        self.tag = tag
        self.position = position


class UnsupportedVersion(CatalogError):
    """A version field is outside the range the codec can branch on."""

    def __init__(self, what: str, version: int, maximum: int) -> None:
        super().__init__(f'Unsupported {what} version {version} (max {maximum})')
        self.what = what
        self.version = version
        self.maximum = maximum


class MalformedValue(CatalogError):
    """A length, count or text payload cannot be decoded as stored."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f'{message} at position {position}')
        self.position = position
