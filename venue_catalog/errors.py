class CatalogError(Exception):
    """Feed-level failure; the current catalog stays as it was."""


class EmptyFeed(CatalogError):
    def __init__(self, message: str = "シートにデータがありません"):
        super().__init__(message)


class FeedFetchError(CatalogError):
    pass
