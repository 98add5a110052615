class ZetaClientError(Exception):
    """Base class for every error raised while building an instruction."""


class InvalidInput(ZetaClientError, ValueError):
    pass


class InvalidVariant(InvalidInput):
    """A wire tag or enum value that has no counterpart on the other side."""


class UnknownAsset(ZetaClientError, KeyError):
    def __init__(self, asset) -> None:
        super().__init__(asset)
        self.asset = asset

    def __str__(self) -> str:
        return f"Asset {self.asset} is not loaded in the exchange snapshot"


class UnknownMarket(ZetaClientError, KeyError):
    def __init__(self, asset, address) -> None:
        super().__init__(address)
        self.asset = asset
        self.address = address

    def __str__(self) -> str:
        return f"Market {self.address} is not listed for {self.asset}"


class MarketIndexOutOfRange(ZetaClientError, IndexError):
    def __init__(self, asset, index: int, count: int) -> None:
        super().__init__(
            f"Market index {index} out of range for {asset} ({count} markets)"
        )
        self.asset = asset
        self.index = index
        self.count = count


class InvalidSeed(ZetaClientError, ValueError):
    pass


class SchemaVersionMismatch(ZetaClientError):
    pass
