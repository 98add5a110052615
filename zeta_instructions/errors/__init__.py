from .client import (
    ZetaClientError,
    InvalidInput,
    InvalidVariant,
    UnknownAsset,
    UnknownMarket,
    MarketIndexOutOfRange,
    InvalidSeed,
    SchemaVersionMismatch,
)
