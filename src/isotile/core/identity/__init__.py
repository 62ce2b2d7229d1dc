from isotile.core.identity.models import TileId

__all__ = [
    "TileId",
]
