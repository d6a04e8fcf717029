
from .engine import BoardEngine, BoardSummary, CellView, RevealState, Status
from .errors import InvalidConfiguration, InvalidCoordinate, MinefieldError

__all__ = [
    'BoardEngine',
    'BoardSummary',
    'CellView',
    'RevealState',
    'Status',
    'InvalidConfiguration',
    'InvalidCoordinate',
    'MinefieldError',
]
