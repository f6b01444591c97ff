from .bar import Bar
from .translations import TRANSLATIONS, tr

__all__ = [
    "Bar",
    "TRANSLATIONS",
    "tr",
]
