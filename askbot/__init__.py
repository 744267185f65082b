from .chunking import split_text
from .errors import InvalidArgument

__version__ = "0.1.0"
