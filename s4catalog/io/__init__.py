"""Binary IO utilities for catalog resource parsing."""

from s4catalog.io.reader import Reader
from s4catalog.io.writer import Writer

__all__ = ['Reader', 'Writer']
