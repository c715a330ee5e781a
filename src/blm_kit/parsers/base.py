# parsers/base.py

from abc import ABC, abstractmethod
from typing import BinaryIO

from .models import BlmDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: BinaryIO) -> BlmDocument:
        """
        Parse a feed and return a structured, deterministic representation.

        Requirements:
        - Deterministic output for same input
        - All-or-nothing: raise on the first error, never return partial records
        - Values are returned as raw strings
        """
        raise NotImplementedError
