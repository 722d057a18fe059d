"""
Protocols (interfaces) for LogMine components.

This module defines abstract contracts that implementations must follow.
"""

from abc import ABC, abstractmethod
from logmine.models import TokenSequence

__all__ = [
    'TokenizerProtocol',
]


class TokenizerProtocol(ABC):
    """Protocol for log tokenization."""

    @abstractmethod
    def tokenize(self, log_line: str) -> TokenSequence:
        """
        Split a log line into an ordered tuple of tokens.

        Args:
            log_line: Raw log string

        Returns:
            Tuple of token strings (empty for a blank line)
        """
        pass
