"""
Tokenizer: delimiter based log tokenization

Splits a log line on any run of delimiter characters. Tokens are kept
verbatim; nothing is classified or normalized, so two lines only share a
token when the text is exactly equal.

Example:
    "[notice] LDAP:  Built with OpenLDAP\n"
    -> ('[notice]', 'LDAP:', 'Built', 'with', 'OpenLDAP')
"""

import regex  # Unicode aware character classes

from logmine.config import DEFAULT_DELIMITERS
from logmine.errors import ConfigurationError
from logmine.models import TokenSequence
from logmine.protocols import TokenizerProtocol


class LogTokenizer(TokenizerProtocol):
    """
    Tokenizer driven by a configurable delimiter set

    Args:
        delimiters: Characters that separate tokens. Consecutive delimiters
            count as one separator; leading/trailing ones are ignored.
    """

    LINE_ENDINGS = '\r\n'

    def __init__(self, delimiters: str = DEFAULT_DELIMITERS):
        if not delimiters:
            raise ConfigurationError("delimiters must contain at least one character")
        self.delimiters = delimiters
        self._split_pattern = regex.compile(
            '[' + ''.join(regex.escape(ch) for ch in sorted(set(delimiters))) + ']+'
        )

    def tokenize(self, log_line: str) -> TokenSequence:
        line = log_line.rstrip(self.LINE_ENDINGS)
        if not line:
            return ()
        return tuple(part for part in self._split_pattern.split(line) if part)

    def __repr__(self):
        return f"LogTokenizer(delimiters={self.delimiters!r})"
