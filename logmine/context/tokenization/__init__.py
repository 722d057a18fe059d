"""
Tokenization context for log parsing.
"""

from logmine.context.tokenization.tokenizer import LogTokenizer

# Provide consistent naming
Tokenizer = LogTokenizer

__all__ = ['LogTokenizer', 'Tokenizer']
