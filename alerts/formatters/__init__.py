"""Alert formatters."""

from alerts.formatters.base import BaseFormatter
from alerts.formatters.builtin import (
    BuddyListFormatter,
    PrivateMessageFormatter,
    QuotedFormatter,
    ReputationFormatter,
    ThreadReplyFormatter,
    get_builtin_formatters,
)

__all__ = [
    "BaseFormatter",
    "BuddyListFormatter",
    "PrivateMessageFormatter",
    "QuotedFormatter",
    "ReputationFormatter",
    "ThreadReplyFormatter",
    "get_builtin_formatters",
]
