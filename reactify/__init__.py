"""
reactify - transparent change-notifying wrappers

Wrap a plain object or mapping and get a surrogate that reads straight through
to it, while every value-changing write is committed and then reported to a
callback as one formatted line.
"""

from .change import CHANGE_MESSAGE_TEMPLATE, MISSING, Change
from .equality import strict_equals
from .proxy import ReactiveDict, ReactiveProxy, is_reactive, unwrap, wrap

__all__ = [
    # Factory
    "wrap",
    "unwrap",
    "is_reactive",
    # Surrogates
    "ReactiveProxy",
    "ReactiveDict",
    # Change notifications
    "Change",
    "CHANGE_MESSAGE_TEMPLATE",
    "MISSING",
    # Equality
    "strict_equals",
]
