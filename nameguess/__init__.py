"""
nameguess: Free-form Human Name Parsing

Parses names such as "Dr. Michael (Mike) van der Berg Jr." into first, middle
and last names, preferred name, salutation and generational suffix, and
guesses gender from static first-name tables.
"""

__version__ = "0.1.0"

__all__ = ["NameParser", "ParseResult", "guess", "guess_gender"]

_LAZY = {
    "NameParser": "nameguess.parser",
    "guess": "nameguess.parser",
    "guess_gender": "nameguess.parser",
    "ParseResult": "nameguess.types",
}


def __getattr__(name):
    """Lazy import so the name tables are only loaded on first use."""
    if name in _LAZY:
        from importlib import import_module

        return getattr(import_module(_LAZY[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
