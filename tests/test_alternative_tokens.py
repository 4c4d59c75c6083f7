"""
Alternative Token Test Suite

Tokens in parentheses or quotes are kept as the preferred name only when they
are a known nickname or look like initials.
"""

import pytest

from nameguess.services import AlternativeTokenService, NameFormattingService
from nameguess.types import NameParserConfig


@pytest.fixture(scope="module")
def resolver(parser):
    return AlternativeTokenService(NameParserConfig.create_default(), parser._data, NameFormattingService())


def test_diminutive_becomes_capitalized_preferred_name(resolver):
    params = resolver.resolve({"alternative": "mIKE", "repeat": "Michael Jackson"})
    assert params == {"preferred_name": "Mike", "repeat": "Michael Jackson"}


def test_initialism_is_kept_verbatim(resolver):
    params = resolver.resolve({"alternative": "JR", "repeat": "John Ronald Tolkien"})
    assert params == {"preferred_name": "JR", "repeat": "John Ronald Tolkien"}


def test_unknown_token_rejects_the_shape(resolver):
    assert resolver.resolve({"alternative": "Charles", "repeat": "Zhaoxuan Yang"}) is None
    assert resolver.resolve({"alternative": "Johnson", "repeat": "Celestine Schnugg"}) is None


def test_missing_token_passes_params_through(resolver):
    assert resolver.resolve({"repeat": "Michael Jackson"}) == {"repeat": "Michael Jackson"}


def test_resolve_does_not_mutate_its_input(resolver):
    params = {"alternative": "Mike", "repeat": "Michael Jackson"}
    resolver.resolve(params)
    assert params == {"alternative": "Mike", "repeat": "Michael Jackson"}


def test_diminutive_and_unresolvable_names(parser):
    result = parser.guess("Michael (Mike) Jackson")
    assert result.preferred_name == "Mike"
    assert result.full_name == "Michael (Mike) Jackson"

    assert parser.guess("Zhaoxuan (Charles) Yang") is None
