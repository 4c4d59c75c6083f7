"""
Gender Inference Test Suite

Lookups against the first-name tables, the order in which the parser consults
them, and the tie-break for names listed under both genders.
"""

from nameguess import NameParser
from nameguess.services import GenderInferenceService, NameDataStructures

GENDER_TEST_CASES = [
    ("Michael", "m"),
    ("michael", "m"),
    ("  MICHAEL ", "m"),
    ("Mike", "m"),
    ("Mary", "f"),
    ("Elizabeth", "f"),
    ("Quinlan", None),
    ("J.", None),
    ("", None),
]


def _tables(male=(), female=(), diminutives=()):
    return NameDataStructures(
        male_names=frozenset(male),
        female_names=frozenset(female),
        diminutive_to_names={d: () for d in diminutives},
    )


def test_guess_gender(parser):
    for name, expected in GENDER_TEST_CASES:
        assert parser.guess_gender(name) == expected, f"Failed for {name!r}"


def test_guess_gender_rejects_non_strings(parser):
    for value in (None, 1, ["Michael"], {"first_name": "Michael"}):
        assert parser.guess_gender(value) is None


def test_module_level_guess_gender():
    from nameguess import guess_gender

    assert guess_gender("Mary") == "f"
    assert guess_gender(None) is None


def test_first_name_is_consulted_before_preferred_name(parser):
    # Kate is a known diminutive, so it becomes the preferred name
    result = parser.guess("Michael (Kate) Jackson")
    assert result.preferred_name == "Kate"
    assert result.gender == "m"


def test_preferred_name_is_used_when_first_name_is_unknown(parser):
    assert parser.guess("Quinlan (Mike) Jackson").gender == "m"
    assert parser.guess("J. Mary Jackson").gender == "f"


def test_honorific_overrides_name_tables(parser):
    assert parser.guess("Mr. Mary Jackson").gender == "m"
    assert parser.guess("Ms. Michael Jackson").gender == "f"


def test_name_in_both_tables_resolves_to_male():
    service = GenderInferenceService(_tables(male={"jordan"}, female={"jordan", "kim"}))

    assert service.guess_gender("Jordan") == "m"
    assert service.guess_gender("Kim") == "f"


def test_parser_accepts_injected_tables():
    parser = NameParser(data=_tables(male={"jordan"}, female={"jordan"}, diminutives={"jo"}))

    result = parser.guess("Jordan (Jo) Smith")
    assert result.gender == "m"
    assert result.preferred_name == "Jo"
    assert parser.guess("Michael Jackson").gender is None
