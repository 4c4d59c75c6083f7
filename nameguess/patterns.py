"""
Regex fragments used to build the shape table.

Fragments are plain strings so they can be composed into larger patterns;
every shape pattern is compiled once and matched with ``fullmatch``.
"""

# A single letter in any Latin-or-otherwise alphabet (no digits, no underscore)
LETTER = r"[^\W\d_]"

# A name token: at least two letters, hyphens or apostrophes
NAME = r"(?:[^\W\d_]|[’'-]){2,}"

INITIAL = rf"{LETTER}\.?"

GENERATIONAL_SUFFIX = r"(?:jr|Jr\.?|Sr\.?|[IV]{1,3})"

# Longest alternatives first so "van der" is preferred over "van"
LAST_NAME_PREFIXES = (
    r"van\sder",
    r"van\sden",
    r"von\sder",
    r"von\sdem",
    r"van\sde",
    r"de\sla",
    "van",
    "von",
    "dos",
    "del",
    "den",
    "da",
    "de",
    "di",
    "du",
    "la",
    "le",
)

LAST_NAME_PREFIX = "(?i:" + "|".join(LAST_NAME_PREFIXES) + ")"

LAST_NAME = rf"(?:(?P<last_name_prefix>{LAST_NAME_PREFIX})\s)?(?P<last_name>{NAME})"

DOCTOR_SALUTATION = r"(?:Dr\.?|Doctor)"

MALE_HONORIFIC = r"Mr\.?"

FEMALE_HONORIFIC = r"(?:Ms\.?|Mrs\.?)"

# Opening and closing marks around an alternative token
ALTERNATIVE_OPEN = r"\s?[(\"]\s?"
ALTERNATIVE_CLOSE = r"\s?[)\"]\s?"

REDUNDANT_DESIGNATIONS = (
    "ARNP",
    "CFA",
    "CMA",
    "CPA",
    "CPESC",
    "DVM",
    "Esq.",
    "F.A.C.S.",
    "FACR",
    "LHRM",
    "MD",
    "M.D.",
    "MBA",
    "M.B.A",
    "M.B.A.",
    "M.P.H",
    "M.P.H.",
    "MHSA",
    "OBE",
    "PE",
    "PhD",
    "Ph.D.",
    "SPHR",
)
