# english_inflect/core/domain/tables.py
"""
core/domain/tables.py
---------------------

Fixed lexical data for English noun inflection and article selection.

Everything in this module is built once at import time and never mutated.
Runtime customisation lives in the override store (core/overrides.py); these
tables are the "built-in" layer that the override store sits on top of.

Contents
========
- IRREGULAR_PLURALS / IRREGULAR_SINGULARS: singular <-> plural pairs that no
  suffix rule can derive.
- CLASSICAL_PLURALS / CLASSICAL_SINGULARS: Latin/Greek forms, only consulted
  when the "ancient" classical flag is on.
- UNCHANGED_PLURALS, HERD_ANIMALS: words whose plural equals the singular
  (herd animals only in classical mode).
- Suffix exception lists used by the suffix rule engine.
- Phonetic lists used by the a/an selector.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Tuple


def _freeze(mapping: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


def _invert(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({plural: singular for singular, plural in mapping.items()})


# ---------------------------------------------------------------------------
# 1. Irregular nouns
# ---------------------------------------------------------------------------

IRREGULAR_PLURALS: Mapping[str, str] = _freeze(
    {
        # Native English
        "child": "children",
        "foot": "feet",
        "goose": "geese",
        "louse": "lice",
        "man": "men",
        "mouse": "mice",
        "ox": "oxen",
        "person": "people",
        "tooth": "teeth",
        "woman": "women",
        "die": "dice",
        "quiz": "quizzes",
        # Greek -on -> -a
        "criterion": "criteria",
        "phenomenon": "phenomena",
        "automaton": "automata",
        "polyhedron": "polyhedra",
        # Greek/Latin -is -> -es
        "analysis": "analyses",
        "axis": "axes",
        "basis": "bases",
        "crisis": "crises",
        "diagnosis": "diagnoses",
        "ellipsis": "ellipses",
        "hypothesis": "hypotheses",
        "nemesis": "nemeses",
        "oasis": "oases",
        "parenthesis": "parentheses",
        "synopsis": "synopses",
        "synthesis": "syntheses",
        "thesis": "theses",
        # Latin -us -> -i
        "alumnus": "alumni",
        "bacillus": "bacilli",
        "cactus": "cacti",
        "calculus": "calculi",
        "focus": "foci",
        "fungus": "fungi",
        "locus": "loci",
        "nucleus": "nuclei",
        "radius": "radii",
        "stimulus": "stimuli",
        "syllabus": "syllabi",
        # Latin -um -> -a
        "addendum": "addenda",
        "atrium": "atria",
        "bacterium": "bacteria",
        "curriculum": "curricula",
        "datum": "data",
        "erratum": "errata",
        "medium": "media",
        "memorandum": "memoranda",
        "millennium": "millennia",
        "stadium": "stadia",
        "stratum": "strata",
        "symposium": "symposia",
        # Latin -ex/-ix -> -ices
        "apex": "apices",
        "appendix": "appendices",
        "cortex": "cortices",
        "helix": "helices",
        "index": "indices",
        "matrix": "matrices",
        "vertex": "vertices",
        "vortex": "vortices",
        # Hebrew
        "cherub": "cherubim",
        "kibbutz": "kibbutzim",
        "seraph": "seraphim",
        # Italian
        "graffito": "graffiti",
        "libretto": "libretti",
        "virtuoso": "virtuosi",
        # French -eau -> -eaux
        "bureau": "bureaux",
        "chateau": "chateaux",
        "plateau": "plateaux",
    }
)

IRREGULAR_SINGULARS: Mapping[str, str] = _invert(IRREGULAR_PLURALS)


# ---------------------------------------------------------------------------
# 2. Classical (ancient) plurals
# ---------------------------------------------------------------------------

CLASSICAL_PLURALS: Mapping[str, str] = _freeze(
    {
        # -a -> -ae
        "alga": "algae",
        "alumna": "alumnae",
        "amoeba": "amoebae",
        "antenna": "antennae",
        "arena": "arenae",
        "aurora": "aurorae",
        "cornea": "corneae",
        "formula": "formulae",
        "hernia": "herniae",
        "lacuna": "lacunae",
        "lamina": "laminae",
        "larva": "larvae",
        "minutia": "minutiae",
        "nausea": "nauseae",
        "nebula": "nebulae",
        "nova": "novae",
        "persona": "personae",
        "retina": "retinae",
        "supernova": "supernovae",
        "vertebra": "vertebrae",
        "vita": "vitae",
        "zona": "zonae",
        # Greek -pus -> -podes
        "octopus": "octopodes",
        "platypus": "platypodes",
        # Other classical forms
        "corpus": "corpora",
        "genus": "genera",
        "hippopotamus": "hippopotami",
        "opus": "opera",
        "viscus": "viscera",
    }
)

CLASSICAL_SINGULARS: Mapping[str, str] = _invert(CLASSICAL_PLURALS)


# ---------------------------------------------------------------------------
# 3. Words that do not change in the plural
# ---------------------------------------------------------------------------

UNCHANGED_PLURALS: FrozenSet[str] = frozenset(
    {
        "aircraft", "barracks", "chassis", "cod", "corps", "deer", "fish",
        "gallows", "headquarters", "means", "moose", "news", "offspring",
        "pike", "salmon", "series", "sheep", "shrimp", "species", "squid",
        "swine", "trout", "tuna",
    }
)

# Unchanged in classical "herd" mode, regular -s/-es plural otherwise.
HERD_ANIMALS: FrozenSet[str] = frozenset(
    {
        "antelope", "bison", "buffalo", "caribou", "elk", "grouse",
        "wildebeest",
    }
)

# Nationality words (Chinese, Iroquois) never inflect.
NATIONALITY_SUFFIXES: Tuple[str, ...] = ("ese", "ois")
NATIONALITY_SUFFIX_EXCEPTIONS: FrozenSet[str] = frozenset({"cheese"})


# ---------------------------------------------------------------------------
# 4. Suffix rule exception lists
# ---------------------------------------------------------------------------

SIBILANT_ENDINGS: Tuple[str, ...] = ("s", "sh", "ch", "x", "z")

# -f / -fe words that take -ves.
VES_WORDS: FrozenSet[str] = frozenset(
    {
        "calf", "elf", "half", "hoof", "knife", "leaf", "life", "loaf",
        "scarf", "self", "sheaf", "shelf", "thief", "wharf", "wife", "wolf",
    }
)

# Stems whose singular ends in -fe (knives -> knife).
FE_BASES: FrozenSet[str] = frozenset({"kni", "wi", "li"})

# -o words that take a bare -s.
O_EXCEPTIONS: FrozenSet[str] = frozenset(
    {
        "albino", "alto", "archipelago", "armadillo", "auto", "basso",
        "canto", "casino", "combo", "commando", "contralto", "disco", "dodo",
        "dynamo", "embryo", "espresso", "euro", "fiasco", "flamingo",
        "ghetto", "grotto", "inferno", "kilo", "limo", "maestro", "magneto",
        "manifesto", "memo", "metro", "mosquito", "motto", "otto", "photo",
        "piano", "pimento", "placebo", "polo", "poncho", "portfolio", "pro",
        "quarto", "ratio", "rhino", "silo", "solo", "soprano", "stiletto",
        "stucco", "studio", "taco", "tattoo", "tempo", "tobacco", "tornado",
        "torso", "tuxedo", "video", "virtuoso", "volcano", "zero",
    }
)

# -man words that take -mans rather than -men.
MAN_EXCEPTIONS: FrozenSet[str] = frozenset(
    {
        "ataman", "caiman", "cayman", "doberman", "dolman", "german",
        "leman", "norman", "ottoman", "roman", "shaman", "talisman",
        "walkman",
    }
)

# Singular nouns that happen to end in -men.
MEN_SINGULARS: FrozenSet[str] = frozenset(
    {
        "abdomen", "acumen", "albumen", "amen", "bitumen", "cerumen",
        "dolmen", "hymen", "lumen", "omen", "regimen", "rumen", "semen",
        "specimen", "stamen",
    }
)

# Singulars ending in -ie whose plural looks like consonant + -ies.
IE_WORDS: FrozenSet[str] = frozenset(
    {
        "auntie", "birdie", "boogie", "brownie", "budgie", "calorie",
        "collie", "cookie", "coterie", "eyrie", "genie", "goalie", "groupie",
        "hippie", "hoodie", "junkie", "lie", "magpie", "menagerie", "movie",
        "necktie", "newbie", "pie", "pixie", "prairie", "reverie", "rookie",
        "rotisserie", "selfie", "smoothie", "sortie", "talkie", "tie",
        "veggie", "yuppie", "zombie",
    }
)

# Singulars ending in a silent -e whose plural looks like an -es plural.
SILENT_E_WORDS: FrozenSet[str] = frozenset(
    {
        "ache", "avalanche", "cache", "canoe", "cliche", "creche", "doe",
        "floe", "foe", "headache", "hoe", "horseshoe", "mistletoe",
        "moustache", "mustache", "niche", "oboe", "psyche", "quiche", "roe",
        "shoe", "sloe", "snowshoe", "tiptoe", "toe", "toothache", "woe",
    }
)

# -s singulars that pluralize with -es and keep the stem s (buses, lenses).
SES_STEMS: FrozenSet[str] = frozenset(
    {
        "abacus", "alias", "apparatus", "atlas", "bias", "bonus", "bus",
        "campus", "canvas", "census", "chorus", "circus", "citrus", "corpus",
        "gas", "genius", "genus", "hippopotamus", "iris", "lens", "lotus",
        "minibus", "octopus", "omnibus", "opus", "platypus", "prospectus",
        "sinus", "status", "surplus", "virus", "viscus", "walrus",
    }
)


# ---------------------------------------------------------------------------
# 5. Article phonetics
# ---------------------------------------------------------------------------

# Prefixes of words that start with a silent 'h' ("an hour").
SILENT_H_WORDS: Tuple[str, ...] = (
    "honest", "heir", "heiress", "heirloom", "honor", "honour", "hour",
    "hourly",
)

# Lowercase abbreviations pronounced letter by letter ("an mpeg").
LOWERCASE_ABBREVIATIONS: FrozenSet[str] = frozenset(
    {"mpeg", "jpeg", "gif", "sql", "html", "xml", "fbi", "cia", "nsa"}
)

# Vowel-initial prefixes with a consonant sound ("a unicorn", "a one-off").
CONSONANT_SOUND_PREFIXES: Tuple[str, ...] = (
    "uni", "upon", "use", "used", "user", "using", "usual", "usu", "uran",
    "uret", "euro", "ewe", "onc", "one", "onet",
)

# Three-letter u- prefixes pronounced "you" ("a Ugandan", "a unanimous").
YOU_SOUND_PREFIXES: FrozenSet[str] = frozenset(
    {
        "uga", "ukr", "ula", "ule", "uli", "ulo", "ulu", "una", "uni", "uno",
        "unu", "ura", "ure", "uri", "uro", "uru", "usa", "use", "usi", "uso",
        "usu", "uta", "ute", "uti", "uto", "utu",
    }
)

# Letters whose spoken name starts with a vowel sound (A, E, eff, aitch, ...).
VOWEL_SOUND_LETTERS = "AEFHILMNORSX"

VOWELS = "aeiou"


__all__ = [
    "IRREGULAR_PLURALS",
    "IRREGULAR_SINGULARS",
    "CLASSICAL_PLURALS",
    "CLASSICAL_SINGULARS",
    "UNCHANGED_PLURALS",
    "HERD_ANIMALS",
    "NATIONALITY_SUFFIXES",
    "NATIONALITY_SUFFIX_EXCEPTIONS",
    "SIBILANT_ENDINGS",
    "VES_WORDS",
    "FE_BASES",
    "O_EXCEPTIONS",
    "MAN_EXCEPTIONS",
    "MEN_SINGULARS",
    "IE_WORDS",
    "SILENT_E_WORDS",
    "SES_STEMS",
    "SILENT_H_WORDS",
    "LOWERCASE_ABBREVIATIONS",
    "CONSONANT_SOUND_PREFIXES",
    "YOU_SOUND_PREFIXES",
    "VOWEL_SOUND_LETTERS",
    "VOWELS",
]
