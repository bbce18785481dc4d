"""Rule tables for the tokenizer and sentence segmenter (English only)."""

import re

# Irregular contractions, split into two sub-tokens (applied once each, in order)
TREEBANK_CONTRACTIONS = (
    re.compile(r"\b(can)(not)\b", re.IGNORECASE),
    re.compile(r"\b(d)('ye)\b", re.IGNORECASE),
    re.compile(r"\b(gim)(me)\b", re.IGNORECASE),
    re.compile(r"\b(gon)(na)\b", re.IGNORECASE),
    re.compile(r"\b(got)(ta)\b", re.IGNORECASE),
    re.compile(r"\b(lem)(me)\b", re.IGNORECASE),
    re.compile(r"\b(more)('n)\b", re.IGNORECASE),
    re.compile(r"\b(wan)(na) ", re.IGNORECASE),
    re.compile(r" ('t)(is)\b", re.IGNORECASE),
    re.compile(r" ('t)(was)\b", re.IGNORECASE),
)

# Titles and honorifics (never a boundary, even before a capitalized word)
HONORIFICS = frozenset({
    "jr", "mr", "mrs", "ms", "dr", "prof", "sr", "sen", "corp", "rep", "gov",
    "atty", "supt", "det", "rev", "col", "gen", "lt", "cmdr", "adm", "capt",
    "sgt", "cpl", "maj", "miss", "misses", "mister", "sir", "esq", "mstr",
    "phd", "adj", "adv", "asst", "bldg", "brig", "comdr", "hon", "messrs",
    "mlle", "mme", "op", "ord", "pvt", "reps", "res", "sens", "sfc", "surg",
})

ABBR_COMMON = frozenset({
    "arc", "al", "exp", "rd", "st", "dist", "mt", "fy", "pd", "pl", "plz",
    "tce", "llb", "md", "bl", "ma", "ba", "lit", "ex", "e.g", "i.e", "circa",
    "ca", "cca", "v.s", "etc", "esp", "ft", "b.c", "a.d",
})

ABBR_ORGANIZATIONS = frozenset({
    "co", "corp", "yahoo", "joomla", "jeopardy", "dept", "univ", "assn",
    "bros", "inc", "ltd",
})

ABBR_PLACES = frozenset({
    "ala", "ariz", "ark", "cal", "calif", "col", "colo", "conn", "del", "fed",
    "fla", "fl", "ga", "ida", "ind", "ia", "la", "kan", "kans", "ken", "ky",
    "md", "mich", "minn", "mont", "neb", "nebr", "nev", "okla", "penna",
    "penn", "pa", "dak", "tenn", "tex", "ut", "vt", "va", "wash", "wis",
    "wisc", "wy", "wyo", "usafa", "alta", "ont", "que", "sask", "yuk", "ave",
    "blvd", "cl", "ct", "cres", "hwy", "u.s", "u.s.a", "e.u", "n°",
})

ABBR_TIME = frozenset({"a.m", "p.m"})

ABBR_DATES = frozenset({
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept", "oct",
    "nov", "dec",
})

# Abbreviations that may end a sentence when the next chunk is capitalized
GATE_SUBSTITUTIONS = (
    ABBR_COMMON | ABBR_DATES | ABBR_ORGANIZATIONS | ABBR_PLACES | ABBR_TIME | HONORIFICS
)

# Abbreviations that never end a sentence
GATE_EXCEPTIONS = frozenset({
    "ex", "e.g", "i.e", "circa", "ca", "cca", "v.s", "esp", "ft", "st", "mt",
}) | HONORIFICS


def build_gate_pattern(gate: frozenset) -> re.Pattern:
    """Compile a pattern matching a chunk that ends in one of the gate words.

    The word must be whole (word boundary before it), followed by one
    terminal (. ! ?) and at most one space. Longer entries are tried
    first so that e.g. "u.s.a" wins over "u.s".

    Args:
        gate: Set of lowercase abbreviations

    Returns:
        Case-insensitive compiled pattern
    """
    alternatives = "|".join(
        re.escape(word) for word in sorted(gate, key=lambda w: (-len(w), w))
    )
    return re.compile(rf"\b({alternatives})[.!?] ?\Z", re.IGNORECASE)


SUBSTITUTION_PATTERN = build_gate_pattern(GATE_SUBSTITUTIONS)
EXCEPTION_PATTERN = build_gate_pattern(GATE_EXCEPTIONS)
