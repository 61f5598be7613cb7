from __future__ import annotations

from typing import Callable


LanguagePredicate = Callable[[str], bool]

ENGLISH = "en"


def contains_english(language: str) -> bool:
    # Loose on purpose: "en-us" and "en-gb" match, but so does "zh-ren".
    return ENGLISH in language


def english_prefix(language: str) -> bool:
    tag = language.strip().lower().replace("_", "-")
    return tag == ENGLISH or tag.startswith(ENGLISH + "-")


def exact_english(language: str) -> bool:
    return language.strip().lower() == ENGLISH


PREDICATES: dict[str, LanguagePredicate] = {
    "contains": contains_english,
    "prefix": english_prefix,
    "exact": exact_english,
}


def get_predicate(mode: str) -> LanguagePredicate:
    try:
        return PREDICATES[mode]
    except KeyError:
        raise ValueError(
            f"unknown language match mode {mode!r}; expected one of {', '.join(PREDICATES)}"
        ) from None
