"""
Alternate title forms to probe, most specific first.
"""
from typing import List

from ..casing import capitalize_first


def cooked_titles(title: str) -> List[str]:
    """
    Produce the ordered title forms to try for a raw title.

    The literal title always comes first. It is followed by the form with an
    upper-cased first letter and, for all-caps acronyms, the capitalized
    lower-case form ("NASA" -> "Nasa"). Duplicates are dropped, order kept.

    :param title: Raw title as mentioned by the caller
    :return: Non-empty list of forms, starting with ``title``
    """
    forms = [title, capitalize_first(title)]

    if len(title) > 1 and title.isupper():
        forms.append(capitalize_first(title.lower()))

    seen = set()
    unique = []
    for form in forms:
        if form not in seen:
            seen.add(form)
            unique.append(form)
    return unique
