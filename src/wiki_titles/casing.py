"""
Title casing heuristic for case-sensitive label lookup.

Most enwiki article titles capitalize every word that is not a stopword,
so matching a capitalized form covers the bulk of lower-case mentions.
"""

STOPWORDS = frozenset({
    "a", "an", "and", "as", "at", "but", "by", "de", "for", "from", "in",
    "into", "nor", "of", "on", "or", "over", "the", "to", "upon", "via",
    "von", "vs", "with",
})


def capitalize_first(word: str) -> str:
    if not word:
        return word
    return word[0].upper() + word[1:]


def capitalize_title(title: str) -> str:
    """
    Upper-case the first letter of the first word and of every non-stopword.

    The remainder of each word is left untouched, so "iPhone 4s" becomes
    "IPhone 4s" and "lord of the rings" becomes "Lord of the Rings".
    """
    words = title.split(" ")
    cased = []
    for i, word in enumerate(words):
        if i == 0 or word.lower() not in STOPWORDS:
            word = capitalize_first(word)
        cased.append(word)
    return " ".join(cased)
