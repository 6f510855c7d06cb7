"""
SPARQL query construction for enwiki title lookup.

Exact label matching in the graph store is case-sensitive, while most
article labels are capitalized. The query therefore matches a capitalized
form of the title, and returned labels are lower-cased back afterwards when
the caller's title was lower-case to begin with.
"""
from dataclasses import dataclass
from typing import Optional

from rdflib import Literal

from ..casing import capitalize_title

OUTPUT_VARIABLES = ("pageID", "label")

# Categories and other in-namespace pages (Category:Foo, File:Bar, ...).
# FIXME: this also drops articles such as "X-Men: The Last Stand" or "2001: A Space Odyssey".
NAMESPACE_PATTERN = "^http://dbpedia.org/resource/[^_]*:"

_QUERY_TEMPLATE = """\
  {{
    ?res rdfs:label {literal} .
  }} UNION {{
    ?redir dbo:wikiPageRedirects ?res .
    ?redir rdfs:label {literal} .
  }} UNION {{
    ?disamb dbo:wikiPageDisambiguates ?res .
    ?disamb rdfs:label {literal} .
  }}
  OPTIONAL {{ ?res dbo:wikiPageRedirects ?redirTarget . }}
  OPTIONAL {{ ?res dbo:wikiPageDisambiguates ?disambTarget . }}
  ?res dbo:wikiPageID ?pageID .
  ?res rdfs:label ?label .
  FILTER ( !BOUND(?redirTarget) )
  FILTER ( !BOUND(?disambTarget) )
  FILTER ( !regex(str(?res), '{namespace}', 'i') )
  FILTER ( LANG(?label) = 'en' )
"""


@dataclass(frozen=True)
class TitleQuery:
    """
    Query body for one title form together with its casing context.

    Attributes:
        title: Sanitized title as given by the caller
        matched_title: Capitalized form used for matching
        was_capitalized: Whether the caller's title started upper-case
        body: SPARQL graph pattern and filters
    """
    title: str
    matched_title: str
    was_capitalized: bool
    body: str

    variables = OUTPUT_VARIABLES


def sanitize_title(title: str) -> str:
    """Drop double quotes and backslashes, turn newlines into spaces."""
    return title.replace('"', "").replace("\\", "").replace("\n", " ")


def was_capitalized(title: str) -> bool:
    """Whether the first character is already upper-case."""
    return bool(title) and title[0].upper() == title[0]


def normalize_label(label: str, title_was_capitalized: bool) -> str:
    """
    Undo matching-time capitalization on a returned label.

    The first letter is lower-cased only when the caller's title was not
    capitalized and the label is not all-caps (its second character is a
    lower-case letter). Otherwise every term would end up capitalized.
    """
    if title_was_capitalized or len(label) < 2:
        return label
    if label[1].upper() == label[1]:
        return label
    return label[0].lower() + label[1:]


def en_literal(text: str) -> str:
    """Render text as an escaped English-tagged SPARQL literal."""
    return Literal(text, lang="en").n3()


def build_title_query(title: str) -> Optional[TitleQuery]:
    """
    Build the label/redirect/disambiguation query for a title form.

    Rows matching the label directly, through a redirect, or through a
    disambiguation page are unioned. Redirect and disambiguation sources
    also match the direct pattern; they are recognized by their own outgoing
    redirect/disambiguation edge and dropped, keeping only the targets.

    :param title: Title form to look up
    :return: TitleQuery, or None when nothing is left after sanitization
    """
    cleaned = sanitize_title(title)
    if not cleaned.strip():
        return None

    matched = capitalize_title(cleaned)
    body = _QUERY_TEMPLATE.format(
        literal=en_literal(matched),
        namespace=NAMESPACE_PATTERN,
    )
    return TitleQuery(
        title=cleaned,
        matched_title=matched,
        was_capitalized=was_capitalized(cleaned),
        body=body,
    )
