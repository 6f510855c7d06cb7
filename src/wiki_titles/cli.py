"""
Command line interface for title resolution.

Examples:
    wiki-titles "Barack Obama"
    wiki-titles obama nasa --fuzzy-mode fallback --best
    wiki-titles "x-men" --json
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from .config_loader import FUZZY_MODES, load_config_from_env
from .exceptions import ConfigurationError
from .resolution import create_article_resolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wiki-titles",
        description="Resolve titles to enwiki articles via DBpedia and label-lookup.",
    )
    parser.add_argument("titles", nargs="+", help="Titles to resolve")
    parser.add_argument(
        "--fuzzy-mode",
        choices=FUZZY_MODES,
        help="When to consult the label-lookup service (overrides WIKI_TITLES_FUZZY_MODE)",
    )
    parser.add_argument("--best", action="store_true", help="Print only the single best article")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_article(article) -> str:
    name = f" ({article.name})" if article.name else ""
    return f"{article.page_id}\t{article.canon_label}\td={article.dist}{name}"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config_from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.fuzzy_mode:
        config.fuzzy_mode = args.fuzzy_mode

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    resolver = create_article_resolver(config)

    output = []
    for title in args.titles:
        resolution = resolver.resolve_detailed(title)
        if args.json:
            output.append(resolution.to_dict())
            continue

        articles = [resolution.best()] if args.best else resolution.articles
        articles = [a for a in articles if a is not None]
        print(f"{title}:")
        if not articles:
            print("  (no match)")
        for article in articles:
            print(f"  {format_article(article)}")

    if args.json:
        print(json.dumps(output, indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
