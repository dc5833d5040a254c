"""Simple command that lists a URL's parameters and looks for them in its page."""

from __future__ import annotations

import argparse
import sys

import requests

from .analysis import SearchReport, query_params


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the command."""
    parser = argparse.ArgumentParser(
        prog="ParamExtractor",
        description="Extrait les paramètres d'une URL et peut rechercher leur présence dans le contenu",
    )
    parser.add_argument("url", help="L'URL à analyser")
    parser.add_argument(
        "-s", "--search", action="store_true",
        help="Active la recherche des clés et valeurs dans la page",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0")
    return parser


def _report(params, body: str) -> SearchReport:
    report = SearchReport()
    for key, value in params:
        if key in body:
            report.keys.append(key)
        if value and value in body:
            report.values.append((key, value))
        combo = f"{key}={value}"
        if combo in body:
            report.combos.append(combo)
    return report


def main(argv=None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        params = query_params(args.url)
    except ValueError as exc:
        print(f"Erreur lors du parsing de l'URL: {exc}", file=sys.stderr)
        return 1

    print("🔍 Paramètres trouvés dans l'URL :")
    for key, value in params:
        print(f"  {key} = {value}")

    if args.search:
        print("\n🌐 Requête vers la page...")
        try:
            body = requests.get(args.url).text
        except requests.RequestException as exc:
            print(f"Erreur lors de la requête HTTP : {exc}", file=sys.stderr)
            return 1
        print(_report(params, body).render())
    return 0


if __name__ == "__main__":
    sys.exit(main())