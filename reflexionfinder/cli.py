"""Command line tool that finds reflected URL parameters in web pages."""

from __future__ import annotations

import argparse
import sys
from urllib.parse import urlsplit

import requests

from .analysis import fuzzed_url, query_params, random_token, search_reflections

_DEFAULT_USER_AGENT = "ReflexionFinder/1.0"
_PROXY_SCHEMES = frozenset({"http", "https", "socks5", "socks5h"})
_FUZZ_LENGTH = 12


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the command."""
    parser = argparse.ArgumentParser(
        prog="ReflexionFinder",
        description="Extrait les paramètres d'une URL et peut rechercher leur présence dans le contenu",
    )
    parser.add_argument("url", nargs="?", help="L'URL à analyser")
    parser.add_argument(
        "-p", "--proxy", metavar="URL",
        help="Utiliser un proxy pour les requêtes HTTP ex: http://127.0.0.1:8080",
    )
    parser.add_argument(
        "-k", "--insecure", action="store_true",
        help="Ignorer les erreurs de certificats TLS (⚠️ non sécurisé)",
    )
    parser.add_argument(
        "-s", "--search", action="store_true",
        help="Active la recherche des clés et valeurs dans la page",
    )
    parser.add_argument(
        "-f", "--fuzz", action="store_true",
        help="Active le fuzzing des valeurs (remplacement par des chaînes aléatoires)",
    )
    parser.add_argument(
        "-u", "--user-agent", dest="user_agent", metavar="UA", default=_DEFAULT_USER_AGENT,
        help="Définit le header User-Agent à utiliser dans les requêtes",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Mode verbeux")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0.0")
    return parser


def _check_proxy(proxy: str) -> str:
    candidate = proxy if "://" in proxy else f"http://{proxy}"
    try:
        parts = urlsplit(candidate)
        _ = parts.port
    except ValueError as exc:
        raise ValueError(f"{proxy}: {exc}") from exc
    if parts.scheme.lower() not in _PROXY_SCHEMES:
        raise ValueError(f"{proxy}: unsupported proxy scheme")
    if not parts.hostname:
        raise ValueError(f"{proxy}: missing host")
    return candidate


def build_session(proxy, insecure, user_agent) -> requests.Session:
    """Return an HTTP session configured with the given options."""
    session = requests.Session()
    session.headers["User-Agent"] = user_agent
    if insecure:
        session.verify = False
    if proxy is not None:
        proxy_url = _check_proxy(proxy)
        session.proxies = {"http": proxy_url, "https": proxy_url}
    return session


def read_urls(stream) -> list[str]:
    """Return the non-blank lines of ``stream``."""
    return [line.rstrip("\r\n") for line in stream if line.strip()]


def _fetch(session, url: str) -> str:
    response = session.get(url)
    return response.text


def analyse_url(session, url, search, fuzz, verbose, out, err) -> list[str]:
    """Analyse one URL, writing the findings to ``out``.

    Returns the fuzzed URLs whose random value was reflected.
    """
    reflected: list[str] = []
    print("\n=====================", file=out)
    print(f"🌐 Analyse de : {url}", file=out)

    try:
        params = query_params(url)
    except ValueError as exc:
        print(f"❌ Erreur de parsing : {url} ({exc})", file=err)
        return reflected

    print("🔍 Paramètres trouvés :", file=out)
    for key, value in params:
        print(f"  {key} = {value}", file=out)

    if search:
        print("\n🌐 Requête vers la page...", file=out)
        try:
            body = _fetch(session, url)
        except requests.RequestException as exc:
            print(f"Erreur lors de la requête HTTP : {exc}", file=err)
            return reflected
        print(search_reflections(params, body).render(), file=out)

    if fuzz:
        print("\n🧑‍🍳 Fuzzing des paramètres...", file=out)
        for key, value in params:
            if not value:
                print(f"⚠️ Skipping clé '{key}' avec valeur vide", file=out)
                continue
            token = random_token(_FUZZ_LENGTH)
            target = fuzzed_url(url, params, key, token)
            print(f"  🔄 Requête avec {key} = {token}", file=out)
            try:
                body = _fetch(session, target)
            except requests.RequestException as exc:
                print(f"⚠️ Erreur requête : {exc}", file=out)
                continue
            if token in body:
                print("✅ Valeur fuzz reflétée dans la réponse", file=out)
                print(f"✅  {target}", file=out)
                reflected.append(target)
            elif verbose:
                print("❌ Valeur fuzz NON trouvée", file=out)
        print("\n🧑‍🍳 Fuzzing terminé", file=out)

    return reflected


def main(argv=None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        session = build_session(args.proxy, args.insecure, args.user_agent)
    except ValueError as exc:
        print(f"❌ Erreur proxy invalide : {exc}", file=sys.stderr)
        return 1

    if args.url is not None:
        urls = [args.url]
    else:
        print("📥 Lecture des URLs depuis l'entrée standard...")
        urls = read_urls(sys.stdin)

    with session:
        for url in urls:
            analyse_url(session, url, args.search, args.fuzz, args.verbose, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())