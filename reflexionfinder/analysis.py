"""Query-parameter extraction, reflection search and fuzz URL building."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlsplit, urlunsplit

_SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})
_TOKEN_ALPHABET = string.ascii_letters + string.digits
_FORM_SAFE = frozenset((string.ascii_letters + string.digits + "*-._").encode())


def _split(url: str):
    """Split and validate an absolute URL, raising ValueError when it is unusable."""
    parts = urlsplit(url.strip())
    if not parts.scheme:
        raise ValueError("relative URL without a base")
    if parts.scheme.lower() in _SPECIAL_SCHEMES:
        if not parts.hostname:
            raise ValueError("empty host")
        # Accessing the port validates it.
        _ = parts.port
    return parts


def query_params(url: str) -> list[tuple[str, str]]:
    """Return the decoded query pairs of ``url`` in order of appearance."""
    parts = _split(url)
    return parse_qsl(parts.query, keep_blank_values=True)


def random_token(length: int) -> str:
    """Return a random alphanumeric string of ``length`` characters."""
    return "".join(random.choices(_TOKEN_ALPHABET, k=length))


@dataclass
class SearchReport:
    """What of a URL's parameters was found in a response body."""

    keys: list[str] = field(default_factory=list)
    values: list[tuple[str, str]] = field(default_factory=list)
    combos: list[str] = field(default_factory=list)

    def render(self) -> str:
        """Return the report as printable text."""
        lines = ["", "📄 Résultats de la recherche dans le contenu :"]

        lines += ["", "✔️ Clés trouvées :"]
        lines += [f"  {key}" for key in self.keys] or ["  Aucune"]

        lines += ["", "✔️ Valeurs trouvées :"]
        lines += [f"  {value} ({key})" for key, value in self.values] or ["  Aucune"]

        lines += ["", "✔️ Combos clé=valeur trouvés :"]
        lines += [f"  {combo}" for combo in self.combos] or ["  Aucun"]
        return "\n".join(lines)


def search_reflections(params, body: str) -> SearchReport:
    """Look for each key, non-empty value and ``key=value`` pair in ``body``."""
    report = SearchReport()
    for key, value in params:
        if key in body:
            report.keys.append(key)
        if value:
            if value in body:
                report.values.append((key, value))
            combo = f"{key}={value}"
            if combo in body:
                report.combos.append(combo)
    return report


def _form_encode(text: str) -> str:
    out = []
    for byte in text.encode("utf-8"):
        if byte in _FORM_SAFE:
            out.append(chr(byte))
        elif byte == 0x20:
            out.append("+")
        else:
            out.append(f"%{byte:02X}")
    return "".join(out)


def fuzzed_url(url: str, params, key: str, value: str) -> str:
    """Return ``url`` with every parameter named ``key`` set to ``value``."""
    parts = _split(url)
    pairs = [(k, value if k == key else v) for k, v in params]
    query = "&".join(f"{_form_encode(k)}={_form_encode(v)}" for k, v in pairs)
    path = parts.path
    if not path and parts.scheme.lower() in _SPECIAL_SCHEMES:
        path = "/"
    rebuilt = urlunsplit((parts.scheme.lower(), parts.netloc, path, "", parts.fragment))
    if parts.fragment:
        base, _, fragment = rebuilt.partition("#")
        return f"{base}?{query}#{fragment}"
    return f"{rebuilt}?{query}"