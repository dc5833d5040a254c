import io
import re

import pytest
import requests
import responses

from reflexionfinder.cli import analyse_url, build_parser, build_session, main, read_urls


def _echo_url(request):
    return (200, {}, f"<html>{request.url}</html>")


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.url is None
    assert args.user_agent == "ReflexionFinder/1.0"
    assert (args.search, args.fuzz, args.verbose, args.insecure) == (False, False, False, False)


def test_parser_flags():
    args = build_parser().parse_args(["-s", "-f", "-v", "-k", "-p", "http://127.0.0.1:8080", "http://example.com/"])
    assert args.search and args.fuzz and args.verbose and args.insecure
    assert args.proxy == "http://127.0.0.1:8080"
    assert args.url == "http://example.com/"


def test_build_session_configuration():
    session = build_session("http://127.0.0.1:8080", True, "agent")
    assert session.headers["User-Agent"] == "agent"
    assert session.verify is False
    assert session.proxies["https"] == "http://127.0.0.1:8080"


def test_build_session_proxy_without_scheme_gets_http():
    session = build_session("127.0.0.1:8080", False, "agent")
    assert session.proxies["http"] == "http://127.0.0.1:8080"
    assert session.verify is True


@pytest.mark.parametrize("proxy", ["ftp://example.com", "http://", "http://example.com:notaport"])
def test_build_session_rejects_bad_proxy(proxy):
    with pytest.raises(ValueError):
        build_session(proxy, False, "agent")


def test_read_urls_skips_blank_lines():
    stream = io.StringIO("http://example.com/?a=1\n\n   \nhttp://example.com/?b=2\r\n")
    assert read_urls(stream) == ["http://example.com/?a=1", "http://example.com/?b=2"]


def test_analyse_url_reports_parse_error():
    out, err = io.StringIO(), io.StringIO()
    result = analyse_url(requests.Session(), "nope", True, True, False, out, err)
    assert result == []
    assert "❌ Erreur de parsing : nope" in err.getvalue()


def test_analyse_url_search():
    out, err = io.StringIO(), io.StringIO()
    url = "http://example.com/page?q=hello&empty="
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/page", body="q=hello here")
        analyse_url(requests.Session(), url, True, False, False, out, err)
    lines = out.getvalue().splitlines()
    assert "  q = hello" in lines
    assert "  hello (q)" in lines
    assert "  q=hello" in lines


def test_analyse_url_fuzz_reflected():
    out, err = io.StringIO(), io.StringIO()
    url = "http://example.com/page?q=hello&empty="
    with responses.RequestsMock() as rsps:
        rsps.add_callback(responses.GET, re.compile(r"http://example\.com/page.*"), callback=_echo_url)
        reflected = analyse_url(requests.Session(), url, False, True, False, out, err)
    assert len(reflected) == 1
    assert reflected[0].endswith("&empty=")
    text = out.getvalue()
    assert "⚠️ Skipping clé 'empty' avec valeur vide" in text
    assert "✅ Valeur fuzz reflétée dans la réponse" in text
    assert f"✅  {reflected[0]}" in text


def test_analyse_url_fuzz_not_reflected_verbose():
    out, err = io.StringIO(), io.StringIO()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/page", body="static")
        reflected = analyse_url(requests.Session(), "http://example.com/page?q=1", False, True, True, out, err)
    assert reflected == []
    assert "❌ Valeur fuzz NON trouvée" in out.getvalue()


def test_analyse_url_search_failure_skips_fuzz():
    out, err = io.StringIO(), io.StringIO()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/page", body=requests.ConnectionError("down"))
        reflected = analyse_url(requests.Session(), "http://example.com/page?q=1", True, True, False, out, err)
    assert reflected == []
    assert "Erreur lors de la requête HTTP" in err.getvalue()
    assert "Fuzzing" not in out.getvalue()


def test_main_lists_parameters(capsys):
    assert main(["http://example.com/?a=1&b=2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "  a = 1" in lines
    assert "  b = 2" in lines


def test_main_invalid_proxy(capsys):
    assert main(["-p", "ftp://example.com", "http://example.com/"]) == 1
    assert "❌ Erreur proxy invalide" in capsys.readouterr().err


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("http://example.com/?x=1\n\nhttp://example.com/?y=2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "📥 Lecture des URLs depuis l'entrée standard..." in out
    assert out.count("=====================") == 2