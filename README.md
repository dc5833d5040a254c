# reflexionfinder

A small command-line tool for spotting query parameters that a web page
echoes back in its response. It lists the parameters of a URL, can look for
their keys and values in the page body, and can replace each value with a
random token to check whether the token comes back.

Output messages are in French.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### `reflexionfinder`

```
reflexionfinder [URL] [options]
```

If no URL is given, URLs are read from standard input, one per line. Blank
lines are skipped. A URL that cannot be parsed is reported on standard error
and the next one is analysed.

Options:

- `-s`, `--search`: fetch the page and report which parameter keys,
  non-empty values and `key=value` pairs appear in its body.
- `-f`, `--fuzz`: for every parameter with a non-empty value, send a request
  with that value replaced by a random 12-character alphanumeric token, and
  print the URL when the token is reflected in the response. Parameters with
  an empty value are skipped.
- `-v`, `--verbose`: while fuzzing, also report tokens that were not
  reflected.
- `-p`, `--proxy URL`: send all requests through a proxy, for example
  `http://127.0.0.1:8080`. Without a scheme, `http://` is assumed. An invalid
  proxy ends the command with exit status 1.
- `-k`, `--insecure`: do not verify TLS certificates. Only use this against
  hosts you trust.
- `-u`, `--user-agent UA`: the User-Agent header to send. The default is
  `ReflexionFinder/1.0`.
- `-V`, `--version`: print the version and exit.

Examples:

```
reflexionfinder "https://example.com/search?q=hello&page=2" --search --fuzz
cat urls.txt | reflexionfinder -f -p http://127.0.0.1:8080 -k
```

### `paramextractor`

A simpler variant for a single URL. It prints the URL's query parameters and,
with `-s`/`--search`, fetches the page and searches it for them. It exits
with status 1 if the URL cannot be parsed or the request fails.

```
paramextractor "https://example.com/?id=42" --search
```

## As a library

`reflexionfinder.analysis` provides the building blocks:

- `query_params(url)`: the decoded `(key, value)` pairs of a URL's query, in
  order, blank values kept. Raises `ValueError` for a URL without a scheme or,
  for web schemes, without a host or with a bad port.
- `search_reflections(params, body)`: a `SearchReport` with the `keys`,
  `values` (as `(key, value)` pairs) and `combos` found in a body. Its
  `render()` method returns the text report.
- `random_token(length)`: a random alphanumeric string.
- `fuzzed_url(url, params, key, value)`: the URL with its query rebuilt from
  `params`, every parameter named `key` set to `value`, form-encoded.

`reflexionfinder.cli.analyse_url(session, url, search, fuzz, verbose, out, err)`
runs the analysis of one URL with a `requests.Session` and returns the fuzzed
URLs whose token was reflected.

## Limits

Only query-string parameters are examined. Form bodies, headers and cookies
are not tested, pages are not crawled for further links, and results are only
printed, not saved.