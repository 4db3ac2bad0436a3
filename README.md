# smokesignal

Building blocks for the web handlers of an event and RSVP application. The
package is a library. Import the modules you need.

## Installation

```
pip install smokesignal
pip install "smokesignal[test]"   # adds pytest
```

## Modules

### `smokesignal.i18n`

- `LanguageIdentifier.parse("en-US")` parses a BCP 47 tag. `-` and `_` are both
  accepted as separators, and the result is stored in canonical case. An
  invalid tag raises `InvalidLanguageError`. `matches(other, self_as_range,
  other_as_range)` compares two tags subtag by subtag. On a side that is
  treated as a range, a missing subtag matches anything.
- `Locales(locales)` keeps one message bundle per language.
  - `add_bundle(locale, content)` parses a resource made of `id = text`
    messages and `-term = text` terms. Entries can have indented continuation
    lines and `.attribute = text` lines. Placeables can be `{ $variable }`,
    `{ "string" }`, `{ 42 }`, `{ message }`, `{ -term }` and
    `{ message.attribute }`. Lines that start with `#` are comments.
  - `add_bundle` raises `InvalidLanguageError` for a language that was not
    configured. It raises `LanguageResourceError` when the content does not
    parse, and `BundleLoadError` when an id is already defined. All three
    derive from `I18nError`.
  - `format_error(locale, bare, partial)` returns the message `bare`, or
    `partial` if that message is not found.
  - `format_message(locale, message, args)` formats with arguments and falls
    back to the message id. When a pattern has more than one part, values
    substituted into it are wrapped in Unicode isolation marks.
- `populate_locale(supported_locales, locales, directory)` loads
  `<directory>/<tag in lower case>/errors.ftl` for each language.

### `smokesignal.http.middleware_i18n`

- `AcceptedLanguage.parse("fr;q=0.8")` reads one entry of an `Accept-Language`
  header. The quality defaults to 1.0 and is clamped to the range 0 to 1.
- `parse_accept_language(header)` returns the entries with the highest
  quality first. Entries with equal quality keep their order, and empty
  entries are skipped.
- `select_language(supported_languages, profile_language, cookie_value,
  accept_language)` picks the language in this order:
  1. The profile language, if it parses.
  2. The first entry of the comma-separated cookie value that a supported
     language matches.
  3. The first header entry that a supported language matches.
  4. The first supported language.

  `COOKIE_LANG` is the name of the cookie.

### `smokesignal.http.utils`

- `stringify(pairs)` returns `key=value&` for each pair.
- `URLBuilder(host)` builds an https URL from the host. Use `.path()` to set
  the path and `.param()` to add a percent-encoded query parameter, then call
  `.build()`.
- `build_url(host, path, params)` does the same in one call. Parameters given
  as `None` are skipped.
- `url_from_aturi(external_base, aturi)` maps an `at://` event URI in the
  `community.lexicon.calendar.event` or `events.smokesignal.calendar.event`
  collection to its page. URIs in other collections raise
  `UnsupportedCollectionError`.
- `truncate_text(text, tlen, suffix)` shortens text that is longer than
  `tlen` bytes, near a word boundary. If the text was shortened and a suffix
  is given, the suffix is appended after a space.

### `smokesignal.http.pagination`

- `Pagination(page, page_size)`:
  - `clamped()` applies the defaults (page 1, size 10) and limits the page to
    1–100 and the size to 5–100.
  - `admin_clamped()` limits the page to 1–25000 and the size to 20–100.
- `PaginationView.create(page_size, total, page, params)` fills in
  `previous`/`previous_url` when the page is above 1, and `next`/`next_url`
  when `total` is greater than `page_size`.

### `smokesignal.http.timezones`

- `supported_timezones(handle_tz)` returns the user's zone, or `"UTC"` if the
  zone is unknown. It also returns the sorted list of zones to offer, with the
  user's zone included.
- `combine_html_datetime(date_str, time_str, timezone)` combines `YYYY-MM-DD`
  and `HH:MM` in the given zone (a name or a `tzinfo`) into an aware UTC
  `datetime`. It raises `ValueError` on bad input, and on local times that are
  ambiguous or do not exist.

### `smokesignal.http.templates`

- `select_template(name, hx_boosted, hx_request, language)` returns one of
  these template names:
  - `name.<lang>.bare.html` for boosted requests
  - `name.<lang>.partial.html` for other htmx requests
  - `name.<lang>.html` otherwise

  If `name` is `None`, `"alert"` is used.
- `build_env(http_external, version, template_path)` creates a Jinja2
  environment that loads templates from the given directory. It enables
  autoescaping for HTML and XML, trims blocks, and sets the `base` and
  `version` globals.
- `render_alert(engine, language, message, context)` renders
  `prompt.<language>.html` with `message` set.

### `smokesignal.http.location_edit_status`

`check_location_edit_status(locations)` returns a `LocationEditStatus`:

- With no locations, it is editable with an empty `Address`.
- With one `Address`, it is editable with that address.
- With several locations, or with one that is not an `Address`, it is not
  editable. `edit_reason()` then says why.

### `smokesignal.http.tabs` and `smokesignal.http.profile`

- `tabs`:
  - `TabSelector` and `TabLink` hold tab data.
  - `RSVPTab.from_selector` maps `interested` and `notgoing` to those tabs and
    anything else to `going`.
  - `default_collection()` returns `community.lexicon.calendar.event`.
- `profile`:
  - `parse_handle_slug` splits `@handle`, `did:plc:…` and `did:web:…` slugs,
    and raises `InvalidHandleSlugError` for anything else.
  - `ProfileTab` has a single tab.
  - `profile_tab_links` builds its link.

### `smokesignal.http.oauth_metadata`

- `client_metadata(external_base)` returns the OAuth client metadata document
  as a dict.
- `random_token(length)` returns a random string of letters and digits.
- `gen_pkce()` returns a 100-character verifier and its S256 challenge.
  `pkce_challenge(token)` computes the challenge for a given verifier.
- `authorization_url(endpoint, request_uri, external_base)` builds the
  redirect URL after a pushed authorization request.

## Examples

```python
from smokesignal.http.utils import build_url, url_from_aturi
from smokesignal.http.timezones import combine_html_datetime

build_url("example.com", "/events", [("tab", "going"), None])
# 'https://example.com/events?tab=going&'

url_from_aturi("example.com", "at://did:plc:abc/community.lexicon.calendar.event/3k")
# 'https://example.com/did:plc:abc/3k'

combine_html_datetime("2025-05-06", "18:00", "America/New_York")
# datetime(2025, 5, 6, 22, 0, tzinfo=timezone.utc)
```

## What this package does not do

The package provides no web server, routes or request handlers. It does not
store events, RSVPs, sessions or handles, and it does not perform the OAuth
exchange, sign tokens or talk to any remote service. It has no command-line
program. Wire these pieces into your own application to provide those parts.

## Running the tests

```
pytest
```