"""
Tests for the cURL command importer.
"""

import base64

from hypothesis import given, strategies as st, settings

from badgateway.schemas.request import BasicAuth, BearerAuth, NoAuth, RequestSpec
from badgateway.services.curl_import import import_curl, split_command


def basic(username: str, password: str) -> str:
    return base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")


class TestSplitCommand:

    def test_whitespace_separates_tokens(self):
        assert split_command("curl\t-X  POST\nhttps://x.test") == ["curl", "-X", "POST", "https://x.test"]

    def test_quotes_group_and_are_stripped(self):
        assert split_command("""curl -H 'A: b c' -d "x y\"""") == ["curl", "-H", "A: b c", "-d", "x y"]

    def test_other_quote_kind_is_literal_inside_quotes(self):
        assert split_command("""-d "it's" -d 'say "hi"'""") == ["-d", "it's", "-d", 'say "hi"']

    def test_empty_quotes_make_empty_token(self):
        assert split_command("a '' b") == ["a", "", "b"]

    def test_unquoted_backslashes_are_dropped_everywhere(self):
        assert split_command("curl \\\n  https://x.test/a\\b") == ["curl", "https://x.test/ab"]

    def test_quoted_backslashes_are_kept(self):
        assert split_command("-d 'a\\nb'") == ["-d", "a\\nb"]

    @given(words=st.lists(
        st.text(alphabet=st.sampled_from("abcXYZ019-:/._="), min_size=1, max_size=10),
        min_size=1,
        max_size=8,
    ))
    @settings(max_examples=100)
    def test_plain_words_round_trip(self, words: list[str]):
        assert split_command(" ".join(words)) == words


class TestRejection:

    def test_not_a_curl_command(self):
        assert import_curl("not a curl command") is None

    def test_empty_text(self):
        assert import_curl("") is None
        assert import_curl("   ") is None

    def test_curl_without_url(self):
        assert import_curl("curl -X POST -d foo=bar") is None

    def test_curl_prefix_must_be_its_own_token(self):
        assert import_curl("curlie https://x.test") is None

    def test_url_requires_http_scheme(self):
        assert import_curl("curl x.test/path") is None

    @given(text=st.text(max_size=40).filter(lambda s: not s.strip().startswith("curl")))
    @settings(max_examples=100)
    def test_text_not_starting_with_curl_is_rejected(self, text: str):
        assert import_curl(text) is None


class TestImport:

    def test_post_with_bearer_and_body(self):
        partial = import_curl(
            """curl -X POST https://api.example.com/x -H "Authorization: Bearer abc123" -d '{"a":1}'"""
        )

        assert partial is not None
        assert partial.method == "POST"
        assert partial.url == "https://api.example.com/x"
        assert partial.auth == BearerAuth(token="abc123")
        assert partial.body == '{"a":1}'
        assert partial.headers is None

    def test_user_flag_sets_basic_auth(self):
        partial = import_curl("curl -u alice:secret https://x.test")

        assert partial.auth == BasicAuth(username="alice", password="secret")
        assert partial.method == "GET"
        assert partial.url == "https://x.test"

    def test_user_flag_without_colon_sets_no_auth(self):
        assert import_curl("curl --user alice https://x.test").auth is None

    def test_user_flag_splits_on_first_colon(self):
        partial = import_curl("curl -u alice:pa:ss https://x.test")
        assert partial.auth == BasicAuth(username="alice", password="pa:ss")

    def test_data_promotes_get_to_post(self):
        partial = import_curl("curl https://x.test -d foo=bar")

        assert partial.method == "POST"
        assert partial.body == "foo=bar"

    def test_data_flag_variants(self):
        for flag in ("-d", "--data", "--data-raw", "--data-binary"):
            partial = import_curl(f"curl {flag} 'x=1' https://x.test")
            assert partial.body == "x=1"
            assert partial.method == "POST"

    def test_data_keeps_explicit_non_get_method(self):
        assert import_curl("curl -X PUT -d a=1 https://x.test").method == "PUT"

    def test_explicit_get_before_data_is_promoted(self):
        assert import_curl("curl -X GET -d a=1 https://x.test").method == "POST"

    def test_method_after_data_overrides(self):
        assert import_curl("curl -d a=1 --request patch https://x.test").method == "PATCH"

    def test_method_is_case_insensitive(self):
        assert import_curl("curl -X delete https://x.test").method == "DELETE"

    def test_unknown_method_falls_back_to_get(self):
        assert import_curl("curl -X PURGE https://x.test").method == "GET"

    def test_last_url_wins(self):
        assert import_curl("curl https://a.test http://b.test").url == "http://b.test"

    def test_last_body_wins(self):
        assert import_curl("curl -d one -d two https://x.test").body == "two"

    def test_headers_are_kept_verbatim_in_order(self):
        partial = import_curl(
            "curl -H 'Accept: application/json' --header 'X-Dup: 1' -H 'X-Dup: 2' https://x.test"
        )
        assert partial.headers == ["Accept: application/json", "X-Dup: 1", "X-Dup: 2"]

    def test_bearer_prefix_is_case_insensitive(self):
        partial = import_curl("curl -H 'authorization: bearer tok' https://x.test")
        assert partial.auth == BearerAuth(token="tok")
        assert partial.headers is None

    def test_basic_authorization_header_is_decoded(self):
        partial = import_curl(f"curl -H 'Authorization: Basic {basic('bob', 'pw')}' https://x.test")
        assert partial.auth == BasicAuth(username="bob", password="pw")
        assert partial.headers is None

    def test_undecodable_basic_header_is_dropped(self):
        partial = import_curl("curl -H 'Authorization: Basic !!!notbase64' https://x.test")
        assert partial.auth is None
        assert partial.headers is None

    def test_basic_header_without_colon_is_dropped(self):
        encoded = base64.b64encode(b"nocolon").decode("ascii")
        partial = import_curl(f"curl -H 'Authorization: Basic {encoded}' https://x.test")
        assert partial.auth is None
        assert partial.headers is None

    def test_other_authorization_scheme_is_kept_as_header(self):
        partial = import_curl("curl -H 'Authorization: Token xyz' https://x.test")
        assert partial.auth is None
        assert partial.headers == ["Authorization: Token xyz"]

    def test_multiline_command_with_continuations(self):
        text = (
            "curl --request POST \\\n"
            "  --url-ignored \\\n"
            "  -H 'Content-Type: application/json' \\\n"
            "  --data-raw '{\"k\": \"v\"}' \\\n"
            "  https://api.example.com/items\n"
        )
        partial = import_curl(text)

        assert partial.method == "POST"
        assert partial.url == "https://api.example.com/items"
        assert partial.headers == ["Content-Type: application/json"]
        assert partial.body == '{"k": "v"}'

    def test_unknown_flags_are_ignored(self):
        partial = import_curl("curl -s -L --compressed https://x.test -v")
        assert partial.url == "https://x.test"
        assert partial.method == "GET"

    def test_trailing_value_flag_without_value(self):
        partial = import_curl("curl https://x.test -H")
        assert partial.url == "https://x.test"
        assert partial.headers is None

    def test_empty_body_is_not_present(self):
        assert import_curl("curl -d '' https://x.test").body is None


class TestApplyToSpec:
    """Imported fields only replace headers, body and auth when non-empty."""

    def test_missing_fields_keep_current_values(self):
        current = RequestSpec(
            method="PUT",
            url="https://old.test",
            headers=["X-Keep: 1"],
            body="keep",
            auth=BearerAuth(token="old"),
        )
        spec = import_curl("curl https://new.test").apply_to(current)

        assert spec.method == "GET"
        assert spec.url == "https://new.test"
        assert spec.headers == ["X-Keep: 1"]
        assert spec.body == "keep"
        assert spec.auth == BearerAuth(token="old")

    def test_present_fields_replace_current_values(self):
        current = RequestSpec(headers=["X-Old: 1"], body="old")
        spec = import_curl("curl -H 'X-New: 2' -d new -u a:b https://new.test").apply_to(current)

        assert spec.headers == ["X-New: 2"]
        assert spec.body == "new"
        assert spec.auth == BasicAuth(username="a", password="b")
        assert spec.method == "POST"

    def test_no_auth_current_stays_no_auth(self):
        spec = import_curl("curl https://new.test").apply_to(RequestSpec())
        assert isinstance(spec.auth, NoAuth)
