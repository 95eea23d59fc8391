#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_sanitizer.py
"""Security tests for HTML sanitization.

Tests cover:
- URL scheme detection and dangerous scheme blocking
- Relative URL handling and base URL resolution
- Removal of dangerous and non-content elements with their content
- Allowlist stripping of tags, attributes and comments
- Property-based checks on arbitrary markup and URLs

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from html2annotated.constants import SAFE_HTML_ATTRIBUTES
from html2annotated.utils.html_sanitizer import (
    get_url_scheme,
    is_relative_url,
    is_url_allowed,
    is_url_safe,
    is_url_scheme_dangerous,
    make_attribute_filter,
    sanitize_html_string,
)

_WEB = frozenset({"http", "https"})


@pytest.mark.unit
@pytest.mark.security
class TestUrlChecks:
    """Tests for URL classification helpers."""

    @pytest.mark.parametrize(
        "url,scheme",
        [
            ("https://example.com", "https"),
            ("MAILTO:someone@example.com", "mailto"),
            ("/relative", None),
            ("//cdn.example.com/x.png", None),
            ("page.html#frag", None),
        ],
    )
    def test_get_url_scheme(self, url: str, scheme) -> None:
        """Test scheme extraction."""
        assert get_url_scheme(url) == scheme

    def test_relative_url(self) -> None:
        """Test relative URL detection."""
        assert is_relative_url("../up")
        assert not is_relative_url("http://x")

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JavaScript:alert(1)",
            "java\tscript:alert(1)",
            " javascript:alert(1)",
            "vbscript:msgbox(1)",
            "data:text/html,<script>alert(1)</script>",
        ],
    )
    def test_dangerous_schemes(self, url: str) -> None:
        """Test that script-capable schemes are detected, including obfuscated ones."""
        assert is_url_scheme_dangerous(url)
        assert not is_url_safe(url)
        assert not is_url_allowed(url, _WEB, preserve_relative_links=True)

    def test_empty_url_not_dangerous(self) -> None:
        """Test that blank URLs are not flagged as dangerous."""
        assert not is_url_scheme_dangerous("")
        assert not is_url_scheme_dangerous("   ")

    def test_protocol_allowlist(self) -> None:
        """Test that only listed protocols are allowed."""
        assert is_url_allowed("https://x", _WEB)
        assert not is_url_allowed("ftp://x", _WEB)

    def test_relative_urls_need_opt_in(self) -> None:
        """Test that relative URLs are allowed only when preserved."""
        assert not is_url_allowed("/a", _WEB)
        assert is_url_allowed("/a", _WEB, preserve_relative_links=True)

    def test_attribute_filter(self) -> None:
        """Test the bleach attribute filter."""
        keep = make_attribute_filter(SAFE_HTML_ATTRIBUTES)

        assert keep("a", "href", "https://x")
        assert not keep("a", "href", "javascript:alert(1)")
        assert not keep("a", "onclick", "x()")
        assert not keep("p", "style", "color: red")
        assert keep("img", "alt", "picture")

    @given(
        st.sampled_from(["javascript:", "JavaScript:", "JAVASCRIPT:", "jAvAsCrIpT:", "vbscript:"]),
        st.text(max_size=50),
    )
    def test_script_schemes_always_blocked(self, prefix: str, payload: str) -> None:
        """Property: script schemes are blocked whatever follows them."""
        assert not is_url_allowed(prefix + payload, {"http", "https", "mailto", "ftp"}, preserve_relative_links=True)


@pytest.mark.unit
@pytest.mark.security
class TestSanitizeHtmlString:
    """Tests for whole-document sanitization."""

    def test_event_handler_and_script_removed(self) -> None:
        """Test removal of event handler attributes and script elements."""
        assert sanitize_html_string('<p onclick="x()">Hi<script>alert(1)</script></p>') == "<p>Hi</p>"

    def test_dangerous_element_content_removed(self) -> None:
        """Test that style and iframe content does not leak into the text."""
        result = sanitize_html_string("<style>p{color:red}</style><iframe>frame</iframe><b>ok</b>")

        assert "color" not in result
        assert "frame" not in result
        assert "<b>ok</b>" in result

    def test_head_content_removed(self) -> None:
        """Test that only body content is kept."""
        html = "<html><head><title>T</title></head><body><p>Body</p></body></html>"
        assert sanitize_html_string(html) == "<p>Body</p>"

    def test_disallowed_tag_stripped_text_kept(self) -> None:
        """Test that unknown tags are unwrapped rather than dropped."""
        assert sanitize_html_string("<div><marquee>z</marquee></div>") == "z"

    def test_comments_removed(self) -> None:
        """Test that HTML comments are removed."""
        assert sanitize_html_string("a<!-- secret -->b") == "ab"

    def test_javascript_link_dropped(self) -> None:
        """Test that a javascript: href is removed while the link text stays."""
        result = sanitize_html_string('<a href="javascript:alert(1)">x</a>')

        assert "javascript" not in result
        assert ">x<" in result

    def test_safe_links_kept(self) -> None:
        """Test that http and mailto links survive."""
        result = sanitize_html_string('<a href="https://x.org">a</a><a href="mailto:m@x.org">b</a>')

        assert 'href="https://x.org"' in result
        assert 'href="mailto:m@x.org"' in result

    def test_relative_link_dropped_by_default(self) -> None:
        """Test that relative links are removed by default."""
        assert "href" not in sanitize_html_string('<a href="/path">x</a>')

    def test_relative_link_preserved(self) -> None:
        """Test that relative links are kept on request."""
        result = sanitize_html_string('<a href="/path">x</a>', preserve_relative_links=True)
        assert 'href="/path"' in result

    def test_relative_link_resolved_against_base(self) -> None:
        """Test that a base URL makes relative links absolute before checking."""
        result = sanitize_html_string('<a href="/path">x</a>', base_url="https://example.com/docs/")
        assert 'href="https://example.com/path"' in result

    def test_image_data_uri_dropped(self) -> None:
        """Test that data URIs are not allowed as image sources."""
        result = sanitize_html_string('<img src="data:image/png;base64,AAAA" alt="pic">')

        assert "data:" not in result
        assert 'alt="pic"' in result

    @given(st.text(alphabet=st.sampled_from(list("<>/=\"' ascriptSCRIPTab")), max_size=60))
    def test_no_script_tag_survives(self, markup: str) -> None:
        """Property: sanitized output never contains a script tag."""
        assert "<script" not in sanitize_html_string(markup).lower()
