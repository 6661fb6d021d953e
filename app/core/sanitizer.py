"""
Allow-list HTML sanitization for rendered prompt bodies.

Anything not listed below is dropped: unknown elements are unwrapped to their
text, script-like elements are removed together with their content, and
href/src values outside http/https/mailto are removed.
"""

import logging

import markdown
import nh3

logger = logging.getLogger(__name__)

DEFAULT_TAGS = {
    "address", "article", "aside", "footer", "header", "hgroup", "main", "nav", "section",
    "blockquote", "dd", "div", "dl", "dt", "figcaption", "figure", "hr", "li", "ol", "p", "ul",
    "a", "abbr", "b", "bdi", "bdo", "br", "cite", "code", "data", "dfn", "em", "i", "kbd",
    "mark", "q", "rb", "rp", "rt", "rtc", "ruby", "s", "samp", "small", "span", "strong",
    "sub", "sup", "time", "u", "var", "wbr",
    "caption", "col", "colgroup", "table", "tbody", "td", "tfoot", "th", "thead", "tr",
}

ALLOWED_TAGS = DEFAULT_TAGS | {
    "h1", "h2", "h3", "h4", "h5", "h6",
    "img", "table", "thead", "tbody", "tr", "th", "td", "code", "pre",
}

ALLOWED_ATTRIBUTES = {
    "*": set(),
    "a": {"href", "name", "target", "rel"},
    "img": {"src", "alt"},
    "code": {"class"},
}

ALLOWED_SCHEMES = {"http", "https", "mailto"}

# Removed along with everything inside them
DROP_WITH_CONTENT = {"script", "style", "iframe", "object", "embed", "textarea", "option", "noscript"}

MARKDOWN_EXTENSIONS = ["tables", "fenced_code"]


def sanitize(html) -> str:
    if html is None:
        return ""
    if not isinstance(html, str):
        html = str(html)
    try:
        return nh3.clean(
            html,
            tags=ALLOWED_TAGS,
            clean_content_tags=DROP_WITH_CONTENT,
            attributes=ALLOWED_ATTRIBUTES,
            url_schemes=ALLOWED_SCHEMES,
            link_rel=None,
            strip_comments=True,
        )
    except Exception as e:
        # Worst case the caller gets the text content only
        logger.warning(f"Sanitizer fell back to text-only output: {e}")
        return nh3.clean(html, tags=set(), clean_content_tags=DROP_WITH_CONTENT, attributes={})


def render_markdown(body_md: str) -> str:
    """Render a prompt body to HTML that is safe to inject into a page."""
    return sanitize(markdown.markdown(body_md or "", extensions=MARKDOWN_EXTENSIONS))
