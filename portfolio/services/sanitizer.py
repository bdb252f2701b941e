import re

from bs4 import BeautifulSoup, Comment, Tag

# Tags whose entire subtree is dropped from rendered post bodies
_REMOVE_TAGS = {
    "script",
    "style",
    "noscript",
    "object",
    "embed",
    "applet",
    "link",
    "meta",
    "base",
    "form",
}

# Inline event handlers (onclick, onload, …)
_JUNK_ATTRS = re.compile(r"^on\w+$", re.IGNORECASE)

# href/src values that would execute script when followed; matched after
# dropping the whitespace and control characters browsers ignore in a scheme
_UNSAFE_URL_RE = re.compile(r"^\s*(?:(?:javascript|vbscript):|data:text/html)", re.IGNORECASE)

_URL_ATTRS = ("href", "src", "action", "formaction")

_IGNORED_URL_CHARS = re.compile(r"[\x00-\x20\x7f]+")

# Attributes holding a whole inline document
_DOCUMENT_ATTRS = ("srcdoc",)


def sanitize(html: str) -> BeautifulSoup:
    """Strip executable and embedded content from rendered post *html*.

    Markdown lets authors write raw HTML, so the rendered body is cleaned
    before it is placed inside a page.  Iframes are kept (embedded videos)
    but lose any inline ``srcdoc`` document.
    """
    soup = BeautifulSoup(html, "lxml")

    for tag in soup.find_all(_REMOVE_TAGS):
        tag.decompose()

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in soup.find_all(True):
        if not isinstance(tag, Tag):
            continue
        junk = [attr for attr in tag.attrs if _JUNK_ATTRS.match(attr) or attr.lower() in _DOCUMENT_ATTRS]
        for attr in junk:
            del tag[attr]
        for attr in _URL_ATTRS:
            value = tag.get(attr)
            if isinstance(value, str) and _UNSAFE_URL_RE.match(_IGNORED_URL_CHARS.sub("", value)):
                del tag[attr]

    return soup


def sanitize_fragment(html: str) -> str:
    """Sanitise *html* and return the markup of its body, without wrappers."""
    soup = sanitize(html)
    body = soup.body
    if body is None:
        return ""
    return body.decode_contents().strip()
