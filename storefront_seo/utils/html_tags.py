"""
In-place edits of <head> markup using regular expressions.

Every helper touches only the first matching tag and leaves the rest of the
document byte-for-byte intact. Tag names, attribute names and the matched
attribute value compare case-insensitively.
"""
import re

# A whole start tag; quoted attribute values may contain '>'
_TAG_PATTERN = r'<{name}\b(?:[^>"\']|"[^"]*"|\'[^\']*\')*>'
META_RE = re.compile(_TAG_PATTERN.format(name='meta'), re.IGNORECASE)
LINK_RE = re.compile(_TAG_PATTERN.format(name='link'), re.IGNORECASE)
TITLE_RE = re.compile(r'(<title\b[^>]*>)(.*?)(</title\s*>)', re.IGNORECASE | re.DOTALL)
HEAD_CLOSE_RE = re.compile(r'</head\s*>', re.IGNORECASE)
ATTR_RE = re.compile(r'([\w:.-]+)\s*=\s*(?:"([^"]*)"|\'([^\']*)\'|([^\s"\'>]+))')
TAG_END_RE = re.compile(r'\s*/?>$')


def escape_attr(value):
    """Escape a value for use inside a double-quoted attribute"""
    return str(value).replace('"', '&quot;')


def parse_attrs(tag):
    attrs = {}
    for match in ATTR_RE.finditer(tag):
        name = match.group(1).lower()
        if name in attrs:
            continue
        value = next((g for g in match.group(2, 3, 4) if g is not None), '')
        attrs[name] = value
    return attrs


def set_attr(tag, name, value):
    """Rewrite (or append) one attribute of a start tag, keeping everything else"""
    escaped = escape_attr(value)
    # ATTR_RE consumes quoted values whole, so name= inside another value never matches
    for match in ATTR_RE.finditer(tag):
        if match.group(1).lower() == name.lower():
            return f'{tag[:match.start()]}{name}="{escaped}"{tag[match.end():]}'
    end = TAG_END_RE.search(tag)
    return f'{tag[:end.start()]} {name}="{escaped}"{tag[end.start():]}'


def _find_tag(html, tag_re, predicate):
    for match in tag_re.finditer(html):
        if predicate(parse_attrs(match.group(0))):
            return match
    return None


def find_meta(html, key, attrs=('name',)):
    key = key.lower()
    return _find_tag(
        html, META_RE,
        lambda found: any(found.get(a, '').strip().lower() == key for a in attrs)
    )


def find_link(html, rel):
    rel = rel.lower()
    return _find_tag(
        html, LINK_RE,
        lambda found: rel in found.get('rel', '').lower().split()
    )


def replace_title(html, text):
    """Swap the text of the first <title> element. Returns (html, replaced)."""
    escaped = escape_attr(text)
    new_html, count = TITLE_RE.subn(lambda m: f'{m.group(1)}{escaped}{m.group(3)}', html, count=1)
    return new_html, bool(count)


def replace_meta(html, key, content, attrs=('name',)):
    """Set content= on the first <meta> whose name (or other attr in attrs) is key.

    Returns (html, replaced).
    """
    match = find_meta(html, key, attrs)
    if not match:
        return html, False
    new_tag = set_attr(match.group(0), 'content', content)
    return html[:match.start()] + new_tag + html[match.end():], True


def replace_link(html, rel, href):
    """Set href= on the first <link> with the given rel. Returns (html, replaced)."""
    match = find_link(html, rel)
    if not match:
        return html, False
    new_tag = set_attr(match.group(0), 'href', href)
    return html[:match.start()] + new_tag + html[match.end():], True


def insert_before_head_close(html, markup):
    match = HEAD_CLOSE_RE.search(html)
    if not match:
        return html
    return html[:match.start()] + markup + html[match.start():]
