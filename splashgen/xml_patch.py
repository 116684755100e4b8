# splashgen/xml_patch.py
"""
Idempotent patching of Android-style XML resource files.

The text is scanned into a light element tree that keeps the exact
character spans of every tag. Entries are looked up by name in that
tree, then replaced or inserted by splicing the original text, so
anything the patch does not touch (comments, ordering, formatting,
line endings) is preserved byte for byte.
"""
import os
import re

from .errors import PatchAnchorNotFound

RESOURCES_SKELETON = '<?xml version="1.0" encoding="utf-8"?>\n<resources>\n</resources>\n'

INDENT = '    '

_TOKEN_RE = re.compile(
    r'<!--.*?-->'
    r'|<!\[CDATA\[.*?\]\]>'
    r'|<\?.*?\?>'
    r'|<![^>]*>'
    r'|<(?P<close>/)?(?P<tag>[A-Za-z_][\w:.-]*)(?P<attrs>(?:[^>"\']|"[^"]*"|\'[^\']*\')*)>',
    re.S,
)
_ATTR_RE = re.compile(r'([\w:.-]+)\s*=\s*(?:"([^"]*)"|\'([^\']*)\')')


class Node:
    """An element with the spans of its opening tag and (if any) closing tag."""

    __slots__ = ('tag', 'attrs', 'start', 'open_end', 'close_start', 'end',
                 'self_closing', 'children')

    def __init__(self, tag, attrs, start, open_end, self_closing=False):
        self.tag = tag
        self.attrs = attrs
        self.start = start
        self.open_end = open_end
        self.self_closing = self_closing
        self.close_start = open_end if self_closing else None
        self.end = open_end if self_closing else None
        self.children = []

    @property
    def closed(self):
        return self.end is not None

    def __repr__(self):
        return f'<Node {self.tag} {self.attrs!r} [{self.start}:{self.end}]>'


def _parse_attrs(raw):
    return {m.group(1): m.group(2) if m.group(2) is not None else m.group(3)
            for m in _ATTR_RE.finditer(raw)}


def parse_elements(content):
    """Return the top-level element nodes of ``content``.

    Tolerant of broken input: a stray closing tag is ignored and an element
    whose closing tag never appears stays in the tree with ``end = None``.
    """
    roots, stack = [], []
    for m in _TOKEN_RE.finditer(content):
        tag = m.group('tag')
        if tag is None:
            continue
        if m.group('close'):
            for i in range(len(stack) - 1, -1, -1):
                if stack[i].tag == tag:
                    stack[i].close_start, stack[i].end = m.start(), m.end()
                    del stack[i:]
                    break
            continue
        raw = m.group('attrs')
        self_closing = raw.rstrip().endswith('/')
        node = Node(tag, _parse_attrs(raw), m.start(), m.end(), self_closing)
        (stack[-1].children if stack else roots).append(node)
        if not self_closing:
            stack.append(node)
    return roots


def iter_nodes(nodes):
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)


def find_root(content, tag):
    root = next((n for n in parse_elements(content) if n.tag == tag), None)
    if root is None:
        raise PatchAnchorNotFound(f'<{tag}> element not found')
    if root.self_closing or not root.closed:
        raise PatchAnchorNotFound(f'closing </{tag}> not found')
    return root


# =========================
# text helpers
# =========================
def _line_indent(content, pos):
    line_start = content.rfind('\n', 0, pos) + 1
    prefix = content[line_start:pos]
    return prefix if not prefix.strip() else ''


def _cut_start(content, pos):
    """Start of ``pos``'s line including the preceding line break, when only whitespace sits before it."""
    i = pos
    while i > 0 and content[i - 1] in ' \t':
        i -= 1
    if i > 0 and content[i - 1] == '\n':
        i -= 1
        if i > 0 and content[i - 1] == '\r':
            i -= 1
        return i
    return pos if i > 0 else i


def _reindent(markup, indent):
    lines = markup.split('\n')
    return '\n'.join([lines[0]] + [indent + line if line else line for line in lines[1:]])


def _remove_nodes(content, nodes):
    # back to front so earlier spans stay valid
    for node in sorted(nodes, key=lambda n: n.start, reverse=True):
        content = content[:_cut_start(content, node.start)] + content[node.end:]
    return content


# =========================
# operations
# =========================
def upsert_entry(content, tag, name, markup, root='resources'):
    """
    Replace the ``<tag name="name">`` child of ``root`` with ``markup``, or
    insert ``markup`` on its own line right above ``</root>``.

    Later duplicates of the same name are dropped, so repeated calls never
    accumulate entries.
    """
    parent = find_root(content, root)
    matches = [c for c in parent.children if c.tag == tag and c.attrs.get('name') == name]

    if matches:
        if not all(m.closed for m in matches):
            raise PatchAnchorNotFound(f'<{tag} name="{name}"> is not closed')
        first = matches[0]
        entry = _reindent(markup, _line_indent(content, first.start))
        content = _remove_nodes(content, matches[1:])
        return content[:first.start] + entry + content[first.end:]

    pos = parent.close_start
    line_start = content.rfind('\n', 0, pos) + 1
    entry = INDENT + _reindent(markup, INDENT)
    if content[line_start:pos].strip():
        # closing tag shares its line with other markup
        return content[:pos] + '\n' + entry + '\n' + content[pos:]
    return content[:line_start] + entry + '\n' + content[line_start:]


def upsert_color(content, name, value):
    return upsert_entry(content, 'color', name, f'<color name="{name}">{value}</color>')


def style_markup(name, parent, items):
    lines = [f'<style name="{name}" parent="{parent}">' if parent else f'<style name="{name}">']
    lines += [f'{INDENT}<item name="{k}">{v}</item>' for k, v in items]
    lines.append('</style>')
    return '\n'.join(lines)


def upsert_style(content, name, parent, items):
    return upsert_entry(content, 'style', name, style_markup(name, parent, items))


def insert_into_element(content, tag, ident, entries, marker, ident_attr='android:name'):
    """
    Put ``entries`` right after the opening tag of the first ``<tag>`` whose
    ``ident_attr`` ends with ``ident``.

    Children whose ``ident_attr`` starts with ``marker`` are treated as a
    previous insertion and removed first, so the result is the same no
    matter how many times this runs.
    """
    target = next((n for n in iter_nodes(parse_elements(content))
                   if n.tag == tag and n.attrs.get(ident_attr, '').endswith(ident)), None)
    if target is None:
        raise PatchAnchorNotFound(f'<{tag} {ident_attr}="...{ident}"> not found')
    if target.self_closing or not target.closed:
        raise PatchAnchorNotFound(f'<{tag} {ident_attr}="...{ident}"> has no body to insert into')

    stale = [c for c in target.children if c.attrs.get(ident_attr, '').startswith(marker)]
    if not all(c.closed for c in stale):
        raise PatchAnchorNotFound(f'unterminated entry inside <{tag}>')

    indent = _line_indent(content, target.start) + INDENT
    block = ''.join('\n' + indent + _reindent(e, indent) for e in entries)
    content = _remove_nodes(content, stale)
    return content[:target.open_end] + block + content[target.open_end:]


def meta_data_markup(name, resource):
    return (f'<meta-data\n'
            f'{INDENT}android:name="{name}"\n'
            f'{INDENT}android:resource="{resource}" />')


# =========================
# file level
# =========================
def apply_patch(path, transform, skeleton=None):
    """
    Read-modify-write ``path`` through ``transform``.

    A missing file is created from ``skeleton`` first; without a skeleton it
    is reported and skipped. A missing anchor, a file that is not UTF-8 or
    an I/O error is reported as a warning and the file is left as it was.
    Returns True when the patch applied.
    """
    name = os.path.basename(path)
    if not os.path.exists(path):
        if skeleton is None:
            print(f"[WARN] {name} not found: {path}", flush=True)
            return False

    try:
        if not os.path.exists(path):
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(skeleton)
        with open(path, 'r', encoding='utf-8', newline='') as f:
            s = f.read()
    except UnicodeDecodeError as e:
        print(f"[WARN] {name}: not UTF-8 ({e.reason}), file left unchanged", flush=True)
        return False
    except OSError as e:
        print(f"[WARN] {name}: {e}, file left unchanged", flush=True)
        return False

    try:
        s_new = transform(s)
    except PatchAnchorNotFound as e:
        print(f"[WARN] {name}: {e}, file left unchanged", flush=True)
        return False

    if s_new != s:
        try:
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(s_new)
        except OSError as e:
            print(f"[WARN] {name}: {e}, file left unchanged", flush=True)
            return False
    return True
