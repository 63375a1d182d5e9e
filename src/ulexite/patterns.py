"""
Exclusion patterns for `ulexite list`.

Patterns are shell globs matched against the bare entry name, never the path:
a fixed base set followed by whatever the ignore file contributes.
"""

import fnmatch
import pathlib

from ulexite.log import log_warning

# ─── defaults ───────────────────────────────────────────────────────────────
BASE_PATTERNS = (".*", "*.sum", "*.mod")
DEF_IGNORE_FILE = ".gitignore"
# ────────────────────────────────────────────────────────────────────────────


def read_ignore_patterns(path) -> list[str]:
    """One pattern per non-blank, non-comment line. Missing file -> []."""
    p = pathlib.Path(path)
    try:
        text = p.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return []
    except OSError as e:
        log_warning(f"ignoring unreadable ignore file '{p}': {e}")
        return []

    patterns = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return patterns


def build_patterns(ignore_file=DEF_IGNORE_FILE) -> tuple[str, ...]:
    extra = read_ignore_patterns(ignore_file) if ignore_file else []
    return BASE_PATTERNS + tuple(extra)


def _literal(ch: str) -> str:
    return f"[{ch}]" if ch in "*?[" else ch


def to_fnmatch(pattern: str) -> str:
    """
    Rewrite a shell glob into fnmatch syntax.

    Character classes negate with a leading `^` (a leading `!` is literal) and
    backslash escapes the next character. Raises ValueError for an unterminated
    or empty class and for a trailing backslash.
    """
    out = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == "\\":
            if i >= n:
                raise ValueError("trailing backslash")
            out.append(_literal(pattern[i]))
            i += 1
        elif c == "[":
            negate = i < n and pattern[i] == "^"
            if negate:
                i += 1
            body, bracket, bang, dash = [], False, False, False
            closed = False
            while i < n:
                c = pattern[i]
                i += 1
                if c == "]":
                    if not (body or bracket or bang or dash):
                        raise ValueError("empty character class")
                    closed = True
                    break
                if c == "\\":
                    if i >= n:
                        raise ValueError("trailing backslash")
                    c = pattern[i]
                    i += 1
                    if c == "]":
                        bracket = True
                        continue
                    if c == "-":
                        dash = True
                        continue
                if c == "!" and not body:
                    bang = True  # fnmatch would read it as negation
                    continue
                body.append(c)
            if not closed:
                raise ValueError("unterminated character class")
            members = ("]" if bracket else "") + "".join(body) + ("!" if bang else "") + ("-" if dash else "")
            if not negate and members.startswith("!"):
                members = members[1:] + "!"
            if members == "!" and not negate:
                out.append("!")
            else:
                out.append("[" + ("!" if negate else "") + members + "]")
        else:
            out.append(c)
    return "".join(out)


def is_excluded(name: str, patterns) -> bool:
    for pattern in patterns:
        try:
            glob = to_fnmatch(pattern)
        except ValueError as e:
            log_warning(f"bad glob pattern {pattern!r}: {e}")
            continue
        if fnmatch.fnmatchcase(name, glob):
            return True
    return False


def filter_entries(entries, patterns) -> list:
    return [e for e in entries if not is_excluded(e.name, patterns)]
