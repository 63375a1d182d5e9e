"""
One-line summaries for every entry of a directory.

– One task per entry on a ThreadPoolExecutor (one worker per entry unless capped).
– Directories get a synthesized marker, files go through the completion service.
– Results come back in completion order and are sorted by name before rendering.
– Any task failure aborts the whole run; there are no partial reports.
"""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

from tqdm import tqdm

from ulexite.client import DEF_MODEL, query
from ulexite.errors import SnippetReadError

SNIPPET_BYTES = 4000
SUMMARY_MAX_TOKENS = 120

SYSTEM_PROMPT = (
    "You are a code file summarizer assistant. Given the user's input, respond with "
    "a one sentence summary of what the file contains. The summary should be something "
    "that would be useful to see from a README file. The file's name is '{name}'."
)

# ————————————————————————————————————————————————————————————————————————


@dataclass(frozen=True)
class Summary:
    name: str
    abs_path: str
    is_dir: bool
    summary: str


def read_snippet(path: str, size: int = SNIPPET_BYTES) -> str:
    """First `size` bytes of the file, single read; may cut a line or a character."""
    try:
        with open(path, "rb") as f:
            data = f.read(size)
    except OSError as e:
        raise SnippetReadError(path, e) from e
    return data.decode("utf-8", errors="replace")


def summarize_entry(client, directory, entry, *, model: str = DEF_MODEL, max_tokens: int = SUMMARY_MAX_TOKENS) -> Summary:
    abs_path = os.path.abspath(os.path.join(directory, entry.name))

    if entry.is_dir:
        return Summary(entry.name, abs_path, True, f"directory[{abs_path}]")

    text = query(
        client,
        SYSTEM_PROMPT.format(name=entry.name),
        read_snippet(abs_path),
        max_tokens=max_tokens,
        model=model,
    )
    return Summary(entry.name, abs_path, False, text)


# ————————————————————————————————————————————————————————————————————————


def _sort_key(s: Summary) -> bytes:
    return os.fsencode(s.name)


def collect_summaries(futures, *, progress: bool = True) -> list[Summary]:
    """Drain futures as they finish, then order the results byte-wise by name."""
    results = []
    with tqdm(total=len(futures), desc="summarizing", unit="entry", disable=not progress) as bar:
        for fut in as_completed(futures):
            results.append(fut.result())
            bar.update(1)
    return sorted(results, key=_sort_key)


def summarize_directory(
    client,
    directory,
    entries,
    *,
    model: str = DEF_MODEL,
    max_workers: int | None = None,
    progress: bool = True,
) -> list[Summary]:
    entries = list(entries)
    if not entries:
        return []

    pool = ThreadPoolExecutor(max_workers=max_workers or len(entries))
    try:
        futures = {pool.submit(summarize_entry, client, directory, e, model=model): e for e in entries}
        summaries = collect_summaries(futures, progress=progress)
    except BaseException:
        pool.shutdown(wait=False, cancel_futures=True)
        raise
    pool.shutdown()
    return summaries


def render_report(summaries) -> str:
    return "".join(f"## {s.name}\n\n{s.summary}\n\n" for s in summaries)

