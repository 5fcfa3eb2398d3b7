"""
Download a text and turn it into a corpus word list.

What it does:
- Downloads the page (HTML or plain text), e.g. a Project Gutenberg edition
  of Shakespeare's complete works.
- Strips markup and tokenizes the visible text into a–z words.
- Lowercases, de-duplicates while preserving first-seen order, and writes to file.

Usage:
    python -m script.fetch_corpus --url <text or html url> \
        --out packages/datasets/data/words.shakespeare.txt
    # or alphabetically sorted:
    python -m script.fetch_corpus --url <...> --sort --out <...>
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

WORD_RE = re.compile(r"[A-Za-z]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, min_len: int = 2) -> list[str]:
    """Lowercase a–z tokens of at least `min_len` letters, first occurrence order."""
    words = [m.group(0).lower() for m in WORD_RE.finditer(text)]
    return unique_preserve_order(w for w in words if len(w) >= min_len)


def fetch_text(url: str) -> str:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        return BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    return r.text


def main():
    ap = argparse.ArgumentParser(description="Build a corpus word list from a downloaded text")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="packages/datasets/data/words.shakespeare.txt")
    ap.add_argument("--min-len", type=int, default=2, help="drop shorter tokens")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "first-seen order")
    args = ap.parse_args()

    words = extract_words(fetch_text(args.url), min_len=args.min_len)
    if args.sort:
        words = sorted(words)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()
