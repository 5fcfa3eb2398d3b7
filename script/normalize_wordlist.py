"""
Normalize a word list for use as corpus or dictionary.

Features:
- Lowercases every line and strips surrounding whitespace.
- Drops blank lines and anything that is not a plain a–z word.
- Removes duplicates, preserving original order by default.
- Optional sorting AFTER dedupe (alphabetical).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.normalize_wordlist --in packages/datasets/data/ospd.txt --sort
"""

import argparse
from pathlib import Path

from packages.datasets import read_lines, write_lines
from packages.engine import is_clean_word


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def normalize(lines: list[str]) -> tuple[list[str], int]:
    """Return (clean unique words, number of dropped non-blank lines)."""
    words = [s.strip().lower() for s in lines if s.strip()]
    clean = [w for w in words if is_clean_word(w)]
    return unique_preserve_order(clean), len(words) - len(clean)


def main():
    ap = argparse.ArgumentParser(description="Lowercase, clean and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out, dropped = normalize(lines)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines, {dropped} dropped) -> Output: {outp} ({len(out)} unique)")

if __name__ == "__main__":
    main()
