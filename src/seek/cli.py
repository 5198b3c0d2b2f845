"""Find, count or edit matches in text, files, directories or piped input.

Usage:
    seek --exact foo --text "some foo text" --all
    seek --regex '\\d+' --file notes.txt --nth 2 --replace_with N
    seek --between start end --exclude_matches --dir docs/ --max_depth 1 --count_by_source
    cat notes.txt | seek --exact TODO --all --count
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from seek.data_models.hit import Hit
from seek.data_models.search_options import SearchOptions
from seek.data_models.source import Source
from seek.edit import apply_edits, make_edits
from seek.evaluate import count, count_by_source
from seek.search.search import search_sources
from seek.sources import collect_sources

VERSION = "1.0.0"


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seek",
        description=(
            "Find/edit matches in a string or file using plain text or regex patterns."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    search_group = parser.add_mutually_exclusive_group(required=True)
    search_group.add_argument("-t", "--exact", help="A plain text string to find")
    search_group.add_argument("-x", "--regex", help="A regex pattern to match")
    search_group.add_argument(
        "-b",
        "--between",
        nargs=2,
        metavar=("FROM", "TO"),
        help="Two regex patterns; find/edit both matches and the text between",
    )
    parser.add_argument(
        "-e",
        "--exclude_matches",
        action="store_true",
        help="With --between, only find/edit the text between the two patterns",
    )

    # edit and evaluate flags are mutually exclusive with each other too
    action_group = parser.add_mutually_exclusive_group()
    action_group.add_argument("-p", "--prepend", help="Prepend the string to matches")
    action_group.add_argument("-a", "--append", help="Append the string to matches")
    action_group.add_argument(
        "-r", "--replace_with", help="The string to replace matches with"
    )
    action_group.add_argument("--count", action="store_true", help="Count all matches")
    action_group.add_argument(
        "--count_by_source", action="store_true", help="Count matches for each source"
    )

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("--text", help="The string to search within")
    source_group.add_argument("--file", help="The file to search within")
    source_group.add_argument("--files", nargs="+", help="Files to search within")
    source_group.add_argument("--dir", help="The directory to search within")
    parser.add_argument(
        "-i", "--in_place", action="store_true", help="Edit the file(s) in place"
    )
    parser.add_argument(
        "--max_depth",
        type=_non_negative_int,
        default=None,
        help="The maximum depth to recurse within --dir",
    )

    frequency_group = parser.add_mutually_exclusive_group()
    frequency_group.add_argument(
        "--nth", type=_positive_int, help="Find/edit only the nth match"
    )
    frequency_group.add_argument(
        "--every_nth", type=_positive_int, help="Find/edit every nth match"
    )
    frequency_group.add_argument(
        "--all", action="store_true", help="Find/edit all matches"
    )
    return parser


def _validate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.exclude_matches and args.between is None:
        parser.error("The '--exclude_matches' option requires the '--between' option.")
    if args.max_depth is not None and args.dir is None:
        parser.error("The '--max_depth' option requires the '--dir' option.")
    if args.in_place:
        if args.file is None and args.files is None and args.dir is None:
            parser.error(
                "The '--in_place' option requires '--file', '--files' or '--dir'."
            )
        if args.prepend is None and args.append is None and args.replace_with is None:
            parser.error(
                "The '--in_place' option requires '--prepend', '--append' "
                "or '--replace_with'."
            )


def _edit_sources(
    args: argparse.Namespace,
    sources: list[Source],
    hits_by_source: dict[str, list[Hit]],
) -> None:
    for source in sources:
        hits = hits_by_source[source.name]
        edits = make_edits(
            hits,
            prepend=args.prepend,
            append=args.append,
            replace_with=args.replace_with,
        )
        edited = apply_edits(source.text, edits)
        if args.in_place and source.is_file:
            if not edits:
                continue
            with open(source.name, "w", encoding="utf-8", newline="") as f:
                f.write(edited)
            print(f"Edited {len(edits)} matches → {source.name}")
        else:
            print(edited, end="" if edited.endswith("\n") else "\n")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate(parser, args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        options = SearchOptions(
            exact=args.exact,
            regex=args.regex,
            between=tuple(args.between) if args.between else None,
            exclude_matches=args.exclude_matches,
            nth=args.nth,
            every_nth=args.every_nth,
            all=args.all,
        )
    except ValidationError as exc:
        parser.error(
            "; ".join(str(err["msg"]) for err in exc.errors(include_url=False))
        )

    has_source_flag = any(
        v is not None for v in (args.text, args.file, args.files, args.dir)
    )
    pipe = None
    if not has_source_flag and sys.stdin is not None and not sys.stdin.isatty():
        pipe = sys.stdin

    try:
        sources = collect_sources(
            text=args.text,
            file=args.file,
            files=args.files,
            dir=args.dir,
            max_depth=args.max_depth,
            pipe=pipe,
        )
    except ValueError as exc:
        if not has_source_flag and pipe is None:
            parser.error(str(exc))
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

    hits_by_source = search_sources(sources, options)

    if args.count:
        print(count(hits_by_source))
    elif args.count_by_source:
        df = count_by_source(hits_by_source)
        for row in df.iter_rows(named=True):
            print(f"{row['source']}: {row['count']}")
    elif any(v is not None for v in (args.prepend, args.append, args.replace_with)):
        _edit_sources(args, sources, hits_by_source)
    else:
        for name, hits in hits_by_source.items():
            for hit in hits:
                print(f"{name}:{hit.position}:{hit.value}")


if __name__ == "__main__":
    main()
