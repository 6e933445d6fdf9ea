#!/usr/bin/env python3
"""
Command-line entry point for the word piece tools.

Subcommands:
- stats: coverage statistics of a vocabulary over a CoNLL corpus
- print: the corpus segmented into word pieces, one sentence per line
- completions: shell completion script for this command
"""
import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

from wordpieces import __version__
from wordpieces.errors import WordPiecesError
from wordpieces.pipelines import render, stats
from wordpieces.vocab.wordpiece_logging import setup_wordpiece_logging

PROG = "wordpieces"
SHELLS = ("bash", "zsh", "fish")


class CompletionParser(argparse.ArgumentParser):
    """ArgumentParser that remembers its option strings and subcommands for completion scripts."""

    def __init__(self, *args, **kwargs):
        # ArgumentParser.__init__ already calls add_argument for --help
        self.completion_options: List[str] = []
        self.subcommands: Dict[str, "CompletionParser"] = {}
        super().__init__(*args, **kwargs)

    def add_argument(self, *args, **kwargs):
        action = super().add_argument(*args, **kwargs)
        self.completion_options.extend(action.option_strings)
        return action


def build_parser() -> CompletionParser:
    p = CompletionParser(
        prog=PROG,
        description="Word piece segmentation of CoNLL corpora"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", dest="config", type=Path, default=None, help="YAML configuration file")
    p.add_argument("--log-dir", dest="log_dir", type=Path, default=None, help="Also write a log file to this directory")
    p.add_argument("-v", "--verbose", action="store_true", help="Show debug messages")

    # subparsers are created with type(p), so each one is a CompletionParser too
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p.subcommands["stats"] = stats.add_arguments(sub.add_parser("stats", help="Report word piece coverage statistics"))
    p.subcommands["print"] = render.add_arguments(sub.add_parser("print", help="Print the corpus segmented into word pieces"))

    comp = sub.add_parser("completions", help="Print a shell completion script")
    comp.add_argument("shell", metavar="SHELL", choices=SHELLS, help="Shell: " + ", ".join(SHELLS))
    p.subcommands["completions"] = comp

    return p


def _subcommand_options(parser: CompletionParser) -> Dict[str, List[str]]:
    """Map each subcommand (and "" for the top level) to its option strings."""
    options = {"": list(parser.completion_options)}
    for name, subparser in parser.subcommands.items():
        options[name] = list(subparser.completion_options)
    return options


def completion_script(shell: str, parser: Optional[CompletionParser] = None) -> str:
    """
    Generate a completion script for ``shell``.

    Subcommand names and options are completed; positional file arguments
    fall back to file name completion.
    """
    options = _subcommand_options(parser or build_parser())
    commands = [name for name in options if name]
    shell_names = " ".join(SHELLS)

    if shell == "bash":
        cases = "\n".join(
            f'        {name}) opts="{joined}" ;;'
            for name, joined in ((n, " ".join(o)) for n, o in options.items() if n)
        )
        command_pattern = "|".join(commands)
        top_level = " ".join(commands + options[""])
        return f"""_{PROG}() {{
    local cur cmd opts
    cur="${{COMP_WORDS[COMP_CWORD]}}"
    cmd=""
    for w in "${{COMP_WORDS[@]:1:COMP_CWORD-1}}"; do
        case "$w" in
            {command_pattern}) cmd="$w"; break ;;
        esac
    done
    if [[ -z "$cmd" ]]; then
        COMPREPLY=( $(compgen -W "{top_level}" -- "$cur") )
        return
    fi
    case "$cmd" in
{cases}
    esac
    if [[ "$cmd" == "completions" && "$cur" != -* ]]; then
        COMPREPLY=( $(compgen -W "{shell_names}" -- "$cur") )
    elif [[ "$cur" == -* ]]; then
        COMPREPLY=( $(compgen -W "$opts" -- "$cur") )
    else
        COMPREPLY=( $(compgen -f -- "$cur") )
    fi
}}
complete -o filenames -F _{PROG} {PROG}
"""

    if shell == "zsh":
        return f"""#compdef {PROG}
autoload -U bashcompinit && bashcompinit
{completion_script("bash", parser)}"""

    if shell == "fish":
        lines = [f"complete -c {PROG} -f -n '__fish_use_subcommand' -a '{name}'" for name in commands]
        for name, opts in options.items():
            condition = "__fish_use_subcommand" if not name else f"__fish_seen_subcommand_from {name}"
            for opt in opts:
                flag = f"-l {opt[2:]}" if opt.startswith("--") else f"-s {opt[1:]}"
                lines.append(f"complete -c {PROG} -n '{condition}' {flag}")
        lines.append(f"complete -c {PROG} -f -n '__fish_seen_subcommand_from completions' -a '{shell_names}'")
        return "\n".join(lines) + "\n"

    raise ValueError(f"Unsupported shell: {shell}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "completions":
        sys.stdout.write(completion_script(args.shell, parser))
        return 0

    logger = setup_wordpiece_logging(args.log_dir, PROG, args.verbose)

    try:
        if args.command == "stats":
            stats.run(args.wordpieces, args.corpus, args.output, args.config, show_config=args.verbose)
        else:
            render.run(args.wordpieces, args.corpus, args.marker, args.unknown, args.config, show_config=args.verbose)
    except WordPiecesError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
