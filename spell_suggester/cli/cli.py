"""
cli.py - command line front end for the spell checker
Features:
- One-shot mode: suggestions for each word given on the command line
- Interactive mode with slash commands (/add, /freq, /stats, /config ...)
- Suggestions shown as a colour-coded table by edit distance
- Settings from a JSON config file, overridden by flags
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import sys
import time
from typing import List, Optional

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from spell_suggester.core.checker import Checker
from spell_suggester.core.errors import WordNotFoundError
from spell_suggester.core.suggestion import Suggestion
from spell_suggester.utils.config_manager import Config
from spell_suggester.utils.logger_utils import engine_log
from spell_suggester.utils.metrics_tracker import Metrics

# initialise console for rich output
console = Console()

DISTANCE_STYLES = {0: "bold green", 1: "yellow", 2: "magenta"}

HELP = (
    "Type a word to get suggestions.\n"
    "Commands: /add <word>  /freq <word>  /stats  /config [key val]  /help  /quit"
)


class CLI:
    """Interactive session over a built Checker."""

    def __init__(self, checker: Checker, cfg: Config, metrics: Optional[Metrics] = None):
        self.checker = checker
        self.cfg = cfg
        self.metrics = metrics or Metrics()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts the user for input.
        - Slash commands are dispatched to _handle_command.
        - Anything else is treated as a query.
        """
        console.rule("[bold magenta]Spell Suggester[/bold magenta]")
        console.print(f"[cyan]{HELP}[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Word[/green]", default="").strip()
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            if not line:
                continue
            if line.startswith("/"):
                self._handle_command(line)
                continue
            self.show(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str):
        try:
            parts = shlex.split(line)
        except ValueError as e:
            console.print(f"[red]Bad command:[/red] {e}")
            return
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("/q", "/quit", "/exit"):
            self._exit()
            return

        if cmd == "/help":
            console.print(f"[cyan]{HELP}[/cyan]")
            return

        if cmd == "/add" and args:
            for word in args:
                self.checker.add_word(word)
            console.print(f"[green]Added:[/green] {' '.join(args)}")
            return

        if cmd == "/freq" and args:
            try:
                freq = self.checker.frequency_of(args[0])
            except WordNotFoundError as e:
                console.print(f"[red]{e}[/red]")
                return
            console.print(f"{args[0].upper()}: {freq}")
            return

        if cmd == "/stats":
            self._show_stats()
            return

        if cmd == "/config":
            self._config(args)
            return

        console.print(f"[red]Unknown command:[/red] {line}")

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def show(self, word: str) -> List[Suggestion]:
        """Look up suggestions for `word`, record timing and print them."""
        limit = self.cfg.get("max_suggestions")
        visited_before = self.checker.nodes_visited
        t0 = time.perf_counter()
        suggestions = self.checker.suggest(word, limit=limit)
        self.metrics.record("suggest_time", time.perf_counter() - t0)
        self.metrics.record("nodes_visited", self.checker.nodes_visited - visited_before)

        if not suggestions:
            console.print(f"[dim](no suggestions for {word})[/dim]")
        else:
            self._display_suggestions(word, suggestions)
        return suggestions

    # DISPLAY -------------------------------------------------------------------------------
    def _display_suggestions(self, word: str, suggestions: List[Suggestion]):
        table = Table(title=f"Suggestions for {word}", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Distance", justify="right")
        table.add_column("Frequency", justify="right", style="dim")

        for i, s in enumerate(suggestions, 1):
            style = DISTANCE_STYLES.get(s.edit_distance, "white")
            table.add_row(
                str(i),
                f"[{style}]{s.string}[/{style}]",
                str(s.edit_distance),
                str(s.frequency),
            )
        console.print(table)

    def _show_stats(self):
        stats = self.checker.stats()
        table = Table(title="Dictionary", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Words", str(stats["words"]))
        table.add_row("Trie nodes", str(stats["nodes"]))
        table.add_row("Nodes visited", str(stats["nodes_visited"]))
        for key, (count, avg) in self.metrics.summary().items():
            table.add_row(f"avg {key} ({count} runs)", f"{avg:.4f}")
        console.print(table)

    def _config(self, args: List[str]):
        if len(args) == 2:
            try:
                self.cfg.set(args[0], args[1])
            except KeyError:
                console.print(f"[red]No such option:[/red] {args[0]}")
                return
            except ValueError as e:
                console.print(f"[red]Bad value:[/red] {e}")
                return
        lines = "\n".join(f"{k:15} = {v}" for k, v in self.cfg.items())
        console.print(Panel(lines, title="Config", border_style="cyan"))

    def _exit(self):
        console.rule("[red]Exiting[/red]")
        self.running = False


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spell-suggest",
        description="Suggest spelling corrections from a word list and a corpus.",
    )
    parser.add_argument("words", nargs="*", help="words to check (interactive if omitted)")
    parser.add_argument("-d", "--dictionary", help="word list file")
    parser.add_argument("-c", "--corpus", help="corpus file used for frequencies")
    parser.add_argument("-n", "--limit", type=_non_negative, help="max suggestions per word")
    parser.add_argument("--config", default="config.json", help="JSON config file")
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="engine log level"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config, autosave=False)

    if args.limit is not None:
        cfg.data["max_suggestions"] = args.limit
    dictionary = args.dictionary or cfg.get("dictionary")
    corpus = args.corpus or cfg.get("corpus")

    engine_log.path = cfg.get("log_path")
    engine_log.use_color = cfg.get("color")
    engine_log.set_level(args.log_level or cfg.get("log_level"))

    if not dictionary or not corpus:
        console.print("[red]Both a dictionary and a corpus file are required.[/red]")
        return 2

    try:
        checker = Checker.from_files(dictionary, corpus)
    except OSError as e:
        console.print(f"[red]Could not load dictionary:[/red] {e}")
        return 1

    cli = CLI(checker, cfg)
    if args.words:
        for word in args.words:
            cli.show(word)
        return 0

    cfg.autosave = True
    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
