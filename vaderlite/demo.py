"""
Demo harness — scores the classic VADER example sentences.

Usage:
    python -m vaderlite demo
"""
from typing import Iterable, List, Optional, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vaderlite.core.analyzer import SentimentIntensityAnalyzer, get_default_analyzer
from vaderlite.core.scoring import SentimentScores

CONSOLE = Console()

LABEL_COLORS = {
    "Positive": "green",
    "Negative": "red",
    "Neutral": "yellow",
}

TYPICAL_SENTENCES = [
    "VADER is smart, handsome, and funny.",           # positive
    "VADER is smart, handsome, and funny!",           # punctuation emphasis
    "VADER is very smart, handsome, and funny.",      # booster word
    "VADER is VERY SMART, handsome, and FUNNY.",      # ALL CAPS emphasis
    "VADER is VERY SMART, handsome, and FUNNY!!!",
    "VADER is VERY SMART, uber handsome, and FRIGGIN FUNNY!!!",  # close to ceiling
    "VADER is not smart, handsome, nor funny.",       # negation
    "The book was good.",
    "At least it isn't a horrible book.",             # negated negative, contraction
    "The book was only kind of good.",                # dampener
    "The plot was good, but the characters are uncompelling and the dialog is not great.",
    "Today SUX!",                                     # slang + caps
    "Today only kinda sux! But I'll get by, lol",     # "but" shift
    "Make sure you :) or :D today!",                  # emoticons
    "Catch utf-8 emoji such as 💘 and 💋 and 😁",       # emoji
    "Not bad at all",
]

TRICKY_SENTENCES = [
    "Sentiment analysis has never been good.",
    "Sentiment analysis has never been this good!",
    "Most automated sentiment analysis tools are shit.",
    "With VADER, sentiment analysis is the shit!",
    "Other sentiment analysis tools can be quite bad.",
    "On the other hand, VADER is quite bad ass",
    "VADER is such a badass!",
    "Without a doubt, excellent idea.",
    "Roger Dodger is one of the most compelling variations on this theme.",
    "Roger Dodger is at least compelling as a variation on the theme.",
    "Roger Dodger is one of the least compelling variations on this theme.",
    "Not such a badass after all.",
    "Without a doubt, an excellent idea.",
]


def format_compound(scores: SentimentScores) -> str:
    color = LABEL_COLORS.get(scores.label, "white")
    return f"[{color}]{scores.compound:+.4f}[/{color}]"


def scores_table(rows: Iterable[Tuple[str, SentimentScores]], title: Optional[str] = None) -> Table:
    table = Table(
        title=title,
        box=box.ROUNDED,
        border_style="bright_blue",
        header_style="bold white on dark_blue",
        expand=True,
    )
    table.add_column("#", justify="right", style="dim", min_width=3, no_wrap=True)
    table.add_column("Text")
    table.add_column("neg", justify="right", no_wrap=True)
    table.add_column("neu", justify="right", no_wrap=True)
    table.add_column("pos", justify="right", no_wrap=True)
    table.add_column("compound", justify="right", no_wrap=True)
    table.add_column("Label", justify="center", no_wrap=True)

    for i, (text, sc) in enumerate(rows, 1):
        color = LABEL_COLORS.get(sc.label, "white")
        table.add_row(
            str(i),
            escape(text),
            f"{sc.neg:.3f}",
            f"{sc.neu:.3f}",
            f"{sc.pos:.3f}",
            format_compound(sc),
            f"[{color}]{sc.label}[/{color}]",
        )
    return table


def score_all(analyzer: SentimentIntensityAnalyzer,
              sentences: Sequence[str]) -> List[Tuple[str, SentimentScores]]:
    return [(s, analyzer.polarity_scores(s)) for s in sentences]


def run_demo(analyzer: Optional[SentimentIntensityAnalyzer] = None,
             console: Console = CONSOLE) -> None:
    analyzer = analyzer or get_default_analyzer()

    console.print()
    console.print(scores_table(
        score_all(analyzer, TYPICAL_SENTENCES),
        title="[bold]Typical cases[/bold]  [dim]negation, punctuation, caps, "
              "degree modifiers, slang, \"but\", emoticons, emoji[/dim]",
    ))
    console.print(scores_table(
        score_all(analyzer, TRICKY_SENTENCES),
        title="[bold]Tricky sentences[/bold]  [dim]idioms, \"never this good\", "
              "\"least\" as negation vs comparison[/dim]",
    ))
    console.print(
        "[dim]compound: normalized, weighted composite score in [-1, 1].  "
        "pos/neu/neg: proportions of the text in each category (sum ≈ 1).[/dim]"
    )


if __name__ == "__main__":
    run_demo()
