import asyncio
import logging
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from wordscramble.game.engine import GameSession
from wordscramble.game.models import Accepted, GameSettings, Rejected
from wordscramble.game.rules import is_possible, normalize_candidate
from wordscramble.words.bank import ResourceUnavailable, WordBank
from wordscramble.words.dictionary import DictionaryUnavailable
from wordscramble.words.factory import create_dictionary

app = typer.Typer(help="WordScramble: spell as many words as you can from a root word.")
console = Console()

NEW_ROUND = ":new"
QUIT = ":quit"

@app.command()
def play(
    word_list: Optional[str] = typer.Option(None, help="Path to a newline-delimited root-word list"),
    dictionary: Optional[str] = typer.Option(None, help="Dictionary provider: remote or wordlist"),
    dictionary_path: Optional[str] = typer.Option(None, help="Word file for the wordlist dictionary"),
    language: Optional[str] = typer.Option(None, help="Language code passed to the dictionary"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show log output")
):
    """
    Plays rounds in the terminal until :quit or end of input.
    """
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=[RichHandler(console=console)])

    settings = GameSettings.from_env(
        word_list=word_list,
        dictionary_provider=dictionary,
        dictionary_path=dictionary_path,
        language=language
    )
    asyncio.run(_async_play(settings))

async def _async_play(settings: GameSettings):
    if settings.dictionary_provider.lower() == "wordlist":
        options = {"path": settings.dictionary_path, "language": settings.language}
    else:
        options = {"base_url": settings.dictionary_url, "timeout": settings.dictionary_timeout}
    try:
        checker = create_dictionary(settings.dictionary_provider, **options)
    except (ValueError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    session = GameSession(WordBank(settings.word_list), checker, settings)
    try:
        session.start_round()
    except ResourceUnavailable as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    console.print(f"Root word: [bold cyan]{session.root_word}[/bold cyan]  ({NEW_ROUND} for a new word, {QUIT} to stop)")

    while True:
        try:
            raw = console.input("> ")
        except EOFError:
            break

        command = raw.strip().lower()
        if command == QUIT:
            break
        if command == NEW_ROUND:
            session.start_round()
            console.print(f"Root word: [bold cyan]{session.root_word}[/bold cyan]")
            continue

        try:
            result = await session.submit(raw)
        except DictionaryUnavailable as e:
            console.print(f"[yellow]Warning: {escape(str(e))}[/yellow]")
            continue

        if isinstance(result, Accepted):
            console.print(f"[green]{result.word}[/green] (+{len(result.word)})  Score: {result.new_score}")
        elif isinstance(result, Rejected):
            console.print(f"[red]{result.title}[/red]: {escape(result.message)}")

    console.print(f"Final score: [bold]{session.score}[/bold] ({len(session.used_words)} words)")

@app.command()
def check(root: str, word: str):
    """
    Tells whether WORD can be spelled from the letters of ROOT.
    """
    root, word = normalize_candidate(root), normalize_candidate(word)
    if is_possible(word, root):
        console.print(f"[green]'{word}' can be spelled from '{root}'[/green]")
    else:
        console.print(f"[red]'{word}' cannot be spelled from '{root}'[/red]")
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
