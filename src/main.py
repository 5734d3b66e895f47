import sys
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.traceback import install

import huffcode

console = Console()
install(show_locals=True)

app = typer.Typer()


@app.command()
def run(
    file: Path | None = typer.Argument(
        None,
        help="Text file to build the code table from (standard input if omitted)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    tokens: bool = typer.Option(False, "-t", "--tokens", help="Use whitespace-delimited tokens as symbols"),
    frequencies: bool = typer.Option(False, "-f", "--frequencies", help='Read "SYMBOL COUNT" lines instead of text'),
    tree: bool = typer.Option(False, "--tree", help="Print the Huffman tree"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    builder = huffcode.CodeTableBuilder(is_logging=logging)
    try:
        text = file.read_text(encoding="utf-8") if file is not None else sys.stdin.read()

        st = time.perf_counter()
        if frequencies:
            pairs = huffcode.parse_frequency_table(text.splitlines())
        else:
            pairs = huffcode.count_frequencies(text, tokens=tokens)
        huffman_tree = builder.build_tree(pairs)
        table = builder.code_table(huffman_tree)

        if logging:
            dt = time.perf_counter() - st
            console.print(f"Build time: {dt:.3f} sec")

        if tree:
            for line in huffman_tree.render():
                console.print(line, markup=False, highlight=False, soft_wrap=True)

        for line in huffcode.format_code_table(table):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
    except (huffcode.HuffmanError, UnicodeDecodeError, OSError) as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
