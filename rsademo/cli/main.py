"""rsademo CLI - Main commands."""
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from rsademo import setup_logging
from rsademo.core.config import RSAConfig, parse_key_size
from rsademo.core.crypto import KeyPair, RSAEngine
from rsademo.core.exceptions import RSAException
from rsademo.core.logging import get_logger

app = typer.Typer(
    name="rsademo",
    help="Textbook RSA key generation and byte-wise encryption",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)

logger = get_logger("rsademo.cli")

# Toy textbook parameters, insecure 12-bit modulus
TEXTBOOK_P = 61
TEXTBOOK_Q = 53
TEXTBOOK_E = 17


def configure_logging(verbose: bool = False):
    """Route log records through rich."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True
    )
    setup_logging(level)


def read_key_size(bits: Optional[str]) -> int:
    """Parse --bits, prompting when it was not given."""
    if bits is None:
        bits = typer.prompt("Enter the size of the RSA key pair (in bits)")
    try:
        return parse_key_size(bits)
    except RSAException as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


def print_key_pair(key_pair: KeyPair):
    table = Table(title=f"RSA key pair ({key_pair.bit_length}-bit modulus)")
    table.add_column("Field", style="cyan")
    table.add_column("Value", overflow="fold")
    table.add_row("n", str(key_pair.modulus))
    table.add_row("e", str(key_pair.public_exponent))
    table.add_row("d", str(key_pair.private_exponent))
    console.print(table)


@app.command()
def demo(
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Message to encrypt"),
    bits: Optional[str] = typer.Option(None, "--bits", "-b", help="Key size in bits"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
):
    """Generate a key pair, encrypt a message and decrypt it again."""
    configure_logging(verbose)
    logger.info("RSA Encryption/Decryption")
    
    if message is None:
        message = typer.prompt("Enter a message to encrypt", default="", show_default=False)
    message = message.rstrip("\r\n")
    logger.info(f"{len(message.encode('utf-8'))} bytes read")
    
    key_size = read_key_size(bits)
    engine = RSAEngine(RSAConfig(key_size=key_size))
    
    try:
        key_pair = engine.generate(key_size)
        logger.info(f"Public key (n,e): ({key_pair.modulus}, {key_pair.public_exponent})")
        logger.info(f"Private key (n,d): ({key_pair.modulus}, {key_pair.private_exponent})")
        
        encrypted = engine.encrypt(message)
        decrypted = engine.decrypt(encrypted)
    except RSAException as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    
    console.print(f"[bold]Original:[/bold] {escape(message)}")
    console.print(f"[bold]Encrypted:[/bold] {escape(str(encrypted))}", soft_wrap=True)
    console.print(f"[bold]Decrypted:[/bold] {escape(decrypted)}")
    
    if decrypted != message:
        console.print("[red]Round trip mismatch[/red]")
        raise typer.Exit(1)


@app.command()
def keygen(
    bits: Optional[str] = typer.Option(None, "--bits", "-b", help="Key size in bits"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
):
    """Generate and display a key pair (nothing is stored)."""
    configure_logging(verbose)
    key_size = read_key_size(bits)
    engine = RSAEngine(RSAConfig(key_size=key_size))
    
    try:
        key_pair = engine.generate(key_size)
    except RSAException as e:
        console.print(f"[red]Key generation failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    
    print_key_pair(key_pair)


@app.command()
def textbook(
    message: str = typer.Option("A", "--message", "-m", help="Message to encrypt"),
):
    """Run the classic p=61, q=53, e=17 example."""
    key_pair = KeyPair.from_primes(TEXTBOOK_P, TEXTBOOK_Q, TEXTBOOK_E)
    engine = RSAEngine(key_pair=key_pair)
    
    console.print(f"p = {TEXTBOOK_P}, q = {TEXTBOOK_Q}")
    console.print(f"n = {key_pair.modulus}")
    console.print(f"e = {key_pair.public_exponent}")
    console.print(f"d = {key_pair.private_exponent}")
    
    try:
        encrypted = engine.encrypt(message)
        decrypted = engine.decrypt(encrypted)
    except RSAException as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    
    console.print(f"Encrypted: {escape(str(encrypted))}", soft_wrap=True)
    console.print(f"Decrypted: {escape(decrypted)}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
