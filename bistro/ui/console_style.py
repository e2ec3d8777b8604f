# bistro/ui/console_style.py
from typing import Dict

_RESET = "\033[0m"

ANSI: Dict[str, str] = {
    "bold": "\033[1m",
    "red": "\033[91m",
    "green": "\033[92m",
    "yellow": "\033[93m",
    "cyan": "\033[96m",
}


def paint(text: str, style: str) -> str:
    return f"{ANSI[style]}{text}{_RESET}"


def bold(text: str) -> str:
    return paint(text, "bold")


def cyan(text: str) -> str:
    return paint(text, "cyan")


def status(text: str, ok: bool) -> str:
    """Green when ok, red otherwise."""
    return paint(text, "green" if ok else "red")


def stock_level(text: str, quantity: int, required: int) -> str:
    """Red below the required quantity, yellow for the last portion, green above."""
    if quantity < required:
        return paint(text, "red")
    if quantity < 2 * required:
        return paint(text, "yellow")
    return paint(text, "green")
