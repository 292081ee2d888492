"""Initializes the content module and aggregates texts from all submodules."""

from .portfolio import generate_about, generate_contact
from .texts import get_texts as get_terminal_texts


def get_all_texts() -> dict[str, str]:
    """
    Returns a dictionary of all standalone texts from all content files.
    """
    texts = {}
    texts.update(get_terminal_texts())
    texts["about"] = generate_about()
    texts["contact"] = generate_contact()
    return texts
