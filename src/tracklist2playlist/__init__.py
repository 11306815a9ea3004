"""tracklist2playlist - Turn a tracklist web page into a Spotify playlist.

Scrapes the tracks listed in the nested tables of a tracklist page with a
streaming tokenizer, keeps them in a flat track file and adds them to a
Spotify playlist.
"""

from .cli import main

__version__ = "0.1.0"

__all__ = ["main"]
