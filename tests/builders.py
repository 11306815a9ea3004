"""HTML builders shaped like the tracklist page."""


def track_row(title: str, duration: str, artist: str, spacer: bool = False) -> str:
    """Build one track row: title, duration, link, bold artist."""
    spacer_cell = '<td rowspan="2"><img src="cover.jpg"></td>' if spacer else ""
    return (
        f"<tr>{spacer_cell}<td>{title}</td><td>{duration}</td>"
        f'<td><a href="#">buy</a></td><td><b>{artist}</b></td></tr>\n'
    )


ALBUM_ROW = '<tr class="album"><td colspan="4">1. Various Artists: Collection</td></tr>\n'

NESTED_TABLE_ROW = (
    '<tr><td rowspan="3"><table border="0"><tr><td><img src="cover.jpg"></td></tr>'
    "</table></td></tr>\n"
)


def inner_table(*rows: str) -> str:
    return '<table cellspacing="0" width="100%">\n' + "".join(rows) + "</table>\n"


def page(*tables: str) -> str:
    """Wrap tables in the outer layout table of the tracklist page."""
    return (
        "<!DOCTYPE html>\n<html><head><title>Tracks</title></head><body>\n"
        '<table border="1"><tr><td>Header</td></tr></table>\n'
        '<table width="800"><tr><td>\n'
        + "".join(tables)
        + "</td></tr></table>\n</body></html>\n"
    )
