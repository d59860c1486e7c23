"""Tile display formatting with colors for terminal output."""

from rich.text import Text

from hkmahjong.core.tile import Tile, TileSuit


# Color schemes
SUIT_COLORS = {
    TileSuit.CHARACTERS: "red",
    TileSuit.BAMBOOS: "green",
    TileSuit.DOTS: "blue",
    TileSuit.WINDS: "yellow",
    TileSuit.DRAGONS: "yellow",
}


def tile_to_simple_str(tile: Tile) -> str:
    """Simple string representation of a tile (stable, for logging)."""
    return tile.name


def tile_to_rich_text(tile: Tile, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    if tile.is_flower:
        style = "bold magenta"
    else:
        style = f"bold {SUIT_COLORS[tile.suit]}"
    if highlight:
        style += " on white"
    return Text(f"[{tile.name}]", style=style)


def tiles_to_rich_text(tiles, separator: str = " ", highlight_id: str = None) -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile, highlight=tile.id == highlight_id))
    return result


def format_hand_with_indices(tiles) -> Text:
    """Hand tiles with 1-based selection numbers underneath."""
    top = Text()
    bottom = Text()
    for i, tile in enumerate(tiles):
        cell = tile_to_rich_text(tile)
        width = max(cell.cell_len, len(str(i + 1)))
        top.append_text(cell)
        top.append(" " * (width - cell.cell_len + 1))
        bottom.append(str(i + 1).ljust(width + 1), style="dim")
    return top + Text("\n") + bottom
