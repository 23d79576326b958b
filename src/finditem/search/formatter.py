"""Rendering of search results."""

from __future__ import annotations

from typing import List, Sequence

from rich.table import Table

from finditem.models import ResultRecord


class ResultFormatter:
    """Turns result records into output lines or a rich table."""

    def render(self, results: Sequence[ResultRecord], simple: bool) -> List[str]:
        if simple:
            return [str(record.path) for record in results]
        return [
            f"{record.item_type}  {record.size:>10}  {record.modified}  "
            f"{record.name}  {record.path}"
            for record in results
        ]

    def render_table(self, results: Sequence[ResultRecord]) -> Table:
        """Colored table for interactive terminals; same fields as ``render``."""
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Type")
        table.add_column("Size", justify="right")
        table.add_column("Modified")
        table.add_column("Name")
        table.add_column("Path", overflow="fold")

        for record in results:
            style = "bold blue" if record.item_type == "d" else None
            table.add_row(
                record.item_type,
                record.size,
                record.modified,
                record.name,
                str(record.path),
                style=style,
            )
        return table

    @staticmethod
    def summary(results: Sequence[ResultRecord]) -> str:
        if not results:
            return "No items found."
        return f"Found {len(results)} item(s)."
