"""Console table rendering for the product list."""

from __future__ import annotations

from ims.application.dto import ProductDTO

_PADDING = 2


def render_product_table(products: list[ProductDTO], currency_symbol: str = "$") -> list[str]:
    """Lay out products as a dash-bordered table sized to its widest cells."""
    rows = [
        (str(p.id), p.name, str(p.quantity), p.price.format(currency_symbol))
        for p in products
    ]
    headers = ("ID", "Name", "Quantity", "Price")
    widths = [
        max([len(header)] + [len(row[col]) for row in rows]) + _PADDING
        for col, header in enumerate(headers)
    ]
    separator = "-" * (sum(widths) + 5)

    def _line(cells: tuple[str, str, str, str]) -> str:
        id_, name, quantity, price = cells
        return (
            f"{id_:<{widths[0]}}"
            f"{name:<{widths[1]}}"
            f"{quantity:<{widths[2]}}"
            f"{price:>{widths[3]}}"
        )

    lines = [separator, _line(headers), separator]
    lines.extend(_line(row) for row in rows)
    lines.append(separator)
    return lines
