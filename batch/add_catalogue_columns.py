"""在庫サマリーCSVにカタログ表記の列を追加するバッチスクリプト.

既存の列と値は変更せず、以下の3列を末尾に追加してファイルを上書きする。
3列が既にあれば（再実行時）値だけを更新する。
  - Catalogue Product Title
  - Catalogue Size
  - Catalogue Print

Usage:
    python -m batch.add_catalogue_columns                      # public/Stock Summary.csv
    python -m batch.add_catalogue_columns "path/to/stock.csv"
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from batch.catalogue_common import (
    DEFAULT_CATALOGUE_PATH,
    LOG_FORMAT,
    CatalogueEntry,
    load_catalogue,
    read_csv_rows,
    write_csv_rows,
)

logger = logging.getLogger(__name__)

DEFAULT_STOCK_PATH = Path("public/Stock Summary.csv")

# 在庫の PRINTS → カタログの柄名（商品タイトルの前半）
STOCK_PRINT_TO_CATALOGUE_PRINT = {
    "ROCKET": "Rocket Ranger",
    "DAISY": "Lilac Blossom",
    "PEAR": "Soft Pear",
    "3 ROSES": "Petal Pops",
    "ORANGE": "Joyful Orbs",
    "MOON": "Moon and Stars",
    "MUSHROOM": "Mushie Mini",
    "POPSICLES": "Popsicles",
    "PINE": "Pine Cone",
    "GREEN": "Aloe Mist",
    "PINK": "Baby Blush",
    "PEACH": "Soft Coral",
    "COCONUT MILK": "Coconut Milk",
    "NUTS": "Naughty Nuts",
}

# 在庫の ITEM → カタログの商品種別（商品タイトルの後半）
STOCK_ITEM_TO_CATALOGUE_PRODUCT_TYPE = {
    "GIRLS ROMPERS": "Muslin Rompers - Mayra",
    "KNEE LENGTH ROMPERS": "Muslin Rompers - Unisex",
    "GIRLS COLLAR FROCK": "Muslin Collar Frock",
    "GIRLS J.PAN COLLAR FROCK": "Japanese Muslin Frock",
    "FRILL SLEEVE FROCK": "Frill Sleeve Muslin Frock",
    "SLEEVELESS FROCK": "Sleeveless Muslin Cotton Frock",
    "PYJAMAS": "Long Sleeve Pyjamas",
    "BOYS CO ORDS": "Boys Co ord set",
    "JHABLA AND SHORTS-SLEEVELESS": "Sleeveless Jabla and Shorts",
    "JHABLA AND SHORTS-HALF SLEEVES": "Half Sleeve Jabla and Shorts",
    "GIRLS COORDS-HONCHO": "Flora Bow Co ord set",
    "GIRLS COORDS-LAYERED": "Layered Co ord set",
    "GIRLS COORDS-RUFFLE": "Ruffle Sleeve Co ord set",
    "NB- JHABLA KNOTTED": "Jhabla Knotted",
    "NB- JHABLA SLEEVELESS": "Sleeveless jabla",
    "NB- JHABLA HALF SLEEVES": "Half Sleeve Jabla and Shorts",
    "NB- SHORTS": "Newborn Shorts",
    "NB-NAPPY": "Newborn Nappy",
    "NB-CAP": "Newborn Cap",
    "NB-MITTENS": "Newborn Mittens",
    "NB-BOOTIES": "Newborn Booties",
    "TOWEL": "Towel",
    "SWADDLE": "Swaddle",
    "BLANKET": "Blanket",
}

# 在庫のサイズ → カタログのサイズ表記
STOCK_SIZE_TO_CATALOGUE_SIZE = {
    "0-3": "(0-3M)",
    "3-6": "(3-6M)",
    "6-12": "(6-12M)",
    "1-2": "(1-2Y)",
    "2-3": "(2-3Y)",
    "3-4": "(3-4Y)",
    "4-5": "(4-5Y)",
    "5-6": "(5-6Y)",
}

# 照合に使う在庫の列（大文字・小文字どちらの見出しでもよい）
LOOKUP_COLUMNS = ("ITEM", "SIZE", "PRINTS")
CATALOGUE_COLUMNS = ["Catalogue Product Title", "Catalogue Size", "Catalogue Print"]


def to_catalogue_size(stock_size: str) -> str:
    """在庫のサイズをカタログ表記に変換する（未知のサイズは括弧で囲む）."""
    size = stock_size.strip()
    if not size:
        return ""
    return STOCK_SIZE_TO_CATALOGUE_SIZE.get(size, f"({size})")


def build_lookup(entries: list[CatalogueEntry]) -> dict[tuple[str, str], CatalogueEntry]:
    """(柄, 商品種別) の小文字キーでカタログを引けるようにする（先勝ち）."""
    lookup: dict[tuple[str, str], CatalogueEntry] = {}
    for entry in entries:
        key = (entry.print_name.lower(), entry.product_type.lower())
        lookup.setdefault(key, entry)
    return lookup


def find_catalogue_title(
    stock_item: str,
    stock_print: str,
    lookup: dict[tuple[str, str], CatalogueEntry],
) -> str:
    """在庫の品目と柄からカタログの商品タイトルを探す.

    完全一致がなければ、同じ柄で商品種別が互いに部分一致するものを採用する。
    """
    print_name = STOCK_PRINT_TO_CATALOGUE_PRINT.get(stock_print.strip())
    product_type = STOCK_ITEM_TO_CATALOGUE_PRODUCT_TYPE.get(stock_item.strip())
    if not print_name or not product_type:
        return ""

    print_lower = print_name.lower()
    type_lower = product_type.lower()
    found = lookup.get((print_lower, type_lower))
    if found:
        return found.product_title

    for (entry_print, entry_type), entry in lookup.items():
        if entry_print == print_lower and (entry_type in type_lower or type_lower in entry_type):
            return entry.product_title
    return ""


def _field(row: dict[str, str], name: str) -> str:
    for key, value in row.items():
        if key.upper() == name:
            return value or ""
    return ""


def add_catalogue_columns(
    stock_rows: list[dict[str, str]],
    entries: list[CatalogueEntry],
) -> list[dict[str, str]]:
    """各在庫行にカタログ表記の3列を追加した新しい行を返す."""
    lookup = build_lookup(entries)
    result = []
    for row in stock_rows:
        item = _field(row, "ITEM")
        prints = _field(row, "PRINTS")
        new_row = dict(row)
        new_row["Catalogue Product Title"] = find_catalogue_title(item, prints, lookup)
        new_row["Catalogue Size"] = to_catalogue_size(_field(row, "SIZE"))
        new_row["Catalogue Print"] = STOCK_PRINT_TO_CATALOGUE_PRINT.get(prints.strip(), "")
        result.append(new_row)
    return result


def run(stock_path: Path, catalogue_path: Path) -> int:
    """在庫ファイルを上書き更新する. 戻り値は更新した行数."""
    entries = load_catalogue(catalogue_path)
    columns, stock_rows = read_csv_rows(stock_path)
    present = {column.upper() for column in columns}
    missing = [column for column in LOOKUP_COLUMNS if column not in present]
    if missing:
        logger.warning(f"Stock summary has no {', '.join(missing)} column: {stock_path}")

    rows = add_catalogue_columns(stock_rows, entries)
    # 既存の列はそのまま残し、再実行時はカタログ列を上書きする
    output_columns = columns + [c for c in CATALOGUE_COLUMNS if c not in columns]
    write_csv_rows(stock_path, output_columns, rows)

    matched = sum(1 for row in rows if row["Catalogue Product Title"])
    logger.info(f"Added {len(CATALOGUE_COLUMNS)} columns to {stock_path}: {matched}/{len(rows)} rows matched")
    return len(rows)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    parser = argparse.ArgumentParser(description="Add catalogue-aligned columns to the stock summary CSV")
    parser.add_argument("stock_path", nargs="?", type=Path, default=DEFAULT_STOCK_PATH, help="Stock summary CSV")
    parser.add_argument("--catalogue", type=Path, default=DEFAULT_CATALOGUE_PATH, help="Product catalogue CSV")
    args = parser.parse_args(argv)

    if not args.stock_path.exists():
        logger.error(f"Stock summary file not found: {args.stock_path}")
        return 1
    if not args.catalogue.exists():
        logger.error(f"Product catalogue file not found: {args.catalogue}")
        return 1

    run(args.stock_path, args.catalogue)
    return 0


if __name__ == "__main__":
    sys.exit(main())
