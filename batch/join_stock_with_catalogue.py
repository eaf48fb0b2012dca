"""在庫サマリーに商品カタログの Product id を結合するバッチスクリプト.

Product Title の完全一致で結合し、Product id を先頭列として追加する。
既に Product id 列があれば先頭に移して値を更新する。
カタログに同じタイトルが複数あれば最初の行を使う。

Usage:
    python -m batch.join_stock_with_catalogue
    python -m batch.join_stock_with_catalogue --stock "path/to/stock.csv"
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

DEFAULT_STOCK_PATH = Path("public/Stock Summary Revised.csv")

PRODUCT_ID_COLUMN = "Product id"


def build_title_index(entries: list[CatalogueEntry]) -> dict[str, str]:
    """商品タイトル → 商品ID（最初の出現を採用）."""
    index: dict[str, str] = {}
    for entry in entries:
        index.setdefault(entry.product_title, entry.product_id)
    return index


def join_product_ids(
    stock_rows: list[dict[str, str]],
    entries: list[CatalogueEntry],
) -> list[dict[str, str]]:
    """各在庫行の先頭に Product id を付けた新しい行を返す（不一致は空文字）."""
    index = build_title_index(entries)
    result = []
    for row in stock_rows:
        joined = {PRODUCT_ID_COLUMN: index.get(row.get("Product Title", ""), "")}
        joined.update((key, value) for key, value in row.items() if key != PRODUCT_ID_COLUMN)
        result.append(joined)
    return result


def run(stock_path: Path, catalogue_path: Path) -> int:
    """在庫ファイルを上書き更新する. 戻り値は更新した行数."""
    entries = load_catalogue(catalogue_path)
    columns, stock_rows = read_csv_rows(stock_path)
    rows = join_product_ids(stock_rows, entries)
    other_columns = [column for column in columns if column != PRODUCT_ID_COLUMN]
    write_csv_rows(stock_path, [PRODUCT_ID_COLUMN] + other_columns, rows)
    logger.info(f"Joined {len(rows)} stock rows with catalogue: {stock_path}")
    return len(rows)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    parser = argparse.ArgumentParser(description="Join the stock summary with the product catalogue on Product Title")
    parser.add_argument("--stock", type=Path, default=DEFAULT_STOCK_PATH, help="Stock summary CSV")
    parser.add_argument("--catalogue", type=Path, default=DEFAULT_CATALOGUE_PATH, help="Product catalogue CSV")
    args = parser.parse_args(argv)

    for path in (args.stock, args.catalogue):
        if not path.exists():
            logger.error(f"File not found: {path}")
            return 1

    run(args.stock, args.catalogue)
    return 0


if __name__ == "__main__":
    sys.exit(main())
