"""カタログ・在庫CSVバッチ共通ヘルパー."""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CATALOGUE_PATH = Path("public/Product Catalogue.csv")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass(frozen=True)
class CatalogueEntry:
    """商品カタログの1行（タイトルは「柄 - 商品種別」形式）."""

    product_title: str
    product_id: str
    print_name: str
    product_type: str

    @classmethod
    def from_row(cls, row: dict[str, str]) -> CatalogueEntry | None:
        """CSV行から生成する. タイトルが空ならNone."""
        title = row.get("Product Title", "")
        if not title:
            return None
        print_name, sep, product_type = title.partition(" - ")
        if not sep:
            print_name, product_type = "", title
        return cls(
            product_title=title,
            product_id=row.get("Product id", ""),
            print_name=print_name.strip(),
            product_type=product_type.strip(),
        )


def read_csv_rows(path: Path) -> tuple[list[str], list[dict[str, str]]]:
    """ヘッダー付きCSVを読み込む. 値の前後の空白は取り除く."""
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        columns = [name.strip() for name in reader.fieldnames or []]
        rows = []
        for raw in reader:
            rows.append(
                {
                    (key or "").strip(): (value or "").strip()
                    for key, value in raw.items()
                    if isinstance(value, str) or value is None
                }
            )
    return columns, rows


def write_csv_rows(path: Path, columns: list[str], rows: list[dict[str, str]]) -> None:
    """指定した列順でCSVを書き出す（列にない値は捨てる）."""
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore", lineterminator="\n")
        writer.writeheader()
        for row in rows:
            writer.writerow({column: row.get(column, "") for column in columns})


def load_catalogue(path: Path) -> list[CatalogueEntry]:
    """商品カタログCSVを読み込む."""
    _, rows = read_csv_rows(path)
    entries = [CatalogueEntry.from_row(row) for row in rows]
    result = [entry for entry in entries if entry is not None]
    logger.info(f"Loaded {len(result)} catalogue entries from {path}")
    return result
