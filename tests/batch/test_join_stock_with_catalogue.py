"""在庫サマリーとカタログの結合バッチのテスト."""
import csv

from batch.catalogue_common import CatalogueEntry, read_csv_rows
from batch.join_stock_with_catalogue import build_title_index, join_product_ids, main


def _entry(title: str, product_id: str) -> CatalogueEntry:
    return CatalogueEntry.from_row({"Product Title": title, "Product id": product_id})


class TestJoinProductIds:
    """Product id の結合."""

    def test_タイトルの完全一致で先頭列に付与する(self) -> None:
        rows = join_product_ids(
            [{"Product Title": "Pine Cone - Towel", "Stock": "3"}, {"Product Title": "Unknown", "Stock": "1"}],
            [_entry("Pine Cone - Towel", "7")],
        )

        assert rows[0] == {"Product id": "7", "Product Title": "Pine Cone - Towel", "Stock": "3"}
        assert list(rows[0])[0] == "Product id"
        assert rows[1]["Product id"] == ""

    def test_既存のProduct_idは新しい値で置き換える(self) -> None:
        rows = join_product_ids(
            [{"Product id": "old", "Product Title": "Towel"}],
            [_entry("Towel", "5")],
        )
        assert rows == [{"Product id": "5", "Product Title": "Towel"}]

    def test_重複タイトルは最初の行を使う(self) -> None:
        index = build_title_index([_entry("Towel", "1"), _entry("Towel", "2")])
        assert index == {"Towel": "1"}


class TestCatalogueEntry:
    """カタログ行の解釈."""

    def test_タイトルを柄と商品種別に分ける(self) -> None:
        entry = _entry("Rocket Ranger - Muslin Rompers - Unisex", "9")
        assert entry.print_name == "Rocket Ranger"
        assert entry.product_type == "Muslin Rompers - Unisex"

    def test_タイトルが空ならNone(self) -> None:
        assert CatalogueEntry.from_row({"Product Title": "", "Product id": "1"}) is None


class TestMain:
    """コマンドラインからの実行."""

    def test_在庫ファイルに列を追加して上書きする(self, tmp_path) -> None:
        stock = tmp_path / "stock.csv"
        catalogue = tmp_path / "catalogue.csv"
        stock.write_text("Product Title, Stock\nPine Cone - Towel , 3\n", encoding="utf-8")
        catalogue.write_text("Product Title,Product id\nPine Cone - Towel,7\n", encoding="utf-8")

        assert main(["--stock", str(stock), "--catalogue", str(catalogue)]) == 0

        columns, rows = read_csv_rows(stock)
        assert columns == ["Product id", "Product Title", "Stock"]
        assert rows == [{"Product id": "7", "Product Title": "Pine Cone - Towel", "Stock": "3"}]
        with stock.open(newline="", encoding="utf-8") as f:
            assert next(csv.reader(f)) == ["Product id", "Product Title", "Stock"]

    def test_再実行してもProduct_id列は重複しない(self, tmp_path) -> None:
        stock = tmp_path / "stock.csv"
        catalogue = tmp_path / "catalogue.csv"
        stock.write_text("Product Title,QTY\nPine Cone - Towel,3\n", encoding="utf-8")
        catalogue.write_text("Product Title,Product id\nPine Cone - Towel,7\n", encoding="utf-8")
        args = ["--stock", str(stock), "--catalogue", str(catalogue)]

        assert main(args) == 0
        catalogue.write_text("Product Title,Product id\nPine Cone - Towel,12\n", encoding="utf-8")
        assert main(args) == 0

        with stock.open(newline="", encoding="utf-8") as f:
            assert next(csv.reader(f)) == ["Product id", "Product Title", "QTY"]
        _, rows = read_csv_rows(stock)
        assert rows == [{"Product id": "12", "Product Title": "Pine Cone - Towel", "QTY": "3"}]

    def test_ファイルがなければ終了コード1(self, tmp_path) -> None:
        catalogue = tmp_path / "catalogue.csv"
        catalogue.write_text("Product Title,Product id\n", encoding="utf-8")
        assert main(["--stock", str(tmp_path / "missing.csv"), "--catalogue", str(catalogue)]) == 1
