"""カタログ・在庫CSVの整備バッチ."""
