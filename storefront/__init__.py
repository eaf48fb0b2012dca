"""ストアフロント（商品カタログ・カート・管理コンソール）のクライアントサービスパッケージ."""
