"""一覧取得の世代管理."""


class LatestRequestGuard:
    """最後に発行した取得だけが結果を反映できるようにする.

    取得開始時に begin() で世代番号を受け取り、結果の反映前に
    is_current() で自分が最新か確認する。古い世代の結果は捨てる。
    """

    def __init__(self) -> None:
        """初期化."""
        self._generation = 0

    def begin(self) -> int:
        """新しい世代を開始する."""
        self._generation += 1
        return self._generation

    def is_current(self, generation: int) -> bool:
        """指定世代が最新か."""
        return generation == self._generation
