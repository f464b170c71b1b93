"""データベースモデルを一括エクスポートするモジュール.

新しいモデルを追加する際は、ここにインポート文を1行追加するだけで
テーブル作成(`app.batch.init_db`)の対象になります。

Example:
-------
    新しいモデル `Villain` を追加した場合:
    ```python
    from .villain import Villain
    ```

"""

from .hero import Hero

__all__ = ["Hero"]
