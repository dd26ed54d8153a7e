"""로컬 키-값 저장소.

브라우저 localStorage와 같은 계약(get_item / set_item / remove_item)을 가진다.
값은 항상 문자열이다.
"""
import json
import logging
import os
import tempfile

logger = logging.getLogger(__name__)


class MemoryStorage:
    """프로세스 메모리에만 보관하는 저장소 (테스트/임시용)."""

    def __init__(self, initial=None):
        self._items = dict(initial or {})

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = str(value)

    def remove_item(self, key):
        self._items.pop(key, None)

    def keys(self):
        return list(self._items)


class LocalStorage:
    """JSON 파일 하나에 {key: string} 맵을 저장하는 저장소.

    파일이 없으면 빈 저장소로 취급한다. 쓰기는 임시 파일에 기록한 뒤
    os.replace로 교체하므로 중간에 실패해도 기존 파일은 남는다.
    """

    def __init__(self, path):
        self.path = os.fspath(path)

    def _read_all(self):
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            raw = f.read()
        if not raw.strip():
            return {}
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"storage file {self.path} is not a key-value map")
        return data

    def _write_all(self, items):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".storage-", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def _read_for_write(self):
        """쓰기 전 읽기. 손상된 파일은 빈 맵으로 보고 다음 쓰기에서 덮어쓴다."""
        try:
            return self._read_all()
        except ValueError as exc:
            logger.error("Storage file %s is unreadable, it will be overwritten: %s", self.path, exc)
            return {}

    def get_item(self, key):
        value = self._read_all().get(key)
        if value is None:
            return None
        return str(value)

    def set_item(self, key, value):
        items = self._read_for_write()
        items[key] = str(value)
        self._write_all(items)
        logger.debug("storage write: key=%s (%d bytes)", key, len(items[key]))

    def remove_item(self, key):
        items = self._read_for_write()
        if key in items:
            del items[key]
            self._write_all(items)

    def keys(self):
        return list(self._read_all())
