"""
读写锁

多个读者可以同时持有锁；写者独占，且写者等待期间不再放行新的读者，
避免读多写少时写者饿死。
"""

import threading
from contextlib import contextmanager


class ReadWriteLock:
    """基于 Condition 的读写锁（写者优先）"""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        """当前持有读锁的数量"""
        with self._cond:
            return self._readers

    @property
    def writer_active(self) -> bool:
        """是否有写者持有锁"""
        with self._cond:
            return self._writer

    def acquire_read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read called without a held read lock")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self):
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write called without a held write lock")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        """
        读锁上下文管理器

        使用方式:
            with lock.read_locked():
                value = items.get(key)
        """
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        """写锁上下文管理器"""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
