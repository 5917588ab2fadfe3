# 内存中的帖子存储，进程退出即丢失
import logging
import threading

from backend.models.post import Post

logger = logging.getLogger(__name__)

class PostStore:
    def __init__(self):
        """
        初始化空存储。id 从 1 开始递增，永不复用。
        同一个实例在应用启动时创建一次，由所有请求共享。
        """
        self._next_id = 1
        self._posts: dict[int, Post] = {}
        self._lock = threading.Lock()

    def create_post(self, title: str, content: str, categories: list[str]) -> int:
        """
        分配下一个 id 并保存帖子。调用方负责先校验数据。
        :return: 新帖子的 id。
        """
        with self._lock:
            post_id = self._next_id
            self._next_id += 1
            self._posts[post_id] = Post(
                id=post_id,
                title=title,
                content=content,
                categories=list(categories),
            )
        logger.debug(f"保存帖子 id={post_id}")
        return post_id

    def get_all_posts(self) -> list[Post]:
        """按 id 升序返回所有帖子。"""
        with self._lock:
            return [self._posts[post_id] for post_id in sorted(self._posts)]

    def __len__(self):
        with self._lock:
            return len(self._posts)
