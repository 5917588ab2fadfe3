# 帖子接口：创建 / 列出
import json
import logging

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from backend.models.post import NewPostPayload, Post
from backend.services.post_store import PostStore
from backend.utils.exceptions import PostSerializationError

HTTP_BAD_REQUEST = 400
JSON_MEDIA_TYPE = "application/json"

logger = logging.getLogger(__name__)
router = APIRouter()

def get_store(request: Request) -> PostStore:
    return request.app.state.store

def get_json_indent(request: Request) -> int:
    return request.app.state.config.JSON_INDENT

def data_to_json(posts: list[Post], indent: int = 2) -> str:
    """把帖子列表转成带缩进的 JSON 字符串。"""
    try:
        return json.dumps([post.model_dump() for post in posts], ensure_ascii=False, indent=indent)
    except (TypeError, ValueError) as e:
        raise PostSerializationError(f"无法序列化帖子: {e}") from e

@router.post("/posts")
async def create_post(request: Request, store: PostStore = Depends(get_store)):
    body = await request.body()
    try:
        creation = NewPostPayload.model_validate(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"请求体不是合法 JSON: {e}")
        return Response(status_code=HTTP_BAD_REQUEST)
    except RecursionError:
        logger.warning("请求体嵌套过深，已拒绝")
        return Response(status_code=HTTP_BAD_REQUEST)
    except ValidationError as e:
        logger.warning(f"请求体结构不符: {e.error_count()} 个错误")
        return Response(status_code=HTTP_BAD_REQUEST)

    if not creation.is_valid():
        logger.warning("帖子数据无效，已拒绝")
        return Response(status_code=HTTP_BAD_REQUEST)

    post_id = store.create_post(creation.title, creation.content or "", creation.categories)
    logger.info(f"创建帖子 id={post_id} title={creation.title!r}")
    return Response(content=json.dumps(post_id), media_type=JSON_MEDIA_TYPE)

@router.get("/posts")
async def list_posts(store: PostStore = Depends(get_store), indent: int = Depends(get_json_indent)):
    return Response(content=data_to_json(store.get_all_posts(), indent), media_type=JSON_MEDIA_TYPE)
