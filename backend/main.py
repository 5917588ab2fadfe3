# FastAPI 应用程序的主要入口点，包括用于前端开发的 CORS 中间件
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from backend.api import posts
from backend.config import Config, config as default_config
from backend.services.post_store import PostStore
from backend.utils.logger import setup_logger

logger = logging.getLogger(__name__)

def create_app(cfg: Optional[Config] = None, store: Optional[PostStore] = None) -> FastAPI:
    """
    创建应用。store 在这里构造一次，挂在 app.state 上供所有请求共享。
    """
    cfg = cfg or default_config
    app = FastAPI(title=cfg.APP_TITLE)
    app.state.config = cfg
    app.state.store = store if store is not None else PostStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # 注册路由
    app.include_router(posts.router)

    # 启动初始化
    @app.on_event("startup")
    async def startup_event():
        setup_logger(cfg.LOG_LEVEL, cfg.ENABLE_LOGGING)
        logger.info("Server started.")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info(f"Server shutting down. {len(app.state.store)} posts discarded.")

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_config.HOST, port=default_config.PORT, log_config=None)
